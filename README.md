# barrierfd

`barrierfd` prices up-and-out barrier call options with a finite-difference scheme. The underlying follows a CGMY-type jump model. Jumps smaller than the mesh width are replaced by a diffusion term, and larger jumps add a drift correction. Each backward time step solves one tridiagonal linear system.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
barrierfd
```

This command takes no options apart from `--help`. It prices one fixed example contract with strike 100 and barrier 125. The model parameters are sigma 0.3, nu 0.4, theta -0.2 and Y 0.7, and the system is solved with `ThomasSolver`. The command first prints the model setup: spot, strike, barrier, rates, parameters, times, mesh sizes and steps, jump decay rates, and the scheme coefficients. It then prints a line of the form `Option Price: <value>`.

## Library use

```python
from barrierfd.option import UpOutCallOption
from barrierfd.solvers import ThomasSolver, BandedSolver

option = UpOutCallOption.from_params(100, 125, [0.3, 0.4, -0.2, 0.7], ThomasSolver())
print(option.describe())
print(option.price())
```

You can also build `UpOutCallOption(strike, barrier, sigma, nu, theta, y, solver)` directly. If `solver` is left out, a `ThomasSolver` is used.

The mesh and scheme quantities are computed when the option is created and are available as attributes. These include `delta_x`, `delta_tau`, `lambda_n`, `lambda_p`, `bl` and `bu`.

The option has these methods:

- `describe()` returns the setup summary as a string.
- `dump_print()` prints that summary, preceded by a blank line.
- `price()` steps the mesh back from maturity and returns the value interpolated at the spot. It raises `ValueError` if the spot lies outside the mesh.

### Tridiagonal solvers

Every solver takes `solve(a, b, c, rhs)` and returns a list of floats. Here `a` is the sub-diagonal, `b` the diagonal and `c` the super-diagonal.

- `ThomasSolver` runs the Thomas algorithm without pivoting. It raises `ZeroDivisionError` on a zero pivot and `ValueError` on an empty system or on vectors that are too short. Extra trailing entries of `a` and `c` are ignored.
- `BandedSolver` uses SciPy's banded LAPACK solve. It requires `len(a) == len(c) == len(b) - 1` and `len(rhs) == len(b)`, and raises `ValueError` otherwise. It raises `ZeroDivisionError` if the matrix is singular.

Any subclass of `TridiagonalSolver` that implements `solve` can be passed to the option.

### Model helpers

The model's building blocks are in `barrierfd.math_utils`:

- `lambda_n(theta, sigma, nu)` and `lambda_p(theta, sigma, nu)` give the jump decay rates.
- `g1(y, x)` and `g2(y, x)` are the incomplete-gamma helper integrals. `g1` needs `x >= 0` and `g2` needs `x > 0`.
- `sigma2(lambda_n, lambda_p, delta_x, nu, y)` gives the diffusion term that stands in for small jumps.
- `omega(lambda_n, lambda_p, nu, delta_x, y)` gives the drift correction. It needs `lambda_p > 1`, because `g2` is evaluated at `(lambda_p - 1) * delta_x`.

The jump-activity parameter `y` must satisfy `0 <= y < 1`. Values outside that range, or arguments outside the domains above, raise `ValueError`.

## Fixed market inputs

These inputs are fixed:

- spot price 100
- risk-free rate 0.0025
- dividend yield 0.015
- maturity 0.5 years, valued at time 0

The mesh has 100 log-price nodes between 5 and the barrier, and 100 time levels. The option value is held at zero on both price boundaries.

## What this package does not do

- It does not calibrate model parameters to market prices. You supply sigma, nu, theta and Y yourself.
- The command line prices only the built-in example contract.
- The market inputs and mesh sizes listed above cannot be changed.