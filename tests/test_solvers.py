import numpy as np
import pytest

from barrierfd.solvers import BandedSolver, ThomasSolver, TridiagonalSolver


def _matrix(a, b, c):
    n = len(b)
    m = np.diag(np.asarray(b, dtype=float))
    m[np.arange(1, n), np.arange(n - 1)] = a
    m[np.arange(n - 1), np.arange(1, n)] = c
    return m


SYSTEMS = [
    ([1.0], [4.0, 3.0], [2.0]),
    ([-1.0, 0.5, 2.0], [4.0, 5.0, 6.0, 7.0], [1.0, -2.0, 1.5]),
    ([0.1] * 9, [0.8] * 10, [0.12] * 9),
]


@pytest.mark.parametrize("solver", [ThomasSolver(), BandedSolver()])
@pytest.mark.parametrize("a,b,c", SYSTEMS)
def test_recovers_known_solution(solver, a, b, c):
    expected = np.linspace(-1.0, 2.0, len(b))
    rhs = _matrix(a, b, c) @ expected
    result = solver.solve(a, b, c, list(rhs))
    assert np.allclose(result, expected)


def test_single_equation():
    assert ThomasSolver().solve([], [2.0], [], [6.0]) == pytest.approx([3.0])
    assert BandedSolver().solve([], [2.0], [], [6.0]) == pytest.approx([3.0])


def test_thomas_ignores_trailing_band_entries():
    a, b, c = SYSTEMS[1]
    rhs = [1.0, 2.0, 3.0, 4.0]
    short = ThomasSolver().solve(a, b, c, rhs)
    padded = ThomasSolver().solve([*a, 99.0], b, [*c, 42.0], rhs)
    assert short == pytest.approx(padded)


def test_solvers_agree():
    a, b, c = SYSTEMS[2]
    rhs = [float(i) for i in range(10)]
    assert ThomasSolver().solve(a, b, c, rhs) == pytest.approx(BandedSolver().solve(a, b, c, rhs))


def test_thomas_zero_leading_pivot():
    with pytest.raises(ZeroDivisionError):
        ThomasSolver().solve([1.0], [0.0, 1.0], [1.0], [1.0, 1.0])


@pytest.mark.parametrize("solver", [ThomasSolver(), BandedSolver()])
def test_singular_system(solver):
    with pytest.raises(ZeroDivisionError):
        solver.solve([1.0], [1.0, 1.0], [1.0], [1.0, 2.0])


@pytest.mark.parametrize(
    "a,b,c,rhs",
    [
        ([1.0, 1.0], [2.0, 2.0], [1.0], [1.0, 1.0]),
        ([1.0], [2.0, 2.0], [1.0, 1.0], [1.0, 1.0]),
        ([1.0], [2.0, 2.0], [1.0], [1.0]),
        ([], [], [], []),
    ],
)
def test_banded_rejects_bad_sizes(a, b, c, rhs):
    with pytest.raises(ValueError):
        BandedSolver().solve(a, b, c, rhs)


def test_thomas_rejects_empty_system():
    with pytest.raises(ValueError):
        ThomasSolver().solve([], [], [], [])


def test_base_is_abstract():
    with pytest.raises(TypeError):
        TridiagonalSolver()