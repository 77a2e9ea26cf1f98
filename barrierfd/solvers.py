"""Solvers for tridiagonal linear systems."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

import numpy as np
from scipy.linalg import LinAlgError, solve_banded


class TridiagonalSolver(ABC):
    """Solves A x = rhs for a tridiagonal A.

    ``a`` is the sub-diagonal (``a[i]`` sits in row ``i + 1``), ``b`` the
    diagonal and ``c`` the super-diagonal (``c[i]`` sits in row ``i``).
    """

    @abstractmethod
    def solve(
        self,
        a: Sequence[float],
        b: Sequence[float],
        c: Sequence[float],
        rhs: Sequence[float],
    ) -> list[float]:
        """Return the solution vector."""


class ThomasSolver(TridiagonalSolver):
    """Thomas algorithm without pivoting; extra trailing entries of ``a`` and ``c`` are ignored."""

    def solve(self, a, b, c, rhs):
        n = len(rhs)
        if n == 0:
            raise ValueError("Empty system in Thomas algorithm")
        if len(b) < n or len(a) < n - 1 or len(c) < n - 1:
            raise ValueError("Invalid vector sizes for Thomas algorithm")

        pivot = b[0]
        if pivot == 0.0:
            raise ZeroDivisionError("Division by zero in Thomas algorithm")
        c_primes = [c[0] / pivot if n > 1 else 0.0]
        d_primes = [rhs[0] / pivot]

        supers = [*c[1 : n - 1], 0.0]
        for sub, diag, sup, d in zip(a, b[1:n], supers, rhs[1:]):
            m = diag - sub * c_primes[-1]
            if m == 0.0:
                raise ZeroDivisionError("Division by zero in Thomas algorithm")
            c_primes.append(sup / m)
            d_primes.append((d - sub * d_primes[-1]) / m)

        x = [d_primes[-1]]
        for cp, dp in zip(reversed(c_primes[:-1]), reversed(d_primes[:-1])):
            x.append(dp - cp * x[-1])
        x.reverse()
        return [float(v) for v in x]


class BandedSolver(TridiagonalSolver):
    """LAPACK banded solver; requires ``len(a) == len(c) == len(b) - 1 == len(rhs) - 1``."""

    def solve(self, a, b, c, rhs):
        n = len(b)
        if n == 0 or len(a) != n - 1 or len(c) != n - 1 or len(rhs) != n:
            raise ValueError("Invalid vector sizes for banded tridiagonal solver")

        bands = np.zeros((3, n))
        bands[0, 1:] = c
        bands[1] = b
        bands[2, :-1] = a
        try:
            x = solve_banded((1, 1), bands, np.asarray(rhs, dtype=float))
        except LinAlgError as exc:
            raise ZeroDivisionError("Singular tridiagonal system") from exc
        return [float(v) for v in x]