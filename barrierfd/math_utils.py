"""Jump-intensity and small-jump approximation helpers for the CGMY-type model."""

import math

from scipy import special


def _upper_gamma(a: float, x: float) -> float:
    """Unnormalised upper incomplete gamma function Gamma(a, x)."""
    return float(special.gammaincc(a, x) * special.gamma(a))


def _check_y(y: float, name: str) -> None:
    if not 0.0 <= y < 1.0:
        raise ValueError(f"Invalid value of Y in {name}: expected 0 <= Y < 1")


def lambda_n(theta: float, sigma: float, nu: float) -> float:
    """Negative-jump decay rate."""
    root = math.sqrt(theta * theta / sigma**4 + 2.0 / (sigma * sigma * nu))
    return root + theta / (sigma * sigma)


def lambda_p(theta: float, sigma: float, nu: float) -> float:
    """Positive-jump decay rate."""
    root = math.sqrt(theta * theta / sigma**4 + 2.0 / (sigma * sigma * nu))
    return root - theta / (sigma * sigma)


def g1(y: float, x: float) -> float:
    """Upper incomplete gamma Gamma(1 - y, x), reducing to exp(-x) for y == 0."""
    if x < 0.0:
        raise ValueError("x must be non-negative in g1")
    _check_y(y, "g1")
    if y == 0.0:
        return math.exp(-x)
    return _upper_gamma(1.0 - y, x)


def g2(y: float, x: float) -> float:
    """Tail integral of t**(-y-1) * exp(-t); the exponential integral E1 for y == 0."""
    if x <= 0.0:
        raise ValueError("x must be positive in g2")
    _check_y(y, "g2")
    if y == 0.0:
        return float(special.exp1(x))
    return (math.exp(-x) * x**-y - _upper_gamma(1.0 - y, x)) / y


def _small_jump_variance(lam: float, delta_x: float, nu: float, y: float, g1_at_zero: float) -> float:
    scaled = lam * delta_x
    gamma_diff = g1_at_zero - g1(y, scaled)
    scale = math.pow(scaled, 1.0 - y) * math.exp(-scaled)
    return (1.0 / nu) * math.pow(lam, y - 2.0) * (-scale + (1.0 - y) * gamma_diff)


def sigma2(lambda_n: float, lambda_p: float, delta_x: float, nu: float, y: float) -> float:
    """Variance contributed by jumps smaller than the mesh width ``delta_x``."""
    g1_at_zero = g1(y, 0.0)
    return _small_jump_variance(lambda_p, delta_x, nu, y, g1_at_zero) + _small_jump_variance(
        lambda_n, delta_x, nu, y, g1_at_zero
    )


def omega(lambda_n: float, lambda_p: float, nu: float, delta_x: float, y: float) -> float:
    """Drift correction from jumps larger than the mesh width ``delta_x``."""
    _check_y(y, "omega")
    terms = (
        (lambda_p, 1.0),
        (lambda_p - 1.0, -1.0),
        (lambda_n, 1.0),
        (lambda_n + 1.0, -1.0),
    )
    total = 0.0
    for lam, sign in terms:
        tail = g2(y, lam * delta_x)
        total += sign * (math.pow(lam, y) / nu) * tail
    return total