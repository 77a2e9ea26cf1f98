"""Up-and-out call option priced on a log-price finite-difference mesh."""

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from . import math_utils
from .solvers import ThomasSolver, TridiagonalSolver

SPOT = 100.0
RATE = 0.0025
DIVIDEND_YIELD = 0.015
MATURITY = 0.5
VALUATION_TIME = 0.0
MIN_PRICE = 5.0
NUM_PRICES = 100
NUM_TIMES = 100


@dataclass
class UpOutCallOption:
    """Up-and-out call under a tempered-stable jump model."""

    strike: float
    barrier: float
    sigma: float
    nu: float
    theta: float
    y: float
    solver: TridiagonalSolver = field(default_factory=ThomasSolver, repr=False, compare=False)

    spot: float = field(init=False, repr=False)
    log_spot: float = field(init=False, repr=False)
    log_strike: float = field(init=False, repr=False)
    log_barrier: float = field(init=False, repr=False)
    rate: float = field(init=False, repr=False)
    dividend_yield: float = field(init=False, repr=False)
    maturity: float = field(init=False, repr=False)
    time: float = field(init=False, repr=False)
    tau: float = field(init=False, repr=False)
    s_min: float = field(init=False, repr=False)
    log_s_min: float = field(init=False, repr=False)
    num_prices: int = field(init=False, repr=False)
    num_times: int = field(init=False, repr=False)
    delta_tau: float = field(init=False, repr=False)
    delta_s: float = field(init=False, repr=False)
    delta_x: float = field(init=False, repr=False)
    lambda_n: float = field(init=False, repr=False)
    lambda_p: float = field(init=False, repr=False)
    bl: float = field(init=False, repr=False)
    bu: float = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.spot = SPOT
        self.log_spot = math.log(self.spot)
        self.log_strike = math.log(self.strike)
        self.log_barrier = math.log(self.barrier)
        self.rate = RATE
        self.dividend_yield = DIVIDEND_YIELD
        self.maturity = MATURITY
        self.time = VALUATION_TIME
        self.tau = self.maturity - self.time
        self.s_min = MIN_PRICE
        self.log_s_min = math.log(self.s_min)
        self.num_prices = NUM_PRICES
        self.num_times = NUM_TIMES
        self.delta_tau = self.tau / (self.num_times - 1)
        self.delta_s = (self.barrier - self.s_min) / (self.num_prices - 1)
        self.delta_x = (self.log_barrier - self.log_s_min) / (self.num_prices - 1)

        self.lambda_n = math_utils.lambda_n(self.theta, self.sigma, self.nu)
        self.lambda_p = math_utils.lambda_p(self.theta, self.sigma, self.nu)

        sig2 = math_utils.sigma2(self.lambda_n, self.lambda_p, self.delta_x, self.nu, self.y)
        omg = math_utils.omega(self.lambda_n, self.lambda_p, self.nu, self.delta_x, self.y)

        diffusion = sig2 * self.delta_tau / (2 * self.delta_x * self.delta_x)
        drift = (self.rate - self.dividend_yield + omg - 0.5 * sig2) * (
            self.delta_tau / (2 * self.delta_x)
        )
        self.bl = diffusion - drift
        self.bu = diffusion + drift

    @classmethod
    def from_params(
        cls,
        strike: float,
        barrier: float,
        params: Sequence[float],
        solver: TridiagonalSolver,
    ) -> "UpOutCallOption":
        """Build from a (sigma, nu, theta, y) parameter vector."""
        if len(params) < 4:
            raise ValueError("params must hold sigma, nu, theta and Y")
        sigma, nu, theta, y = params[:4]
        return cls(strike, barrier, sigma, nu, theta, y, solver)

    def describe(self) -> str:
        """Summary of the contract, model parameters and mesh."""
        return "\n".join(
            [
                f"Stock price: ${self.spot:g}, Strike: ${self.strike:g}, Barrier: ${self.barrier:g}",
                f"Rates -> r: {self.rate:g}, q: {self.dividend_yield:g}, Vol: {self.sigma:g}",
                f"Params -> nu: {self.nu:g}, theta: {self.theta:g}, Y: {self.y:g}",
                f"Time -> T: {self.maturity:g}, t: {self.time:g}, tau: {self.tau:g}",
                f"Mesh -> Prices: {self.num_prices}, Times: {self.num_times}",
                f"Steps -> deltaTau: {self.delta_tau:g}, deltaS: {self.delta_s:g}, "
                f"deltax: {self.delta_x:g}",
                f"Lambdas -> N: {self.lambda_n:g}, P: {self.lambda_p:g}",
                f"Coefficients -> Bl: {self.bl:g}, Bu: {self.bu:g}",
            ]
        )

    def dump_print(self) -> None:
        """Print the summary to standard output."""
        print()
        print(self.describe())

    def price(self) -> float:
        """Step the mesh back from maturity and interpolate at the spot."""
        n = self.num_prices
        values = [
            max(math.exp(self.log_s_min + j * self.delta_x) - self.strike, 0.0) for j in range(n)
        ]
        interior = values[1:-1]
        size = len(interior)
        sub = [self.bl] * (size - 1)
        diag = [1 - 2 * self.bl] * size
        sup = [self.bu] * (size - 1)

        for _ in range(self.num_times - 1):
            interior = self.solver.solve(sub, diag, sup, interior)

        values = [0.0, *interior, 0.0]

        j = int((self.log_spot - self.log_s_min) / self.delta_x)
        if not 0 <= j <= n - 2:
            raise ValueError("spot lies outside the price mesh")
        w = (self.log_spot - (self.log_s_min + j * self.delta_x)) / self.delta_x
        return (1 - w) * values[j] + w * values[j + 1]