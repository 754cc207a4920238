"""Black-Scholes pricing of European options, with delta, vega and implied volatility."""

from __future__ import annotations

import math
from dataclasses import dataclass

from deltahedge.normal import std_normal_cdf

_IMPLIED_VOL_TOLERANCE = 0.00001
_IMPLIED_VOL_START = 0.5
_IMPLIED_VOL_MAX_ITERATIONS = 100_000


@dataclass(frozen=True)
class BlackScholes:
    """A European option under the Black-Scholes model."""

    strike: float
    asset_price: float
    volatility: float
    rate: float
    maturity: float
    dividend_yield: float = 0.0
    is_call: bool = True

    @property
    def _d1(self) -> float:
        sigma, t = self.volatility, self.maturity
        return (
            math.log(self.asset_price / self.strike)
            + (self.rate - self.dividend_yield + 0.5 * sigma * sigma) * t
        ) / (sigma * math.sqrt(t))

    def value(self) -> float:
        """Return the option's price."""
        d1 = self._d1
        d2 = d1 - self.volatility * math.sqrt(self.maturity)
        spot = self.asset_price * math.exp(-self.dividend_yield * self.maturity)
        discounted_strike = self.strike * math.exp(-self.rate * self.maturity)
        if self.is_call:
            return spot * std_normal_cdf(d1) - discounted_strike * std_normal_cdf(d2)
        return discounted_strike * std_normal_cdf(-d2) - spot * std_normal_cdf(-d1)

    def vega(self) -> float:
        """Return the sensitivity used for the implied-volatility iteration."""
        return (
            math.exp(-self.dividend_yield * self.maturity)
            * self.asset_price
            * math.sqrt(self.maturity)
            * std_normal_cdf(self._d1)
        )

    def delta(self) -> float:
        """Return the option's delta."""
        discount = math.exp(-self.dividend_yield * self.maturity)
        cdf = std_normal_cdf(self._d1)
        return discount * cdf if self.is_call else discount * (1.0 - cdf)

    def describe(self) -> str:
        """Return a readable summary of the option's parameters."""
        kind = "Call" if self.is_call else "Put"
        lines = [
            f"Underlying stock price: {self.asset_price:g}",
            f"Strike:                 {self.strike:g}",
            f"Volatility:             {self.volatility:g}",
            f"Risk-free rate:         {self.rate:g}",
            f"Maturity time:          {self.maturity:g}",
            f"Yield:                  {self.dividend_yield:g}",
            f"Option type:            {kind}",
        ]
        return "\n".join(lines) + "\n"


def implied_volatility(
    strike: float,
    asset_price: float,
    quoted_price: float,
    rate: float,
    maturity: float,
    dividend_yield: float,
    is_call: bool,
) -> float:
    """Find the volatility that reproduces a quoted price, by Newton-Raphson iteration.

    Raises ArithmeticError if the iteration does not settle.
    """

    def step(vol: float) -> tuple[float, float]:
        option = BlackScholes(
            strike, asset_price, vol, rate, maturity, dividend_yield, is_call
        )
        diff = option.value() - quoted_price
        return diff, vol - diff / option.vega()

    current = _IMPLIED_VOL_START
    diff, vol = step(current)
    for _ in range(_IMPLIED_VOL_MAX_ITERATIONS):
        if abs(vol - current) <= _IMPLIED_VOL_TOLERANCE or abs(diff) <= _IMPLIED_VOL_TOLERANCE:
            return vol
        current = vol
        diff, vol = step(current)
    raise ArithmeticError("implied volatility iteration did not converge")