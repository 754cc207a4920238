"""Delta-hedging of a call on simulated paths, and of quoted options on market data."""

from __future__ import annotations

import math
import random
import re
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Sequence

from deltahedge.blackscholes import BlackScholes, implied_volatility
from deltahedge.dates import business_years, parse_date

_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
_NUMBER_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _format_date(value: date) -> str:
    return f"{value.year:04d}-{_MONTHS[value.month - 1]}-{value.day:02d}"


def _leading_number(text: str) -> float:
    """Read the number at the start of the text, or 0.0 if there is none."""
    match = _NUMBER_PREFIX.match(text)
    return float(match.group()) if match else 0.0


def _number(value: float) -> str:
    return f"{value:g}"


@dataclass(frozen=True)
class SimulationParams:
    """Parameters of the simulated stock and of the call being hedged."""

    asset_price: float = 100.0
    maturity: float = 0.4
    drift: float = 0.05
    volatility: float = 0.24
    rate: float = 0.025
    dividend_yield: float = 0.0
    steps: int = 100
    strike: float = 105.0

    @property
    def step_size(self) -> float:
        return self.maturity / self.steps


@dataclass(frozen=True)
class HedgeRow:
    """One rebalancing step of a simulated hedge."""

    stock_price: float
    option_price: float
    delta: float
    cash: float
    hedging_error: float
    profit_loss: float
    pnl_hedged: float


def simulate_path(params: SimulationParams, rng: random.Random) -> list[HedgeRow]:
    """Simulate one stock path and the delta hedge of a call along it."""
    if params.steps < 1:
        raise ValueError("a path needs at least one step")
    dt = params.step_size
    growth = math.exp(params.rate * dt)

    def price(spot: float, time_left: float) -> tuple[float, float]:
        option = BlackScholes(
            params.strike, spot, params.volatility, params.rate,
            time_left, params.dividend_yield, True,
        )
        return option.value(), option.delta()

    value, delta = price(params.asset_price, params.maturity)
    first = HedgeRow(
        params.asset_price, value, delta, value - delta * params.asset_price,
        0.0, 0.0, 0.0,
    )
    rows = [first]
    previous = first
    for step in range(1, params.steps):
        prev_spot = previous.stock_price
        spot = (
            prev_spot
            + params.drift * prev_spot * dt
            + params.volatility * prev_spot * math.sqrt(dt) * rng.gauss(0.0, 1.0)
        )
        # The option is repriced from the previous step's stock price.
        value, delta = price(prev_spot, params.maturity - step * dt)
        carried = previous.delta * spot + previous.cash * growth
        error = carried - value
        previous = HedgeRow(
            spot, value, delta, carried - delta * spot,
            error, first.option_price - value, error,
        )
        rows.append(previous)
    return rows


def run_simulations(
    params: SimulationParams, count: int, seed: int
) -> list[list[HedgeRow]]:
    """Simulate count hedged paths from one seeded generator."""
    rng = random.Random(seed)
    return [simulate_path(params, rng) for _ in range(count)]


def write_simulation_files(
    paths: Sequence[Sequence[HedgeRow]], out_dir: Path | str, sample_count: int = 100
) -> list[Path]:
    """Write sample paths and the final step of every path as CSV files."""
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    stocks_file = out / "hedgeTest100.csv"
    options_file = out / "option100.csv"
    summary_file = out / "hedgeTest1000.csv"
    samples = paths[:sample_count]
    with stocks_file.open("w") as stocks, options_file.open("w") as options:
        for path in samples:
            stocks.write("".join(f"{_number(r.stock_price)}," for r in path) + "\n")
            options.write("".join(f"{_number(r.option_price)}," for r in path) + "\n")
    with summary_file.open("w") as summary:
        summary.write("Test delta hedging implementation by the Black-Scholes model\n")
        summary.write(f"{len(paths)} simulation\n")
        summary.write(
            "Simulated stock price,Option price,Delta,Hedging error,"
            "Profit and loss,PNL Hedged\n"
        )
        for path in paths:
            last = path[-1]
            values = (
                last.stock_price, last.option_price, last.delta,
                last.hedging_error, last.profit_loss, last.pnl_hedged,
            )
            summary.write(",".join(_number(v) for v in values) + "\n")
    return [stocks_file, options_file, summary_file]


@dataclass(frozen=True)
class OptionQuote:
    """A quoted option on one trading day."""

    date: date
    expiry: date
    option_type: str
    strike: float
    bid: float
    offer: float

    @property
    def mid(self) -> float:
        return (self.bid + self.offer) / 2


def _dated_lines(path: Path | str, start: date, end: date):
    """Yield (date text, rest of line) for data lines dated within [start, end]."""
    with open(path) as handle:
        for line in handle:
            line = line.rstrip("\r\n")
            if not line or not line[0].isdigit():
                continue
            text, _, rest = line.partition(",")
            if start <= parse_date(text) <= end:
                yield text, rest


def load_rates(path: Path | str, start: date, end: date) -> list[tuple[str, float]]:
    """Read (date, rate) pairs within the dates; rates are given in percent."""
    return [(text, _leading_number(rest) / 100) for text, rest in _dated_lines(path, start, end)]


def load_prices(path: Path | str, start: date, end: date) -> list[float]:
    """Read closing prices dated within the dates."""
    return [_leading_number(rest) for _, rest in _dated_lines(path, start, end)]


def load_option_quotes(
    path: Path | str,
    start: date,
    end: date,
    expiry: date,
    option_type: str,
    strike: float,
) -> list[OptionQuote]:
    """Read quotes of one option contract dated within the dates."""
    quotes = []
    with open(path) as handle:
        for line in handle:
            line = line.rstrip("\r\n")
            fields = line.split(",", 5)
            if len(fields) < 6 or not fields[0] or not fields[0][0].isdigit():
                continue
            day_text, expiry_text, kind, strike_text, bid_text, offer_text = fields
            day = parse_date(day_text)
            quote_expiry = parse_date(expiry_text)
            quote_strike = _leading_number(strike_text)
            if (
                start <= day <= end
                and quote_expiry == expiry
                and kind == option_type
                and quote_strike == strike
            ):
                quotes.append(
                    OptionQuote(
                        day, quote_expiry, kind, quote_strike,
                        _leading_number(bid_text), _leading_number(offer_text),
                    )
                )
    return quotes


@dataclass(frozen=True)
class HedgeRecord:
    """One day of hedging a quoted option."""

    date: str
    stock_price: float
    option_price: float
    implied_volatility: float
    delta: float
    hedging_error: float
    profit_loss: float
    pnl_hedged: float
    total_wealth_hedged: float
    total_wealth_unhedged: float


def hedge_market(
    dates: Sequence[str],
    prices: Sequence[float],
    rates: Sequence[float],
    quotes: Sequence[OptionQuote],
    expiry: date,
    strike: float,
    is_call: bool,
) -> list[HedgeRecord]:
    """Delta-hedge the quoted option day by day using implied volatilities."""
    if not quotes:
        return []
    if min(len(dates), len(prices), len(rates)) < len(quotes):
        raise ValueError("market data has fewer rows than the option quotes")
    # Time to maturity is measured once, from the first quote date.
    time_left = business_years(quotes[0].date, expiry)
    vols = []
    deltas = []
    for quote, spot, rate in zip(quotes, prices, rates):
        vol = implied_volatility(strike, spot, quote.mid, rate, time_left, 0.0, is_call)
        vols.append(vol)
        deltas.append(BlackScholes(strike, spot, vol, rate, time_left, 0.0, is_call).delta())

    first_price = quotes[0].mid
    cash = first_price - deltas[0] * prices[0]
    records = [
        HedgeRecord(dates[0], prices[0], first_price, vols[0], deltas[0],
                    0.0, 0.0, 0.0, 0.0, 0.0)
    ]
    for i in range(1, len(quotes)):
        # Cash is carried between rebalances without accruing interest.
        carried = deltas[i - 1] * prices[i] + cash
        cash = carried - deltas[i] * prices[i]
        error = carried - quotes[i].mid
        pnl = first_price - quotes[i].mid
        records.append(
            HedgeRecord(dates[i], prices[i], quotes[i].mid, vols[i], deltas[i],
                        error, pnl, error, error, pnl)
        )
    return records


def write_hedge_report(
    path: Path | str,
    records: Sequence[HedgeRecord],
    start: date,
    end: date,
    expiry: date,
    option_type: str,
    strike: float,
) -> None:
    """Write the hedging results with the user's choices as a CSV report."""
    with open(path, "w") as out:
        out.write("Using the Black-Scholes formula to construct the delta-hedging portfolio.\n")
        out.write("User input information:\n")
        out.write(f"Start date: {_format_date(start)}\n")
        out.write(f"End date: {_format_date(end)}\n")
        out.write(f"Option expiry date: {_format_date(expiry)}\n")
        out.write(f"Option type: {option_type}\n")
        out.write(f"Option strike price: {_number(strike)}\n")
        out.write("\n\n")
        out.write(
            "Date,Stock price,Option price,Implied volatility,Delta,Hedging error,"
            "Profit and loss,PNL Hedged,Total wealth with hedging,"
            "Total wealth without hedging\n"
        )
        for r in records:
            values = (
                r.stock_price, r.option_price, r.implied_volatility, r.delta,
                r.hedging_error, r.profit_loss, r.pnl_hedged,
                r.total_wealth_hedged, r.total_wealth_unhedged,
            )
            out.write(r.date + "," + ",".join(_number(v) for v in values) + "\n")