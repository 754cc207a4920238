"""Command line: simulate delta hedging, then hedge a quoted option from market data."""

from __future__ import annotations

import argparse
import sys
from datetime import date
from pathlib import Path
from typing import Callable, Iterator

from deltahedge.dates import check_format, parse_date
from deltahedge.hedging import (
    SimulationParams,
    hedge_market,
    load_option_quotes,
    load_prices,
    load_rates,
    run_simulations,
    write_hedge_report,
    write_simulation_files,
)

Read = Callable[[], str]
Write = Callable[[str], None]


def prompt_date(prompt: str, read: Read, write: Write) -> date:
    """Ask for a yyyy-mm-dd date until a valid one is given."""
    while True:
        write(prompt)
        text = read()
        if check_format(text):
            try:
                return parse_date(text)
            except ValueError:
                pass
        write("Invalid format, try again.")


def prompt_option_type(read: Read, write: Write) -> tuple[str, bool]:
    """Ask for call or put; return the type letter and whether it is a call."""
    write("What's the type of your option? Call or put?\nPlease input c/C or p/P")
    while True:
        choice = read()[:1]
        if choice in ("c", "C"):
            return "C", True
        if choice in ("p", "P"):
            return "P", False
        write("You enter an invalid type. Try again.")


def _prompt_strike(read: Read, write: Write) -> float:
    write("Please input the option strike price.")
    while True:
        try:
            return float(read())
        except ValueError:
            write("Invalid strike price, try again.")


def _tokens(stream) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _load(loader, path: Path, write: Write, *args):
    try:
        return loader(path, *args)
    except OSError:
        write(f"Fail to open this {path.name}.")
        return []


def _hedge_interactively(args: argparse.Namespace, read: Read, write: Write) -> int:
    write("Please input the following dates information in the yyyy-mm-dd format.")
    while True:
        start = prompt_date("Please input the option start date.", read, write)
        end = prompt_date("Please input the option end date.", read, write)
        if start < end:
            break
        write("Start date should before end date. Try enter again.")
    expiry = prompt_date("Please input the option maturity date.", read, write)
    if end > expiry:
        write("The end date is greater than the option expiry date.\n"
              "The result will be till maturity.")
    option_type, is_call = prompt_option_type(read, write)
    strike = _prompt_strike(read, write)

    data_dir = Path(args.data_dir)
    rates = _load(load_rates, data_dir / "interest.csv", write, start, end)
    prices = _load(load_prices, data_dir / "sec_GOOG.csv", write, start, end)
    quotes = _load(
        load_option_quotes, data_dir / "op_GOOG.csv", write,
        start, end, expiry, option_type, strike,
    )
    if not quotes:
        write("There is no matching option in the dataset.")
        return 0
    try:
        records = hedge_market(
            [day for day, _ in rates], prices, [rate for _, rate in rates],
            quotes, expiry, strike, is_call,
        )
    except (ValueError, ArithmeticError) as err:
        write(f"Cannot hedge the option: {err}")
        return 1
    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    write_hedge_report(
        out_dir / "deltaHedge.csv", records, start, end, expiry, option_type, strike
    )
    return 0


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="deltahedge",
        description="Simulate delta hedging of a call, then hedge a quoted option.",
    )
    parser.add_argument("--data-dir", default="data",
                        help="directory with interest.csv, sec_GOOG.csv and op_GOOG.csv")
    parser.add_argument("--out-dir", default=".", help="directory for the CSV results")
    parser.add_argument("--seed", type=int, default=89210, help="random seed")
    parser.add_argument("--simulations", type=int, default=1000,
                        help="number of simulated paths")
    parser.add_argument("--samples", type=int, default=100,
                        help="number of paths written in full")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the simulation, then the interactive market hedge."""
    args = _parse_args(argv)
    paths = run_simulations(SimulationParams(), args.simulations, args.seed)
    write_simulation_files(paths, args.out_dir, args.samples)

    tokens = _tokens(sys.stdin)

    def read() -> str:
        try:
            return next(tokens)
        except StopIteration:
            raise EOFError from None

    try:
        return _hedge_interactively(args, read, print)
    except EOFError:
        print("Input ended before all the option details were given.", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())