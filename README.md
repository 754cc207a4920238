# deltahedge

This package prices European options with the Black-Scholes model and
delta-hedges them. It has two parts:

1. **Simulated hedging.** It simulates stock price paths with an Euler
   step of geometric Brownian motion. Along each path it delta-hedges a
   European call and records the hedging error and the profit and loss.
2. **Market backtest.** It hedges one quoted option contract using CSV
   files of interest rates, closing prices and bid/offer quotes. For each
   day it backs out the implied volatility from the mid quote, then reports
   delta, hedging error and profit and loss.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
deltahedge [--data-dir DIR] [--out-dir DIR] [--seed N] [--simulations N] [--samples N]
```

| Option | Default | Meaning |
| --- | --- | --- |
| `--data-dir` | `data` | directory holding `interest.csv`, `sec_GOOG.csv` and `op_GOOG.csv` |
| `--out-dir` | `.` | directory the CSV results are written to |
| `--seed` | `89210` | seed of the random generator used for the simulation |
| `--simulations` | `1000` | number of simulated paths |
| `--samples` | `100` | number of paths written out in full |

The command first runs the simulation. The simulated stock starts at 100,
with drift 0.05 and volatility 0.24. The rate is 0.025, there is no dividend
yield, and the call has strike 105 and maturity 0.4, hedged in 100 steps.
The simulation writes three files into the output directory:

- `hedgeTest100.csv`: the stock prices of the sample paths, one path per line
- `option100.csv`: the call prices of the sample paths, one path per line
- `hedgeTest1000.csv`: the last step of every path, with stock price, option
  price, delta, hedging error, profit and loss, and hedged P&L

The command then reads its answers from standard input, as
whitespace-separated tokens:

- a start date, an end date and an option maturity date, each as
  `yyyy-mm-dd`. It asks again if a date is malformed, and again for start
  and end if the start is not before the end.
- the option type, `c`/`C` for a call or `p`/`P` for a put
- the strike price

If a data file cannot be opened, the command says so and treats that file as
empty. If no quote matches the chosen window, expiry, type and strike, it
prints `There is no matching option in the dataset.`. Otherwise it writes
`deltaHedge.csv` to the output directory. If the input ends early or the
hedge cannot be computed, it exits with status 1.

## Library use

```python
from deltahedge.blackscholes import BlackScholes, implied_volatility
from deltahedge.dates import business_years, check_format, parse_date

option = BlackScholes(
    strike=105, asset_price=100, volatility=0.24,
    rate=0.025, maturity=0.4, dividend_yield=0.0, is_call=True,
)
print(option.value(), option.delta(), option.vega())
print(option.describe())

vol = implied_volatility(105, 100, 4.0, 0.025, 0.4, 0.0, True)

years = business_years(parse_date("2011-07-05"), "2011-09-16")
```

- `deltahedge.normal.std_normal_cdf` is the standard normal CDF, computed
  with a five-term polynomial approximation.
- `BlackScholes` is a frozen dataclass. Its `vega()` is the quantity that
  `implied_volatility` uses as the derivative in its Newton-Raphson step. That
  step starts at 0.5 and stops at a tolerance of 1e-5. If the iteration does
  not settle, `implied_volatility` raises `ArithmeticError`.
- `check_format` tests for the `yyyy-mm-dd` shape. `parse_date` also accepts
  `/` or `.` as separators and raises `ValueError` for text that is not a date.
- `business_years` counts weekdays from start to end, both included, and
  divides by 252. It takes `date` objects or date strings.

The functions in `deltahedge.hedging` are:

- `SimulationParams`, `simulate_path`, `run_simulations` and
  `write_simulation_files` for the simulation. Each step is a `HedgeRow`.
- `load_rates`, `load_prices` and `load_option_quotes` read the market files
  and keep only the rows dated within the start and end dates. Each quote is
  an `OptionQuote`, and its `mid` is the average of bid and offer.
- `hedge_market` turns the data into one `HedgeRecord` per quote.
  `write_hedge_report` writes those records to a CSV file, preceded by the
  chosen dates, type and strike.

In `hedge_market`, time to maturity is measured once, from the first quote
date to the expiry, and is used for every day. Cash is carried from one day
to the next without accruing interest.

### Input file formats

- **Rates**: `date,rate` lines. The rate is given in percent.
- **Prices**: `date,close` lines.
- **Option quotes**: `date,expiry,C|P,strike,bid,offer` lines.

Lines whose first character is not a digit, such as headers, are skipped.

## What it does not do

The package does not fetch market data. The backtest works only from the
three CSV files in the data directory, under the names given above. There is
no interactive menu beyond the prompts described here. The simulation
parameters can be changed through `SimulationParams` in library use, but not
from the command line.