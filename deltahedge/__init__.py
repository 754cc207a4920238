"""Black-Scholes pricing, implied volatility and delta-hedging on simulated and market data."""

__version__ = "0.1.0"
__all__ = ["blackscholes", "cli", "dates", "hedging", "normal"]