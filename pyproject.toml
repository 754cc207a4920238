[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "deltahedge"
version = "0.1.0"
description = "Black-Scholes pricing, implied volatility, and delta-hedging on simulated and market data"
requires-python = ">=3.10"
dependencies = []
keywords = ["black-scholes", "options", "delta hedging", "implied volatility", "finance"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Financial and Insurance Industry",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
deltahedge = "deltahedge.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["deltahedge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
