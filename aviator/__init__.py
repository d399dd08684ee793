"""Aviator multiplier predictor package."""

__all__ = [
    "batch",
    "cli",
    "config",
    "constants",
    "exceptions",
    "models",
    "ops",
    "reporting",
    "service",
    "validation",
]

__version__ = "0.1.0"
