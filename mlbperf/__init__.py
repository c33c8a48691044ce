"""MLB team performance analytics and game prediction."""

__all__ = [
    "cli",
    "config",
    "constants",
    "types",
    "normalization",
    "features",
    "models",
    "ops",
]

__version__ = "0.1.0"
