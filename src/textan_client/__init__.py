"""Toolkit-independent core of the TextAn annotation client."""

__all__ = [
    "adapters",
    "config",
    "report",
    "runtime",
    "wizard",
]

__version__ = "0.1.0"
