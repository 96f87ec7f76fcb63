"""Typed multi-value dictionary with a text menu, and a shifted-alphabet text cipher."""

__version__ = "0.1.0"
__all__ = ["customdict", "cipher", "cli"]