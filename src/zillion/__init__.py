"""zillion — natural-language names for arbitrarily large numbers."""

__version__ = "0.5.1"
