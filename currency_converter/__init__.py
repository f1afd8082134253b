"""Currency converter: pick two currencies and an amount, fetch the converted value."""

__version__ = "0.1.0"
