"""Version information for checkout-merge."""

__version__ = "0.1.0"
