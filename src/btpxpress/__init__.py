"""BTP Xpress status API."""

__version__ = "1.0.0"
