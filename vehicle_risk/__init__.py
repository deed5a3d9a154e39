"""Interactive vehicle insurance risk assessment."""

__version__ = "1.0.0"
