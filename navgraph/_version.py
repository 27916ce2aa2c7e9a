"""Version information for NavGraph."""

__version__ = "0.1.0"
