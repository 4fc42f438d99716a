"""Version information for runtime-cache."""

__version__ = "0.1.0"
