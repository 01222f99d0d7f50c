"""Version information for fluentrest."""

__version__ = "0.1.0"
