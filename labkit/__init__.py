"""An arithmetic expression calculator and simulated sensors with a manager."""

__version__ = "0.1.0"