"""shipctl — shipping cutoff and delivery-date calculator."""

__version__ = "0.3.0"
