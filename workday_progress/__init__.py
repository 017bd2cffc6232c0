"""Business-day progress for the current month."""

__version__ = "0.1.0"
