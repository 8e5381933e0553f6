"""Personal finance tracking API: expenses, earnings and savings behind Firebase login."""

__version__ = "0.1.0"
