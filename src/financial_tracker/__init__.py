"""Personal finance tracker: categories, transactions and expense summaries."""

__version__ = "0.1.0"
