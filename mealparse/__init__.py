"""Recipe extraction from model-written text and grocery list aggregation."""

__version__ = "0.1.0"
