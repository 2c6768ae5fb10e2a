"""orderflow - order processing with interchangeable delivery and payment strategies."""

__version__ = "0.1.0"
