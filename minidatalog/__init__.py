"""A small Datalog engine with naive and semi-naive bottom-up evaluation."""

__version__ = "0.1.0"

__all__ = ["atom", "internalizer", "value", "terms", "naive", "delta_relation", "semi_naive"]