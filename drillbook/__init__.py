"""Small classic exercises on arrays, strings, graphs and trees."""

__version__ = "0.1.0"
__all__ = ["arrays", "graphs", "text"]