"""Signal-based matching and insight engine."""

__version__ = "0.1.0"
