"""Console parking lot manager with flat-file persistence."""

__version__ = "1.0.0"
