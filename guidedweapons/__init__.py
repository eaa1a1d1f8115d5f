"""HTTP service that loads guided weapon statistics from a CSV table into MongoDB and serves them as JSON."""

__version__ = "0.1.0"