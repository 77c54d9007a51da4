"""Google API samples: a Gmail settings CLI and a graph resource mirror."""

__version__ = "0.1.0"
