"""Read-only real-estate listing catalog API."""

__version__ = "0.1.0"
