"""Tour content store: seed routine and read-only content API."""

__version__ = "1.0.0"
