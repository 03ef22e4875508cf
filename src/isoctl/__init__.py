"""isoctl: ISO 8601 week, ordinal, and duration codec with a CLI front end."""

__version__ = "0.1.0"
