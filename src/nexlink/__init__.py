"""NexLink: opaque identifier boundary for the networking platform API."""

__version__ = "0.1.0"
