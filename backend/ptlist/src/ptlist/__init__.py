"""ptlist: timestamps of a periodic task between two invocation points."""

__version__ = "1.0.0"
