"""Release workflow assistant: branch, PR, version bump, changelog."""

__version__ = "0.1.0"
