"""Release settings for publishing to GitHub."""

__version__ = "0.1.0"
