"""SeoKar AI - AI writing suggestions for the post editor."""

__version__ = "0.1.0"
