"""Shortener Core — domain model for the URL shortener."""

__version__ = "0.1.0"
