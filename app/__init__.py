"""Gemini proxy with flash-to-pro model fallback."""

__version__ = "1.0.0"
