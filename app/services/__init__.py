"""Services for the application."""

from .gemini import GeminiProvider
from .http import send_request
from .proxy import build_payload, generate_with_fallback, handle_event

__all__ = [
    "GeminiProvider",
    "send_request",
    "build_payload",
    "generate_with_fallback",
    "handle_event",
]
