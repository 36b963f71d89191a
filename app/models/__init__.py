"""Data models for the application."""

from .request import (
    ProxyRequest,
    GenerateContentPayload,
    Content,
    Part,
    InlineData,
    GenerationConfig,
    SOLUTION_FIELDS,
    SOLUTION_SCHEMA,
)
from .response import UpstreamResponse, ErrorResponse

__all__ = [
    "ProxyRequest",
    "GenerateContentPayload",
    "Content",
    "Part",
    "InlineData",
    "GenerationConfig",
    "SOLUTION_FIELDS",
    "SOLUTION_SCHEMA",
    "UpstreamResponse",
    "ErrorResponse",
]
