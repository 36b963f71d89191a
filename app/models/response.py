"""Response models for upstream results and proxy errors."""

from typing import Any
from pydantic import BaseModel, Field


class UpstreamResponse(BaseModel):
    """Status code and parsed JSON body of an upstream call."""

    status_code: int = Field(..., description="HTTP status code")
    body: Any = Field(default=None, description="Parsed JSON body")

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class ErrorResponse(BaseModel):
    """Error body returned to the client when every model failed."""

    message: str = Field(..., description="User-facing message")
    error: str = Field(..., description="Underlying error message")
