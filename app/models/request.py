"""Request models for the proxy and the Gemini generateContent payload."""

from typing import Any, Literal
from pydantic import BaseModel, Field, field_validator


# Fields the model must fill when answering a question (solution mode)
SOLUTION_FIELDS = [
    "simplified_question",
    "solution_steps",
    "final_answer",
    "recommendations",
]

SOLUTION_SCHEMA: dict[str, Any] = {
    "type": "OBJECT",
    "properties": {name: {"type": "STRING"} for name in SOLUTION_FIELDS},
    "required": list(SOLUTION_FIELDS),
}


class ProxyRequest(BaseModel):
    """Body sent by the frontend to the proxy."""

    prompt: str = Field(..., description="Question or chat message")
    imageBase64Data: str | None = Field(
        default=None, description="Base64 encoded image of the question"
    )
    isChat: bool = Field(default=False, description="Free-form chat instead of a solution")

    @field_validator("isChat", mode="before")
    @classmethod
    def _truthy(cls, value: Any) -> bool:
        # Any non-empty value selects chat mode, "false" included
        return bool(value)


class InlineData(BaseModel):
    """Inline data for image content."""

    mimeType: str = Field(..., description="MIME type of the data")
    data: str = Field(..., description="Base64 encoded data")


class Part(BaseModel):
    """Part of content, can be text or inline data."""

    text: str | None = Field(default=None, description="Text content")
    inlineData: InlineData | None = Field(default=None, description="Inline data")


class Content(BaseModel):
    """Content with role and parts."""

    role: Literal["user", "model"] = Field(default="user", description="Role of the content")
    parts: list[Part] = Field(..., description="Parts of the content")


class GenerationConfig(BaseModel):
    """Generation configuration constraining the model to structured JSON."""

    responseMimeType: str = Field(
        default="application/json", description="MIME type of the response"
    )
    responseSchema: dict[str, Any] = Field(
        default_factory=lambda: dict(SOLUTION_SCHEMA), description="Response schema"
    )


class GenerateContentPayload(BaseModel):
    """Body of a generateContent call."""

    contents: list[Content] = Field(..., description="Contents to generate from")
    generationConfig: GenerationConfig | None = Field(
        default=None, description="Generation configuration"
    )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the wire format, dropping unset optional fields."""
        return self.model_dump(exclude_none=True)
