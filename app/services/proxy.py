"""Proxy handler: builds the Gemini payload and falls back to a stronger model."""

import base64
import json
from typing import Any

from curl_cffi.requests import AsyncSession
from loguru import logger

from app.config import Settings, get_settings
from app.exceptions import MissingCredentialError
from app.models.request import (
    Content,
    GenerateContentPayload,
    GenerationConfig,
    InlineData,
    Part,
    ProxyRequest,
)
from app.models.response import ErrorResponse, UpstreamResponse
from app.services.gemini import GeminiProvider


FAILURE_MESSAGE = (
    "An error occurred while analyzing the question. Please try again later."
)

JSON_HEADERS = {"Content-Type": "application/json"}


def build_payload(request: ProxyRequest, image_mime_type: str = "image/jpeg") -> dict:
    """
    Build the generateContent body for a proxy request.

    Images are only sent in solution mode; chat mode is text only and gets no
    response schema.
    """
    parts = [Part(text=request.prompt)]
    if request.imageBase64Data and not request.isChat:
        parts.append(
            Part(inlineData=InlineData(mimeType=image_mime_type, data=request.imageBase64Data))
        )

    payload = GenerateContentPayload(contents=[Content(role="user", parts=parts)])
    if not request.isChat:
        payload.generationConfig = GenerationConfig()

    return payload.to_dict()


async def generate_with_fallback(
    provider: GeminiProvider, api_key: str, payload: dict
) -> UpstreamResponse:
    """Try the fast model, then the strong model once with the same payload."""
    fast_model = provider.settings.fast_model
    strong_model = provider.settings.strong_model

    try:
        logger.info(f"Attempt 1: using {fast_model}")
        response = await provider.invoke_model(api_key, fast_model, payload)
        logger.info(f"{fast_model} succeeded")
    except Exception as e:
        logger.warning(f"{fast_model} failed: {e}")
        logger.info(f"Attempt 2: falling back to {strong_model}")
        response = await provider.invoke_model(api_key, strong_model, payload)
        logger.info(f"{strong_model} succeeded")

    return response


def event_method(event: dict) -> str:
    """HTTP method of an API Gateway (v1 or v2) or Netlify style event."""
    method = event.get("httpMethod")
    if method is None:
        http = (event.get("requestContext") or {}).get("http") or {}
        method = http.get("method") or ""
    return method.upper()


def event_body(event: dict) -> str | bytes | None:
    body = event.get("body")
    if body is not None and event.get("isBase64Encoded"):
        body = base64.b64decode(body)
    return body


def _json_result(status_code: int, body: Any) -> dict:
    return {
        "statusCode": status_code,
        "headers": dict(JSON_HEADERS),
        "body": json.dumps(body, ensure_ascii=False),
    }


async def handle_event(event: dict, settings: Settings | None = None) -> dict:
    """
    Handle one proxy invocation.

    Args:
        event: ``httpMethod`` (or ``requestContext.http.method``) and a JSON ``body``
        settings: Settings to use; read from the environment when omitted

    Returns:
        ``{"statusCode": ..., "headers": ..., "body": ...}``; a 405 carries
        only the status code
    """
    if event_method(event) != "POST":
        return {"statusCode": 405}

    try:
        request = ProxyRequest.model_validate(json.loads(event_body(event)))

        settings = settings or get_settings()
        api_key = settings.gemini_api_key
        if not api_key:
            raise MissingCredentialError()

        payload = build_payload(request, settings.image_mime_type)

        async with AsyncSession() as session:
            provider = GeminiProvider(session, settings)
            response = await generate_with_fallback(provider, api_key, payload)

        return _json_result(200, response.body)

    except Exception as e:
        logger.exception(f"Proxy request failed: {e}")
        error = ErrorResponse(message=FAILURE_MESSAGE, error=str(e))
        return _json_result(500, error.model_dump())
