"""Gemini generateContent provider."""

import json
from typing import Any

from curl_cffi.requests import AsyncSession
from loguru import logger

from app.config import Settings, settings as default_settings
from app.exceptions import (
    ContentBlockedError,
    UnexpectedResponseShapeError,
    UpstreamStatusError,
)
from app.models.response import UpstreamResponse
from app.services.http import send_request


def extract_candidate_text(body: Any) -> str | None:
    """Return ``candidates[0].content.parts[0].text`` or None when absent."""
    if not isinstance(body, dict):
        return None
    try:
        text = body["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    return text or None


def extract_block_reason(body: Any) -> str | None:
    """Return ``promptFeedback.blockReason`` or None when absent."""
    if not isinstance(body, dict):
        return None
    feedback = body.get("promptFeedback")
    if not isinstance(feedback, dict):
        return None
    return feedback.get("blockReason") or None


class GeminiProvider:
    """Provider for the Generative Language generateContent API."""

    def __init__(self, session: AsyncSession, settings: Settings | None = None):
        self.session = session
        self.settings = settings or default_settings

    def build_url(self, api_key: str, model: str) -> str:
        base = self.settings.gemini_base_api.rstrip("/")
        return (
            f"{base}/{self.settings.gemini_api_version}/models/{model}"
            f":generateContent?key={api_key}"
        )

    async def invoke_model(
        self, api_key: str, model: str, payload: dict
    ) -> UpstreamResponse:
        """
        Call ``model`` with ``payload`` and validate the response.

        The Gemini API answers 200 even for safety-filtered or empty
        completions, so the body is inspected for candidate text as well.

        Args:
            api_key: Gemini API key
            model: Model name, e.g. ``gemini-2.5-flash``
            payload: generateContent request body

        Returns:
            The upstream response, body untouched

        Raises:
            UpstreamStatusError: non-2xx status code
            ContentBlockedError: prompt blocked by the safety filter
            UnexpectedResponseShapeError: no candidate text in the body
        """
        data = json.dumps(payload).encode("utf-8")
        headers = {
            "Content-Type": "application/json",
            "Content-Length": str(len(data)),
        }

        response = await send_request(
            self.session,
            "POST",
            self.build_url(api_key, model),
            headers,
            data,
            proxy=self.settings.proxy,
            timeout=self.settings.timeout,
        )

        if not response.ok:
            raise UpstreamStatusError(model, response.status_code)

        if extract_candidate_text(response.body) is None:
            logger.error(f"Model {model} returned an invalid response: {response.body}")
            block_reason = extract_block_reason(response.body)
            if block_reason:
                raise ContentBlockedError(block_reason)
            raise UnexpectedResponseShapeError(model)

        return response
