"""Single outbound HTTP call returning status code and parsed JSON."""

import json

from curl_cffi.requests import AsyncSession
from loguru import logger

from app.models.response import UpstreamResponse


INVALID_JSON_MESSAGE = "invalid JSON from upstream"


async def send_request(
    session: AsyncSession,
    method: str,
    url: str,
    headers: dict[str, str],
    data: bytes,
    proxy: str | None = None,
    timeout: float | None = None,
) -> UpstreamResponse:
    """
    Perform one request and parse its body as JSON.

    A body that is not valid JSON does not raise: it is replaced by an
    error-shaped body carrying the raw text, with the real status code.
    Transport errors (DNS, connection reset, timeout) propagate to the caller.
    """
    response = await session.request(
        method,
        url,
        headers=headers,
        data=data,
        proxy=proxy,
        timeout=timeout,
    )

    raw = response.text
    try:
        body = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning(
            f"Upstream returned invalid JSON (status {response.status_code}): "
            f"{raw[:500] if raw else 'empty'}"
        )
        body = {"error": {"message": INVALID_JSON_MESSAGE, "details": raw}}

    return UpstreamResponse(status_code=response.status_code, body=body)
