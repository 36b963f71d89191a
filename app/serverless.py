"""AWS Lambda entry point.

Accepts API Gateway (REST or HTTP API) events and returns the proxy result
as-is, e.g. ``{"statusCode": 200, "headers": {...}, "body": "<json>"}``.
"""

import asyncio

from app.config import settings
from app.logger import setup_logging
from app.services.proxy import handle_event


setup_logging(settings.log_level)


def lambda_handler(event: dict, context) -> dict:
    return asyncio.run(handle_event(event))
