"""Router exposing the Gemini proxy over HTTP."""

from fastapi import APIRouter, Request
from fastapi.responses import Response

from app.services.proxy import handle_event


router = APIRouter()


# Netlify's function path is kept so existing frontends work unchanged
PROXY_PATHS = [
    "/api/gemini-proxy",
    "/.netlify/functions/gemini-proxy",
]

# Every method is routed here so the handler itself answers 405
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


async def gemini_proxy(request: Request) -> Response:
    """
    Forward a question (and optional image) to Gemini.

    Body: ``{"prompt": str, "imageBase64Data": str | None, "isChat": bool}``.
    Returns the raw Gemini response, or ``{"message", "error"}`` with a 500.
    """
    event = {"httpMethod": request.method, "body": await request.body()}
    result = await handle_event(event)

    body = result.get("body")
    if body is None:
        return Response(status_code=result["statusCode"])
    return Response(
        content=body,
        status_code=result["statusCode"],
        media_type="application/json",
    )


for path in PROXY_PATHS:
    router.add_api_route(
        path,
        gemini_proxy,
        methods=ALL_METHODS,
        summary="Gemini proxy",
        description="Answer a question with the fast model, falling back to the strong model once.",
    )
