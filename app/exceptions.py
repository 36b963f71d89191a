"""Error types raised while proxying a request to Gemini."""


class ProxyError(Exception):
    """Base class for proxy errors."""


class MissingCredentialError(ProxyError):
    """The Gemini API key is not configured."""

    def __init__(self):
        super().__init__(
            "API key not found. Check the GEMINI_API_KEY environment variable."
        )


class UpstreamStatusError(ProxyError):
    """The upstream API answered with a non-2xx status code."""

    def __init__(self, model: str, status_code: int):
        self.model = model
        self.status_code = status_code
        super().__init__(f"Model {model} failed. Status code: {status_code}")


class ContentBlockedError(ProxyError):
    """The upstream safety filter blocked the prompt."""

    def __init__(self, block_reason: str):
        self.block_reason = block_reason
        super().__init__(f"Request was blocked for safety reasons: {block_reason}")


class UnexpectedResponseShapeError(ProxyError):
    """The upstream response has no candidate text."""

    def __init__(self, model: str):
        self.model = model
        super().__init__(f"Model {model} did not return a response in the expected format.")
