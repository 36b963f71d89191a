import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from app.models.response import UpstreamResponse


@pytest.fixture
def success_body():
    """Well-shaped generateContent response"""
    return {
        "candidates": [
            {
                "content": {
                    "role": "model",
                    "parts": [
                        {
                            "text": '{"simplified_question": "2+2?", "solution_steps": "2+2=4", '
                            '"final_answer": "4", "recommendations": "Practice addition"}'
                        }
                    ],
                },
                "finishReason": "STOP",
            }
        ]
    }


@pytest.fixture
def blocked_body():
    """200 response whose prompt was blocked by the safety filter"""
    return {"promptFeedback": {"blockReason": "SAFETY"}}


@pytest.fixture
def ok(success_body):
    return UpstreamResponse(status_code=200, body=success_body)


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    return "test-key"


@pytest.fixture
def no_api_key(monkeypatch, tmp_path):
    """Unset the key and move away from any local .env file"""
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def mock_send():
    """Replace the outbound HTTP call made by the Gemini provider"""
    with patch("app.services.gemini.send_request", new_callable=AsyncMock) as mock:
        yield mock


@pytest.fixture
def mock_session_cls():
    """Replace the curl_cffi session opened per invocation"""
    with patch("app.services.proxy.AsyncSession", new_callable=MagicMock) as mock:
        yield mock


@pytest.fixture
def post_event():
    """Build a POST event carrying ``body`` as JSON"""

    def _build(body: dict) -> dict:
        return {"httpMethod": "POST", "body": json.dumps(body)}

    return _build
