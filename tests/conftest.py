"""
Pytest configuration and shared fixtures for Claude CLI tests.
"""

import io

import httpx
import pytest

from claude_cli.config import Settings
from claude_cli.services.ai_service import AIService
from claude_cli.services.config_store import Config


@pytest.fixture
def test_settings():
    """Create settings with debug logging off."""
    return Settings(debug=False)


@pytest.fixture
def config_path(tmp_path):
    """Config file location inside a temporary config directory."""
    return tmp_path / "claude-cli" / "config.json"


@pytest.fixture
def configured(config_path):
    """A Config holding a test API key."""
    return Config(config_path, "sk-test-key")


@pytest.fixture
def captured_requests():
    """List that the mock transport appends each outgoing request to."""
    return []


@pytest.fixture
def make_ai_service(test_settings, captured_requests):
    """Build an AIService whose transport returns the given body."""
    def _make(body, status_code=200):
        def handler(request):
            captured_requests.append(request)
            if isinstance(body, (dict, list)):
                return httpx.Response(status_code, json=body)
            return httpx.Response(status_code, text=body)

        client = httpx.Client(transport=httpx.MockTransport(handler))
        return AIService(settings=test_settings, client=client)

    return _make


@pytest.fixture
def success_payload():
    """A Messages API success payload."""
    return {
        "id": "msg_01",
        "type": "message",
        "role": "assistant",
        "content": [{"type": "text", "text": "hi"}],
        "usage": {"input_tokens": 10, "output_tokens": 1},
    }


@pytest.fixture
def stdout():
    return io.StringIO()

