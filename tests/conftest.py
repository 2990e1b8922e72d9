"""Shared pytest fixtures for gemini_studio tests."""

import pytest

from gemini_studio.config import PLACEHOLDER_API_KEY, Settings
from gemini_studio.models.request import GenerateContentRequest
from gemini_studio.models.response import GenerateContentResponse
from gemini_studio.services.client import GeminiImageClient


class StubTransport:
    """Records outgoing requests instead of sending them."""

    def __init__(
        self,
        response: GenerateContentResponse | None = None,
        error: Exception | None = None,
        api_key: str = "test-key",
    ):
        self.response = response or GenerateContentResponse()
        self.error = error
        self.api_key = api_key
        self.requests: list[tuple] = []
        self.keys_used: list[str] = []

    def with_api_key(self, api_key: str) -> "StubTransport":
        self.api_key = api_key
        return self

    async def generate_content(
        self, model: str, request: GenerateContentRequest
    ) -> GenerateContentResponse:
        self.requests.append((model, request))
        self.keys_used.append(self.api_key)
        if self.error is not None:
            raise self.error
        return self.response

    @property
    def last_request(self) -> GenerateContentRequest:
        return self.requests[-1][1]


def make_response(parts: list[dict]) -> GenerateContentResponse:
    """Build a single-candidate response from raw part dicts."""
    return GenerateContentResponse.model_validate(
        {
            "candidates": [
                {
                    "content": {"role": "model", "parts": parts},
                    "finishReason": "STOP",
                    "index": 0,
                }
            ],
            "modelVersion": "gemini-2.5-flash-image-preview",
        }
    )


def image_part(data: str) -> dict:
    return {"inlineData": {"mimeType": "image/png", "data": data}}


@pytest.fixture
def settings() -> Settings:
    """Settings with a usable API key."""
    return Settings(_env_file=None, gemini_api_key="test-key")


@pytest.fixture(params=["", "   ", PLACEHOLDER_API_KEY])
def unconfigured_settings(request) -> Settings:
    """Settings whose key is empty or the placeholder value."""
    return Settings(_env_file=None, gemini_api_key=request.param)


@pytest.fixture
def stub_transport() -> StubTransport:
    return StubTransport()


@pytest.fixture
def client(settings, stub_transport) -> GeminiImageClient:
    return GeminiImageClient(settings, stub_transport)
