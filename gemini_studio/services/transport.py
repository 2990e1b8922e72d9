"""HTTP transport for the Gemini generateContent endpoint."""

from curl_cffi.requests import AsyncSession
from loguru import logger

from gemini_studio.config import Settings
from gemini_studio.models.request import GenerateContentRequest
from gemini_studio.models.response import GenerateContentResponse
from gemini_studio.services.errors import RemoteFault, RemoteFaultError


class GeminiTransport:
    """Sends one generateContent call per invocation, bound to a single API key."""

    def __init__(self, session: AsyncSession, settings: Settings, api_key: str):
        self.session = session
        self.settings = settings
        self.api_key = api_key

    def with_api_key(self, api_key: str) -> "GeminiTransport":
        """Return a transport on the same session that uses another key."""
        return GeminiTransport(self.session, self.settings, api_key)

    def endpoint(self, model: str) -> str:
        base = self.settings.gemini_base_api.rstrip("/")
        return f"{base}/v1beta/models/{model}:generateContent"

    async def generate_content(
        self, model: str, request: GenerateContentRequest
    ) -> GenerateContentResponse:
        """
        Call generateContent for the given model.

        Raises:
            RemoteFaultError: The API answered with a non-200 status.
        """
        headers = {
            "x-goog-api-key": self.api_key,
            "Content-Type": "application/json",
        }

        response = await self.session.post(
            url=self.endpoint(model),
            headers=headers,
            json=request.to_payload(),
            timeout=self.settings.timeout,
            proxy=self.settings.proxy,
        )

        if response.status_code != 200:
            logger.error(
                f"API request failed - status: {response.status_code}, "
                f"response: {response.text[:1024] if response.text else 'empty'}"
            )
            raise RemoteFaultError(self._fault_from_response(response))

        return GenerateContentResponse.model_validate(response.json())

    @staticmethod
    def _fault_from_response(response) -> RemoteFault:
        try:
            fault = RemoteFault.from_payload(response.json())
        except ValueError:
            fault = None
        if fault is None:
            fault = RemoteFault(
                code=response.status_code,
                message=response.text[:1024] if response.text else "",
            )
        return fault
