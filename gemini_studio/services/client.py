"""Client for Gemini image generation, editing and segmentation."""

import json
from typing import Any

from curl_cffi.requests import AsyncSession
from loguru import logger

from gemini_studio.config import Settings
from gemini_studio.models.request import (
    ContentPart,
    EditRequest,
    GenerateContentRequest,
    GenerationRequest,
    ImagePart,
    SegmentationRequest,
    TextPart,
)
from gemini_studio.models.response import GenerateContentResponse
from gemini_studio.services.errors import (
    InvalidCredentialError,
    MalformedResponseError,
    NotConfiguredError,
    log_failure,
    translate_error,
)
from gemini_studio.services.prompts import (
    build_edit_prompt,
    build_segmentation_prompt,
    strip_markdown_code_blocks,
)
from gemini_studio.services.transport import GeminiTransport


class GeminiImageClient:
    """
    Turns typed requests into generateContent calls and decodes the results.

    Every operation makes exactly one API call. Failures are logged and
    re-raised as a GeminiServiceError subclass; nothing is retried.
    """

    def __init__(self, settings: Settings, transport: GeminiTransport):
        self.settings = settings
        self.transport = transport

    @classmethod
    def from_session(cls, session: AsyncSession, settings: Settings) -> "GeminiImageClient":
        """Create a client whose transport uses the configured API key."""
        return cls(settings, GeminiTransport(session, settings, settings.gemini_api_key))

    @property
    def model(self) -> str:
        return self.settings.gemini_model

    async def test_api_key(self, api_key: str) -> bool:
        """
        Check that the API key is accepted with a minimal request.

        Raises:
            InvalidCredentialError: The request failed for any reason.
        """
        transport = self.transport.with_api_key(api_key)
        try:
            await transport.generate_content(
                self.model, GenerateContentRequest.from_parts([TextPart(text="Test")])
            )
        except Exception as e:
            logger.error(f"API key test failed: {e}")
            raise InvalidCredentialError() from None
        logger.info("API key test succeeded")
        return True

    async def generate_image(self, request: GenerationRequest) -> list[str]:
        """Generate images from a prompt and optional reference images."""
        self._ensure_configured()

        parts: list[ContentPart] = [TextPart(text=request.prompt)]
        parts.extend(ImagePart.png(image) for image in request.reference_images)

        body = GenerateContentRequest.from_parts(
            parts, temperature=request.temperature, seed=request.seed
        )
        response = await self._generate("generate", body)

        images = response.inline_images()
        logger.info(f"Generated {len(images)} image(s)")
        return images

    async def edit_image(self, request: EditRequest) -> list[str]:
        """Edit an image, optionally restricted to the white region of a mask."""
        self._ensure_configured()

        response = await self._generate("edit", self.build_edit_request(request))

        images = response.inline_images()
        logger.info(f"Edited image, received {len(images)} image(s)")
        return images

    async def segment_image(self, request: SegmentationRequest) -> Any:
        """
        Ask the model for segmentation masks matching a free-text query.

        Returns the JSON object from the model's reply, shaped
        {"masks": [{"label", "box_2d", "mask"}]}.

        Raises:
            MalformedResponseError: The reply has no text or is not valid JSON.
        """
        self._ensure_configured()

        body = GenerateContentRequest.from_parts(
            [
                TextPart(text=build_segmentation_prompt(request.query)),
                ImagePart.png(request.image),
            ]
        )
        response = await self._generate("segment", body)
        return self._parse_segmentation(response)

    def build_edit_request(self, request: EditRequest) -> GenerateContentRequest:
        """
        Build the edit payload.

        Order is instruction, original image, references, then the mask, so
        the mask is always the final part.
        """
        parts: list[ContentPart] = [
            TextPart(
                text=build_edit_prompt(request.instruction, has_mask=bool(request.mask_image))
            ),
            ImagePart.png(request.original_image),
        ]
        parts.extend(ImagePart.png(image) for image in request.reference_images)
        if request.mask_image:
            parts.append(ImagePart.png(request.mask_image))

        return GenerateContentRequest.from_parts(
            parts, temperature=request.temperature, seed=request.seed
        )

    def _ensure_configured(self) -> None:
        if not self.settings.is_configured:
            logger.error("Gemini API key is missing or invalid, set GEMINI_API_KEY")
            raise NotConfiguredError()

    async def _generate(
        self, operation: str, body: GenerateContentRequest
    ) -> GenerateContentResponse:
        try:
            return await self.transport.generate_content(self.model, body)
        except Exception as e:
            log_failure(e, operation)
            raise translate_error(e, operation) from None

    @staticmethod
    def _parse_segmentation(response: GenerateContentResponse) -> Any:
        parts = response.first_parts
        if not parts or parts[0].text is None:
            logger.error("Segmentation response has no text part")
            raise MalformedResponseError("Segmentation response did not contain any text.")

        text = strip_markdown_code_blocks(parts[0].text)
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            logger.error(f"Segmentation response is not valid JSON: {e}")
            raise MalformedResponseError(
                "Segmentation response was not valid JSON."
            ) from e
