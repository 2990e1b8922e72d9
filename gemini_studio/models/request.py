"""Request models: caller-facing requests and Gemini API wire parts."""

from typing import Annotated, Literal
from pydantic import BaseModel, ConfigDict, Field


IMAGE_MIME_TYPE = "image/png"

Base64Image = Annotated[str, Field(min_length=1)]


class InlineData(BaseModel):
    """Inline data for image content."""

    model_config = ConfigDict(frozen=True)

    mimeType: str = Field(default=IMAGE_MIME_TYPE, description="MIME type of the data")
    data: str = Field(..., min_length=1, description="Base64 encoded data")


class TextPart(BaseModel):
    """Text segment of a request."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    text: str = Field(..., description="Text content")


class ImagePart(BaseModel):
    """Inline image segment of a request."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    inlineData: InlineData = Field(..., description="Inline data")

    @classmethod
    def png(cls, data: str) -> "ImagePart":
        """Wrap base64 PNG data."""
        return cls(inlineData=InlineData(mimeType=IMAGE_MIME_TYPE, data=data))


ContentPart = TextPart | ImagePart


class Content(BaseModel):
    """Content with role and parts."""

    model_config = ConfigDict(frozen=True)

    role: Literal["user", "model"] = Field(default="user", description="Role of the content")
    parts: list[ContentPart] = Field(..., min_length=1, description="Parts of the content")


class GenerationConfig(BaseModel):
    """Sampling options forwarded to the model."""

    model_config = ConfigDict(frozen=True)

    temperature: float | None = Field(default=None, description="Temperature for generation")
    seed: int | None = Field(default=None, description="Seed for generation")


class GenerateContentRequest(BaseModel):
    """Request body for the generateContent endpoint."""

    model_config = ConfigDict(frozen=True)

    contents: list[Content] = Field(..., description="Contents to generate from")
    generationConfig: GenerationConfig | None = Field(
        default=None, description="Generation configuration"
    )

    @classmethod
    def from_parts(
        cls,
        parts: list[ContentPart],
        temperature: float | None = None,
        seed: int | None = None,
    ) -> "GenerateContentRequest":
        """Build a single-turn user request from ordered parts."""
        config = None
        if temperature is not None or seed is not None:
            config = GenerationConfig(temperature=temperature, seed=seed)
        return cls(contents=[Content(role="user", parts=parts)], generationConfig=config)

    @property
    def parts(self) -> list[ContentPart]:
        """Parts of the first content entry."""
        return self.contents[0].parts

    def to_payload(self) -> dict:
        """Serialize to the JSON body sent over the wire."""
        return self.model_dump(exclude_none=True)


class GenerationRequest(BaseModel):
    """Text-to-image generation request."""

    model_config = ConfigDict(frozen=True)

    prompt: str = Field(..., min_length=1, description="Prompt text")
    reference_images: list[Base64Image] = Field(
        default_factory=list, description="Base64 encoded reference images"
    )
    temperature: float | None = Field(default=None, ge=0.0, le=2.0, description="Sampling temperature")
    seed: int | None = Field(default=None, description="Sampling seed")


class EditRequest(BaseModel):
    """Image editing request."""

    model_config = ConfigDict(frozen=True)

    instruction: str = Field(..., min_length=1, description="Edit instruction")
    original_image: str = Field(..., min_length=1, description="Base64 encoded image to edit")
    reference_images: list[Base64Image] = Field(
        default_factory=list, description="Base64 encoded reference images"
    )
    mask_image: str | None = Field(
        default=None, description="Base64 encoded mask, white marks the editable region"
    )
    temperature: float | None = Field(default=None, ge=0.0, le=2.0, description="Sampling temperature")
    seed: int | None = Field(default=None, description="Sampling seed")


class SegmentationRequest(BaseModel):
    """Segmentation request."""

    model_config = ConfigDict(frozen=True)

    image: str = Field(..., min_length=1, description="Base64 encoded image")
    query: str = Field(
        ..., min_length=1, description='Target region, e.g. "the red car"'
    )


class ApiKeyTestRequest(BaseModel):
    """Request body for testing an API key."""

    api_key: str = Field(..., description="API key to test")
