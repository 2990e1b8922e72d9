"""Data models for the application."""

from .request import (
    ApiKeyTestRequest,
    Content,
    ContentPart,
    EditRequest,
    GenerateContentRequest,
    GenerationConfig,
    GenerationRequest,
    ImagePart,
    InlineData,
    SegmentationRequest,
    TextPart,
)
from .response import (
    ApiKeyTestResponse,
    Candidate,
    ErrorDetail,
    ErrorResponse,
    GenerateContentResponse,
    ImagesResponse,
    ResponsePart,
)

__all__ = [
    "ApiKeyTestRequest",
    "Content",
    "ContentPart",
    "EditRequest",
    "GenerateContentRequest",
    "GenerationConfig",
    "GenerationRequest",
    "ImagePart",
    "InlineData",
    "SegmentationRequest",
    "TextPart",
    "ApiKeyTestResponse",
    "Candidate",
    "ErrorDetail",
    "ErrorResponse",
    "GenerateContentResponse",
    "ImagesResponse",
    "ResponsePart",
]
