"""Image endpoints backed by the Gemini image client."""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request
from loguru import logger

from gemini_studio.models.request import (
    ApiKeyTestRequest,
    EditRequest,
    GenerationRequest,
    SegmentationRequest,
)
from gemini_studio.models.response import ApiKeyTestResponse, ErrorResponse, ImagesResponse
from gemini_studio.services.client import GeminiImageClient
from gemini_studio.services.errors import GeminiServiceError


router = APIRouter()


ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Bad Request"},
    401: {"model": ErrorResponse, "description": "Unauthorized"},
    429: {"model": ErrorResponse, "description": "Quota Exceeded"},
    500: {"model": ErrorResponse, "description": "Internal Server Error"},
    502: {"model": ErrorResponse, "description": "Bad Gateway"},
    503: {"model": ErrorResponse, "description": "Service Unavailable"},
}


def get_client(request: Request) -> GeminiImageClient:
    """Return the client created during application startup."""
    return request.app.state.client


def to_http_exception(error: GeminiServiceError) -> HTTPException:
    return HTTPException(
        status_code=error.status_code,
        detail={
            "error": {
                "code": error.status_code,
                "message": error.message,
                "status": error.status,
            }
        },
    )


@router.post(
    "/v1/images/generate",
    response_model=ImagesResponse,
    responses=ERROR_RESPONSES,
    summary="Generate images",
    description="Generate images from a prompt and optional reference images.",
)
async def generate_images(
    request: GenerationRequest,
    client: GeminiImageClient = Depends(get_client),
) -> ImagesResponse:
    logger.info(
        f"Received generate request with {len(request.reference_images)} reference image(s)"
    )
    try:
        images = await client.generate_image(request)
    except GeminiServiceError as e:
        raise to_http_exception(e)
    return ImagesResponse(images=images)


@router.post(
    "/v1/images/edit",
    response_model=ImagesResponse,
    responses=ERROR_RESPONSES,
    summary="Edit an image",
    description="Edit an image from an instruction, optionally limited to a mask.",
)
async def edit_image(
    request: EditRequest,
    client: GeminiImageClient = Depends(get_client),
) -> ImagesResponse:
    logger.info(f"Received edit request (mask: {'yes' if request.mask_image else 'no'})")
    try:
        images = await client.edit_image(request)
    except GeminiServiceError as e:
        raise to_http_exception(e)
    return ImagesResponse(images=images)


@router.post(
    "/v1/images/segment",
    responses=ERROR_RESPONSES,
    summary="Segment an image",
    description="Return segmentation masks for the region described by the query.",
)
async def segment_image(
    request: SegmentationRequest,
    client: GeminiImageClient = Depends(get_client),
) -> Any:
    logger.info(f"Received segment request for: {request.query}")
    try:
        return await client.segment_image(request)
    except GeminiServiceError as e:
        raise to_http_exception(e)


@router.post(
    "/v1/keys/test",
    response_model=ApiKeyTestResponse,
    responses=ERROR_RESPONSES,
    summary="Test an API key",
    description="Check whether the given API key is accepted by the Gemini API.",
)
async def test_api_key(
    request: ApiKeyTestRequest,
    client: GeminiImageClient = Depends(get_client),
) -> ApiKeyTestResponse:
    try:
        valid = await client.test_api_key(request.api_key)
    except GeminiServiceError as e:
        raise to_http_exception(e)
    return ApiKeyTestResponse(valid=valid)
