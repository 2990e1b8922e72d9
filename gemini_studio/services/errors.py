"""Error taxonomy and translation of remote API faults."""

from dataclasses import dataclass
from typing import Any

from loguru import logger
from pydantic import ValidationError

from gemini_studio.models.response import ErrorResponse


class GeminiServiceError(Exception):
    """Base class for errors surfaced to callers of the image client."""

    status_code: int = 500
    status: str = "INTERNAL"
    default_message: str = "Gemini request failed."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotConfiguredError(GeminiServiceError):
    status_code = 503
    status = "FAILED_PRECONDITION"
    default_message = (
        "Gemini API key is not configured. Please add your API key to the .env file."
    )


class InvalidCredentialError(GeminiServiceError):
    status_code = 401
    status = "UNAUTHENTICATED"
    default_message = "Invalid API key"


class QuotaExceededError(GeminiServiceError):
    status_code = 429
    status = "RESOURCE_EXHAUSTED"
    default_message = (
        "API quota exceeded. Please check your Google AI Studio billing and "
        "quota limits, or try again later. For production use, consider "
        "implementing a backend proxy to manage API calls."
    )


class InvalidRequestError(GeminiServiceError):
    status_code = 400
    status = "INVALID_ARGUMENT"
    default_message = (
        "Invalid API request. Please check your API key configuration and try again."
    )


class AuthenticationFailedError(GeminiServiceError):
    status_code = 401
    status = "UNAUTHENTICATED"
    default_message = (
        "Authentication failed. Please verify your API key is valid and has "
        "the necessary permissions."
    )


class MalformedResponseError(GeminiServiceError):
    status_code = 502
    status = "DATA_LOSS"
    default_message = "The model returned a response that could not be parsed."


class GenerationFailedError(GeminiServiceError):
    status_code = 500
    status = "INTERNAL"


# Generic failure wording per client operation
OPERATION_MESSAGES = {
    "generate": "Failed to generate image. Please try again.",
    "edit": "Failed to edit image. Please try again.",
    "segment": "Failed to segment image. Please try again.",
}


@dataclass(frozen=True)
class RemoteFault:
    """Error descriptor reported by the remote API."""

    code: int | None = None
    status: str | None = None
    message: str = ""

    @classmethod
    def from_payload(cls, payload: Any) -> "RemoteFault | None":
        """
        Read a Google error envelope, e.g. {"error": {"code": 429, ...}}.

        Returns None when the payload carries no error descriptor.
        """
        if not isinstance(payload, dict) or not isinstance(payload.get("error"), dict):
            return None
        try:
            detail = ErrorResponse.model_validate(payload).error
        except ValidationError:
            return None
        return cls(code=detail.code, status=detail.status, message=detail.message)


class RemoteFaultError(Exception):
    """Raised by the transport when the API answers with an error."""

    def __init__(self, fault: RemoteFault):
        self.fault = fault
        super().__init__(
            f"Gemini API error - code: {fault.code}, status: {fault.status}, "
            f"message: {fault.message}"
        )


_FAULT_TABLE: list[tuple[int, str, type[GeminiServiceError]]] = [
    (429, "RESOURCE_EXHAUSTED", QuotaExceededError),
    (400, "INVALID_ARGUMENT", InvalidRequestError),
    (401, "UNAUTHENTICATED", AuthenticationFailedError),
]


def classify_fault(fault: RemoteFault) -> type[GeminiServiceError] | None:
    """Map a remote fault to an error kind, None when unrecognized."""
    for code, status, kind in _FAULT_TABLE:
        if fault.code == code or fault.status == status:
            return kind
    return None


def translate_error(exc: BaseException, operation: str) -> GeminiServiceError:
    """Convert any failure of a client operation into a GeminiServiceError."""
    if isinstance(exc, GeminiServiceError):
        return exc

    if isinstance(exc, RemoteFaultError):
        kind = classify_fault(exc.fault)
        if kind is not None:
            return kind()

    return GenerationFailedError(OPERATION_MESSAGES[operation])


def log_failure(exc: BaseException, operation: str) -> None:
    """Log the original failure before it is translated."""
    if isinstance(exc, RemoteFaultError):
        logger.error(f"Error during {operation}: {exc}")
    else:
        logger.opt(exception=exc).error(f"Error during {operation}: {exc}")
