"""Services for the application."""

from .client import GeminiImageClient
from .errors import GeminiServiceError
from .transport import GeminiTransport

__all__ = [
    "GeminiImageClient",
    "GeminiServiceError",
    "GeminiTransport",
]
