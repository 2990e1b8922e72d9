"""Backend proxy and client for Gemini image generation, editing and segmentation."""

__version__ = "0.1.0"
