"""Unit tests for request and response models."""

import pytest
from pydantic import ValidationError

from gemini_studio.models.request import (
    Content,
    EditRequest,
    GenerateContentRequest,
    GenerationRequest,
    ImagePart,
    SegmentationRequest,
    TextPart,
)
from gemini_studio.models.response import GenerateContentResponse
from tests.conftest import image_part, make_response


class TestContentParts:
    """Tests for the TextPart | ImagePart wire types."""

    def test_text_part_serializes_to_text_key(self):
        assert TextPart(text="hello").model_dump() == {"text": "hello"}

    def test_image_part_serializes_to_inline_data(self):
        part = ImagePart.png("aGVsbG8=")
        assert part.model_dump() == {
            "inlineData": {"mimeType": "image/png", "data": "aGVsbG8="}
        }

    def test_image_part_rejects_empty_data(self):
        with pytest.raises(ValidationError):
            ImagePart.png("")

    def test_content_parses_mixed_parts(self):
        """Raw dicts resolve to the matching part type."""
        content = Content.model_validate(
            {"parts": [{"text": "prompt"}, image_part("abc")]}
        )
        assert isinstance(content.parts[0], TextPart)
        assert isinstance(content.parts[1], ImagePart)
        assert content.role == "user"

    def test_content_requires_parts(self):
        with pytest.raises(ValidationError):
            Content(parts=[])

    def test_parts_are_immutable(self):
        part = TextPart(text="a")
        with pytest.raises(ValidationError):
            part.text = "b"


class TestGenerateContentRequest:
    """Tests for the generateContent body."""

    def test_payload_without_sampling_options_omits_generation_config(self):
        body = GenerateContentRequest.from_parts([TextPart(text="Test")])
        assert body.to_payload() == {
            "contents": [{"role": "user", "parts": [{"text": "Test"}]}]
        }

    def test_payload_with_temperature_and_seed(self):
        body = GenerateContentRequest.from_parts(
            [TextPart(text="Test")], temperature=0.4, seed=7
        )
        assert body.to_payload()["generationConfig"] == {"temperature": 0.4, "seed": 7}

    def test_payload_with_seed_only(self):
        body = GenerateContentRequest.from_parts([TextPart(text="Test")], seed=0)
        assert body.to_payload()["generationConfig"] == {"seed": 0}

    def test_parts_property_returns_first_content_parts(self):
        parts = [TextPart(text="a"), ImagePart.png("b")]
        body = GenerateContentRequest.from_parts(parts)
        assert body.parts == parts


class TestCallerRequests:
    """Tests for GenerationRequest, EditRequest and SegmentationRequest."""

    def test_generation_request_defaults(self):
        request = GenerationRequest(prompt="a cat")
        assert request.reference_images == []
        assert request.temperature is None
        assert request.seed is None

    def test_generation_request_rejects_empty_reference(self):
        with pytest.raises(ValidationError):
            GenerationRequest(prompt="a cat", reference_images=["abc", ""])

    def test_generation_request_rejects_out_of_range_temperature(self):
        with pytest.raises(ValidationError):
            GenerationRequest(prompt="a cat", temperature=3.5)

    def test_edit_request_requires_original_image(self):
        with pytest.raises(ValidationError):
            EditRequest(instruction="make it blue")

    def test_edit_request_mask_is_optional(self):
        request = EditRequest(instruction="make it blue", original_image="abc")
        assert request.mask_image is None

    def test_segmentation_request_requires_query(self):
        with pytest.raises(ValidationError):
            SegmentationRequest(image="abc", query="")


class TestGenerateContentResponse:
    """Tests for response decoding."""

    def test_inline_images_in_order_skipping_text(self):
        response = make_response(
            [image_part("first"), {"text": "Here you go"}, image_part("second")]
        )
        assert response.inline_images() == ["first", "second"]

    def test_inline_images_keeps_parts_with_empty_data(self):
        """Every inline data part is returned, even one without a payload."""
        response = make_response(
            [image_part("first"), {"inlineData": {"mimeType": "image/png"}}, image_part("third")]
        )
        assert response.inline_images() == ["first", "", "third"]

    def test_inline_images_empty_when_text_only(self):
        response = make_response([{"text": "I cannot draw that"}])
        assert response.inline_images() == []

    def test_inline_images_empty_without_candidates(self):
        response = GenerateContentResponse.model_validate({"candidates": []})
        assert response.inline_images() == []
        assert response.first_parts == []

    def test_candidate_without_content(self):
        response = GenerateContentResponse.model_validate(
            {"candidates": [{"finishReason": "SAFETY"}]}
        )
        assert response.first_parts == []

    def test_only_first_candidate_is_read(self):
        response = GenerateContentResponse.model_validate(
            {
                "candidates": [
                    {"content": {"parts": [image_part("one")]}},
                    {"content": {"parts": [image_part("two")]}},
                ]
            }
        )
        assert response.inline_images() == ["one"]

    def test_unknown_fields_are_ignored(self):
        response = GenerateContentResponse.model_validate(
            {
                "candidates": [
                    {"content": {"parts": [{"thoughtSignature": "x", "text": "hi"}]}}
                ],
                "promptFeedback": {"blockReason": "OTHER"},
            }
        )
        assert response.first_parts[0].text == "hi"
