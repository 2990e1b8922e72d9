"""Response models for Gemini API responses and proxy endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class ResponseInlineData(BaseModel):
    """Inline data returned by the model."""

    model_config = ConfigDict(extra="ignore")

    mimeType: str | None = Field(default=None, description="MIME type of the data")
    data: str = Field(default="", description="Base64 encoded data")


class ResponsePart(BaseModel):
    """Part of a candidate, may carry text, inline data, or neither."""

    model_config = ConfigDict(extra="ignore")

    text: str | None = Field(default=None, description="Text content")
    inlineData: ResponseInlineData | None = Field(default=None, description="Inline data")


class CandidateContent(BaseModel):
    """Content returned for a candidate."""

    model_config = ConfigDict(extra="ignore")

    role: str | None = Field(default=None, description="Role of the content")
    parts: list[ResponsePart] = Field(default_factory=list, description="Parts of the content")


class Candidate(BaseModel):
    """Candidate response from the model."""

    model_config = ConfigDict(extra="ignore")

    content: CandidateContent | None = Field(default=None, description="Content of the candidate")


class GenerateContentResponse(BaseModel):
    """Response model for the generateContent endpoint."""

    model_config = ConfigDict(extra="ignore")

    candidates: list[Candidate] = Field(default_factory=list, description="Candidates from generation")

    @property
    def first_parts(self) -> list[ResponsePart]:
        """Parts of the first candidate, empty when there is nothing to read."""
        if not self.candidates or self.candidates[0].content is None:
            return []
        return self.candidates[0].content.parts

    def inline_images(self) -> list[str]:
        """Base64 payloads of every inline data part, in response order."""
        return [
            part.inlineData.data
            for part in self.first_parts
            if part.inlineData is not None
        ]


class ErrorDetail(BaseModel):
    """Error detail in response."""

    code: int | None = Field(default=None, description="Error code")
    message: str = Field(default="", description="Error message")
    status: str | None = Field(default=None, description="Error status")


class ErrorResponse(BaseModel):
    """Error response model."""

    error: ErrorDetail = Field(..., description="Error details")


class ImagesResponse(BaseModel):
    """Proxy response carrying generated images."""

    images: list[str] = Field(..., description="Base64 encoded images")


class ApiKeyTestResponse(BaseModel):
    """Proxy response for an API key test."""

    valid: bool = Field(..., description="Whether the key was accepted")
