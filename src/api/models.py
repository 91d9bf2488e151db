"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
"""

from pydantic import BaseModel, ConfigDict, Field


class EnhancePromptRequest(BaseModel):
    """
    Request model for prompt enhancement.

    All fields are optional at the schema level; a missing or blank prompt
    is rejected by the domain with 400 rather than a 422 validation error.
    """

    prompt: str | None = Field(None, description="Prompt to enhance (required, non-blank)")
    style: str | None = Field(
        None, description="Presentation style, e.g. concise, creative, technical"
    )
    creativity: int | float | None = Field(
        None, description="Creativity level on a 0-10 scale; temperature is creativity / 10"
    )


class EnhancePromptResponse(BaseModel):
    """Response model for a successful enhancement."""

    model_config = ConfigDict(populate_by_name=True)

    enhanced_prompt: str = Field(..., alias="enhancedPrompt")


class ErrorResponse(BaseModel):
    """Standard error response model."""

    error: str
