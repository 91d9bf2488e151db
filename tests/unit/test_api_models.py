"""
Unit tests for API request/response models.

Tests Pydantic model validation for the enhancement endpoint.
"""

import pytest
from pydantic import ValidationError

from src.api.models import EnhancePromptRequest, EnhancePromptResponse, ErrorResponse


class TestEnhancePromptRequest:
    """Tests for EnhancePromptRequest model."""

    def test_valid_request(self) -> None:
        """All three fields are accepted."""
        request = EnhancePromptRequest(prompt="Write a poem", style="creative", creativity=8)
        assert request.prompt == "Write a poem"
        assert request.style == "creative"
        assert request.creativity == 8

    def test_all_fields_optional(self) -> None:
        """An empty body validates; blank prompts are rejected by the domain."""
        request = EnhancePromptRequest()
        assert request.prompt is None
        assert request.style is None
        assert request.creativity is None

    def test_integer_creativity_stays_integer(self) -> None:
        """Integral creativity keeps int type."""
        request = EnhancePromptRequest.model_validate({"prompt": "x", "creativity": 8})
        assert isinstance(request.creativity, int)

    def test_fractional_creativity_accepted(self) -> None:
        """Fractional creativity is a float."""
        request = EnhancePromptRequest.model_validate({"prompt": "x", "creativity": 7.5})
        assert request.creativity == 7.5

    def test_creativity_not_clamped(self) -> None:
        """Out-of-range creativity passes validation unchanged."""
        request = EnhancePromptRequest(prompt="x", creativity=42)
        assert request.creativity == 42

    def test_non_numeric_creativity_rejected(self) -> None:
        """Non-numeric creativity raises ValidationError."""
        with pytest.raises(ValidationError) as exc_info:
            EnhancePromptRequest.model_validate({"prompt": "x", "creativity": "very"})
        assert "creativity" in str(exc_info.value)

    def test_unknown_style_accepted(self) -> None:
        """Style is free-form text."""
        request = EnhancePromptRequest(prompt="x", style="pirate shanty")
        assert request.style == "pirate shanty"


class TestEnhancePromptResponse:
    """Tests for EnhancePromptResponse model."""

    def test_serializes_camel_case_key(self) -> None:
        """Wire key is enhancedPrompt."""
        response = EnhancePromptResponse(enhanced_prompt="Better prompt")
        assert response.model_dump(by_alias=True) == {"enhancedPrompt": "Better prompt"}

    def test_accepts_wire_key(self) -> None:
        """The model also validates from the wire key."""
        response = EnhancePromptResponse.model_validate({"enhancedPrompt": "Better prompt"})
        assert response.enhanced_prompt == "Better prompt"


class TestErrorResponse:
    """Tests for ErrorResponse model."""

    def test_valid_error_response(self) -> None:
        """Valid error response is accepted."""
        response = ErrorResponse(error="Missing prompt")
        assert response.error == "Missing prompt"
