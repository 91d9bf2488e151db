"""
Enhancement domain service - Prompt rewrite orchestration.

This module contains the only business rules of the service:

Method Decision Table
=====================

    OPTIONS  -> PREFLIGHT    (checked first)
    POST     -> ENHANCE
    other    -> NOT_ALLOWED

Enhancement Procedure
=====================

1. Reject a missing, empty, or whitespace-only prompt (MissingPrompt).
   The provider is never called in that case.
2. Build the system instruction, embedding style and creativity verbatim.
3. Derive temperature: creativity / 10 when creativity is truthy, else 0.5.
4. Submit exactly one completion request through the CompletionProvider port.

Any failure in steps 2-4 is logged and re-raised as EnhancementFailed,
so callers only ever see the generic failure.
"""

import logging
from dataclasses import dataclass
from typing import Any

from .exceptions import EnhancementFailed, MissingPrompt
from .ports import CompletionProvider, MethodDecision

logger = logging.getLogger(__name__)

DEFAULT_TEMPERATURE = 0.5

INSTRUCTION_TEMPLATE = (
    "Enhance the following prompt using {style} style with creativity level {creativity}/10.\n"
    "Apply prompt engineering best practices to make it more effective for AI interaction.\n"
    "Return only the enhanced prompt without any additional explanations."
)

_METHOD_DECISIONS = {
    "OPTIONS": MethodDecision.PREFLIGHT,
    "POST": MethodDecision.ENHANCE,
}


def resolve_method(method: str) -> MethodDecision:
    """Map an HTTP method to its handling decision."""
    return _METHOD_DECISIONS.get(method.upper(), MethodDecision.NOT_ALLOWED)


def _format_value(value: Any) -> str:
    # 8.0 renders as "8" so the instruction reads the way the form sent it
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_instruction(style: Any, creativity: Any) -> str:
    """
    Build the system instruction for the completion request.

    Style and creativity are interpolated as given; neither is validated
    against the form's choices nor clamped.
    """
    return INSTRUCTION_TEMPLATE.format(
        style=_format_value(style),
        creativity=_format_value(creativity),
    )


def temperature_for(creativity: Any) -> float:
    """Derive sampling temperature from the 0-10 creativity scale."""
    if not creativity:
        return DEFAULT_TEMPERATURE
    return creativity / 10


def is_blank(prompt: str | None) -> bool:
    """True when the prompt is absent or contains only whitespace."""
    return not prompt or not prompt.strip()


@dataclass
class EnhancementService:
    """
    Domain service for prompt enhancement.

    Holds no per-request state; one instance may serve concurrent requests.
    """

    provider: CompletionProvider

    def enhance(self, prompt: str | None, style: Any = None, creativity: Any = None) -> str:
        """
        Rewrite a prompt through the completion provider.

        Args:
            prompt: User's prompt (required, non-blank)
            style: Presentation style, e.g. "concise" or "technical"
            creativity: 0-10 scale, drives temperature

        Returns:
            Enhanced prompt text, possibly empty

        Raises:
            MissingPrompt: If prompt is absent or blank
            EnhancementFailed: If the completion request fails for any reason
        """
        if is_blank(prompt):
            raise MissingPrompt("Missing prompt")

        try:
            instruction = build_instruction(style, creativity)
            temperature = temperature_for(creativity)
            logger.info(
                "Enhancing prompt: length=%d style=%s temperature=%s",
                len(prompt),
                style,
                temperature,
            )
            enhanced = self.provider.submit(instruction, prompt, temperature)
        except Exception as exc:
            logger.exception("Error enhancing prompt")
            raise EnhancementFailed("Failed to enhance prompt") from exc

        logger.info("Prompt enhanced: length=%d", len(enhanced))
        return enhanced
