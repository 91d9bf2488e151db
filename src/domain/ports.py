"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from enum import Enum
from typing import Protocol


class MethodDecision(Enum):
    """
    Outcome of inspecting an inbound HTTP method.

    Precedence (first match wins):
    - OPTIONS -> PREFLIGHT (200, empty body)
    - POST -> ENHANCE (validate and enhance)
    - anything else -> NOT_ALLOWED (405)
    """

    PREFLIGHT = "preflight"
    ENHANCE = "enhance"
    NOT_ALLOWED = "not_allowed"


class CompletionProvider(Protocol):
    """Port interface for the external chat-completion API."""

    def submit(self, instruction: str, prompt: str, temperature: float) -> str:
        """
        Submit one completion request and return the generated text.

        The request carries a system-role message with the instruction
        and a user-role message with the raw prompt.

        Args:
            instruction: System instruction directing the rewrite
            prompt: User's original prompt, passed through unchanged
            temperature: Sampling temperature

        Returns:
            Text of the first returned choice, or "" if there is none
        """
        ...
