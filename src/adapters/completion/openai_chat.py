"""
OpenAI chat adapter - Implements CompletionProvider protocol.

This module provides the OpenAI implementation of the domain's
completion port using the official openai SDK.

Response Extraction:
-------------------
Only the first choice is used. The extraction table is:

    no choices              -> ""
    choice without message  -> ""
    message.content is None -> ""
    otherwise               -> message.content
"""

import logging
from typing import Any

from openai import OpenAI

from src.config.settings import Settings
from src.domain.exceptions import ProviderNotConfigured

logger = logging.getLogger(__name__)


def build_openai_client(settings: Settings) -> OpenAI | None:
    """
    Create the SDK client from settings.

    Returns None when no API key is configured, so the application can
    still start and report failures per request.
    """
    if not settings.openai_api_key:
        logger.warning("OPENAI_API_KEY is not set; enhancement requests will fail")
        return None

    kwargs: dict[str, Any] = {"api_key": settings.openai_api_key}
    if settings.openai_base_url:
        kwargs["base_url"] = settings.openai_base_url
    if settings.openai_timeout_seconds is not None:
        kwargs["timeout"] = settings.openai_timeout_seconds
    return OpenAI(**kwargs)


def first_choice_text(completion: Any) -> str:
    """Return the first choice's message content, or "" if there is none."""
    choices = getattr(completion, "choices", None) or []
    if not choices:
        return ""
    message = getattr(choices[0], "message", None)
    return getattr(message, "content", None) or ""


class OpenAIChatProvider:
    """
    Implements CompletionProvider protocol via openai chat completions.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Issues exactly one request per submit; no retries beyond the SDK's own.
    """

    def __init__(self, client: OpenAI | None, model: str) -> None:
        """
        Initialize provider with an SDK client.

        Args:
            client: Shared OpenAI client, or None when unconfigured
            model: Chat model identifier
        """
        self._client = client
        self._model = model

    def submit(self, instruction: str, prompt: str, temperature: float) -> str:
        """
        Send a system + user message pair and return the first choice text.

        Raises:
            ProviderNotConfigured: If no client is available
            openai.OpenAIError: On any API or transport failure
        """
        if self._client is None:
            raise ProviderNotConfigured("OpenAI API key is not configured")

        completion = self._client.chat.completions.create(
            model=self._model,
            messages=[
                {"role": "system", "content": instruction},
                {"role": "user", "content": prompt},
            ],
            temperature=temperature,
        )
        return first_choice_text(completion)
