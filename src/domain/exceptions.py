"""
Domain exceptions - Semantic error types for prompt enhancement.

This module defines domain-specific exceptions that communicate
failures without leaking upstream API details to callers.
"""


class EnhancementError(Exception):
    """Base class for enhancement domain errors."""

    pass


class MissingPrompt(EnhancementError):
    """Prompt is absent, empty, or whitespace-only."""

    pass


class EnhancementFailed(EnhancementError):
    """Building, sending, or parsing the completion request failed."""

    pass


class ProviderNotConfigured(EnhancementError):
    """Completion provider has no credential to call the external API."""

    pass
