"""
Domain layer - Pure business logic with zero framework imports.

This package contains the prompt enhancement rules: method precedence,
prompt validation, instruction construction, and temperature derivation.
It defines its own port interface for the completion API, keeping the
web framework and the SDK out of the domain.
"""

from .enhancement import EnhancementService, build_instruction, resolve_method, temperature_for
from .exceptions import EnhancementError, EnhancementFailed, MissingPrompt, ProviderNotConfigured
from .ports import CompletionProvider, MethodDecision

__all__ = [
    "CompletionProvider",
    "EnhancementError",
    "EnhancementFailed",
    "EnhancementService",
    "MethodDecision",
    "MissingPrompt",
    "ProviderNotConfigured",
    "build_instruction",
    "resolve_method",
    "temperature_for",
]
