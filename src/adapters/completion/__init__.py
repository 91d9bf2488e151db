"""Completion adapters - External language-model API implementations."""

from .openai_chat import OpenAIChatProvider, build_openai_client, first_choice_text

__all__ = ["OpenAIChatProvider", "build_openai_client", "first_choice_text"]
