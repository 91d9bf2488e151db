"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
settings, the completion adapter and the domain service into routes.
"""

from fastapi import Depends, Request
from openai import OpenAI

from src.adapters.completion.openai_chat import OpenAIChatProvider
from src.config.settings import Settings
from src.domain.enhancement import EnhancementService
from src.domain.ports import CompletionProvider


def get_settings(request: Request) -> Settings:
    """
    Get settings from app state.

    Settings are injected through create_app() and stored in app.state,
    so tests can supply their own values without touching the environment.
    """
    return request.app.state.settings


def get_openai_client(request: Request) -> OpenAI | None:
    """
    Get the shared SDK client from app state.

    The client is created during app lifespan startup; it is None when
    no API key is configured or the lifespan has not run.
    """
    return getattr(request.app.state, "openai_client", None)


def get_completion_provider(
    client: OpenAI | None = Depends(get_openai_client),
    settings: Settings = Depends(get_settings),
) -> CompletionProvider:
    """Create the OpenAI completion adapter for this request."""
    return OpenAIChatProvider(client=client, model=settings.openai_model)


def get_enhancement_service(
    provider: CompletionProvider = Depends(get_completion_provider),
) -> EnhancementService:
    """
    Create enhancement service with injected dependencies.

    Override get_completion_provider to substitute a test double.
    """
    return EnhancementService(provider=provider)
