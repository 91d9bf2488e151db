"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Explicit settings (no environment lookup)
- A recording completion provider standing in for the OpenAI adapter
- Test client setup with the provider injected
"""

from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.dependencies import get_completion_provider
from src.api.main import create_app
from src.config.settings import Settings


class FakeCompletionProvider:
    """Records submit() calls and returns canned text or raises."""

    def __init__(self, text: str = "An enhanced prompt", error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.calls: list[tuple[str, str, float]] = []

    def submit(self, instruction: str, prompt: str, temperature: float) -> str:
        self.calls.append((instruction, prompt, temperature))
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def settings() -> Settings:
    """Settings with a fake credential."""
    return Settings(openai_api_key="test-key", openai_model="test-model")


@pytest.fixture
def provider() -> FakeCompletionProvider:
    """Completion provider double."""
    return FakeCompletionProvider()


@pytest.fixture
def app(settings: Settings, provider: FakeCompletionProvider) -> Generator[FastAPI, None, None]:
    """Full application with the completion provider overridden."""
    test_app = create_app(settings)
    test_app.dependency_overrides[get_completion_provider] = lambda: provider
    yield test_app
    test_app.dependency_overrides.clear()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create test client for the application."""
    return TestClient(app)
