"""
Pytest configuration and fixtures
"""

from collections.abc import Iterator

import pytest
import structlog

from genai_catalog.config import get_catalog_settings
from genai_catalog.container import reset_model_registry
from genai_catalog.llm import BUILTIN_MODELS, ModelRegistry


@pytest.fixture(autouse=True)
def clean_state() -> Iterator[None]:
    """Reset cached settings, the global registry and structlog between tests"""
    get_catalog_settings.cache_clear()
    reset_model_registry()
    yield
    get_catalog_settings.cache_clear()
    reset_model_registry()
    structlog.reset_defaults()


@pytest.fixture
def mock_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Mock catalog settings for tests"""
    monkeypatch.setenv("CATALOG_DEFAULT_MODEL", "gpt-4o-mini")
    monkeypatch.setenv("CATALOG_VERIFY_DEFAULT_MODEL", "true")
    monkeypatch.setenv("CATALOG_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("CATALOG_LOG_JSON", "true")


@pytest.fixture
def registry() -> ModelRegistry:
    """Registry of the built-in models"""
    return ModelRegistry(BUILTIN_MODELS)
