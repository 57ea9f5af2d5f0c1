"""Process-wide model registry.

Exports:
    get_model_registry: Module-level accessor function
    reset_model_registry: Reset for testing

Components should receive the registry as an argument; this accessor
is for the application entry point that builds it.
"""

from __future__ import annotations

from genai_catalog.config import CatalogSettings, get_catalog_settings
from genai_catalog.llm import BUILTIN_MODELS, ModelRegistry

# Module-level singleton
_registry: ModelRegistry | None = None


def build_model_registry(settings: CatalogSettings | None = None) -> ModelRegistry:
    """Build a registry of the built-in models.

    Args:
        settings: Catalog settings. Defaults to the cached settings.

    Returns:
        New ModelRegistry
    """
    settings = settings or get_catalog_settings()
    return ModelRegistry(
        BUILTIN_MODELS,
        default_model_name=settings.default_model,
        verify_default=settings.verify_default_model,
    )


def get_model_registry() -> ModelRegistry:
    """Get the global registry singleton, building it on first use.

    Returns:
        The global ModelRegistry instance
    """
    global _registry
    if _registry is None:
        _registry = build_model_registry()
    return _registry


def reset_model_registry() -> None:
    """Reset the global registry singleton.

    Useful for testing to ensure clean state between tests.
    """
    global _registry
    _registry = None
