"""Static registry of generative language models and their pricing."""

from .container import build_model_registry, get_model_registry, reset_model_registry
from .exceptions import (
    CatalogError,
    DefaultModelNotFoundError,
    DuplicateModelError,
    ModelNotFoundError,
    ModelValidationError,
)
from .llm import BUILTIN_MODELS, DEFAULT_MODEL_NAME, LLMModel, ModelRegistry, Provider

__all__ = [
    "BUILTIN_MODELS",
    "DEFAULT_MODEL_NAME",
    "LLMModel",
    "ModelRegistry",
    "Provider",
    "build_model_registry",
    "get_model_registry",
    "reset_model_registry",
    "CatalogError",
    "DefaultModelNotFoundError",
    "DuplicateModelError",
    "ModelNotFoundError",
    "ModelValidationError",
]
