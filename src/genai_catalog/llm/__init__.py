"""LLM model catalog.

Static metadata and pricing for supported generative models, looked
up by name through ModelRegistry.
"""

from .catalog import BUILTIN_MODELS
from .enums import Provider
from .models import DEFAULT_MODEL_NAME, LLMModel
from .registry import ModelRegistry

__all__ = [
    # Registry
    "ModelRegistry",
    # Models
    "LLMModel",
    "Provider",
    "DEFAULT_MODEL_NAME",
    # Table
    "BUILTIN_MODELS",
]
