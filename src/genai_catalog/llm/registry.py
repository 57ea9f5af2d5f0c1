"""Model registry for static LLM metadata.

Holds a read-only mapping from model name to LLMModel, built once from
a literal table.
"""

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

import structlog

from genai_catalog.exceptions import (
    DefaultModelNotFoundError,
    DuplicateModelError,
    ModelNotFoundError,
)

from .enums import Provider
from .models import DEFAULT_MODEL_NAME, LLMModel

logger = structlog.get_logger()


class ModelRegistry:
    """Read-only registry of known models.

    The mapping is populated in __init__ and never changes afterwards,
    so concurrent reads need no locking.
    """

    def __init__(
        self,
        models: Iterable[LLMModel],
        default_model_name: str = DEFAULT_MODEL_NAME,
        verify_default: bool = True,
    ) -> None:
        """Initialize model registry.

        Args:
            models: Model records to register, keyed by their name
            default_model_name: Model used when no explicit model is requested
            verify_default: Raise if the default model is not registered.
                            If False, only a warning is logged.

        Raises:
            DuplicateModelError: If two records share a name
            DefaultModelNotFoundError: If verify_default is set and the
                                       default model is not registered
        """
        entries: dict[str, LLMModel] = {}
        for model in models:
            if model.name in entries:
                raise DuplicateModelError(f"Model '{model.name}' is registered more than once")
            entries[model.name] = model

        self._models: Mapping[str, LLMModel] = MappingProxyType(entries)
        self._default_model_name = default_model_name

        if default_model_name not in self._models:
            if verify_default:
                raise DefaultModelNotFoundError(
                    f"Default model '{default_model_name}' is not registered"
                )
            logger.warning("default_model_missing", model=default_model_name)

        logger.info(
            "model_registry_initialized",
            model_count=len(self._models),
            default_model=default_model_name,
        )

    @property
    def default_model_name(self) -> str:
        """Name of the model used when none is requested."""
        return self._default_model_name

    def get(self, model_name: str) -> LLMModel | None:
        """Get model by name.

        Args:
            model_name: Model name to retrieve

        Returns:
            LLM model if found, None otherwise
        """
        return self._models.get(model_name)

    def require(self, model_name: str) -> LLMModel:
        """Get model by name, failing if it is not registered.

        Args:
            model_name: Model name to retrieve

        Returns:
            LLM model

        Raises:
            ModelNotFoundError: If the model is not registered
        """
        model = self._models.get(model_name)
        if model is None:
            raise ModelNotFoundError(f"Model '{model_name}' not found in registry")
        return model

    def get_default(self) -> LLMModel | None:
        """Get the default model, or None if it is not registered."""
        return self._models.get(self._default_model_name)

    def get_all(self) -> Mapping[str, LLMModel]:
        """Get all registered models.

        Returns:
            Read-only mapping of model name to model
        """
        return self._models

    def names(self) -> list[str]:
        """Sorted list of registered model names."""
        return sorted(self._models)

    def by_provider(self, provider: Provider | str) -> list[LLMModel]:
        """Get models hosted by a provider.

        Args:
            provider: Provider enum or its string value (e.g., "openai")

        Returns:
            Models of that provider, sorted by name

        Raises:
            ValueError: If provider is not a known provider value
        """
        provider = Provider(provider)
        return sorted(
            (model for model in self._models.values() if model.provider is provider),
            key=lambda model: model.name,
        )

    def formatted_info(self, model_name: str) -> str | None:
        """Format a registered model as "<name>: <description>".

        Returns:
            Formatted line, or None if the model is not registered
        """
        model = self._models.get(model_name)
        return model.formatted_info() if model is not None else None

    def __contains__(self, model_name: object) -> bool:
        return isinstance(model_name, str) and model_name in self._models

    def __len__(self) -> int:
        return len(self._models)

    def __iter__(self) -> Iterator[str]:
        return iter(self._models)
