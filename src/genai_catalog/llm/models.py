"""LLM model definitions.

Defines the LLMModel record. Records are immutable and are looked up
through ModelRegistry.
"""

from dataclasses import dataclass

from genai_catalog.exceptions import ModelValidationError

from .enums import Provider


@dataclass(frozen=True)
class LLMModel:
    """LLM model metadata with pricing.

    Prices are USD per million tokens. 0.0 means free or unpublished.
    """

    provider: Provider  # Upstream service
    name: str  # Model name for API calls, also the registry key
    description: str  # Human-readable summary, may be empty
    input_price: float  # USD per 1M input tokens
    output_price: float  # USD per 1M output tokens

    def __post_init__(self) -> None:
        if not isinstance(self.provider, Provider):
            try:
                provider = Provider(self.provider)
            except ValueError as e:
                raise ModelValidationError(
                    f"Unknown provider '{self.provider}' for model '{self.name}'", cause=e
                ) from e
            object.__setattr__(self, "provider", provider)

        if not isinstance(self.name, str) or not self.name:
            raise ModelValidationError("Model name must be a non-empty string")
        if not isinstance(self.description, str):
            raise ModelValidationError(
                f"Model '{self.name}' description must be a string, "
                f"got {type(self.description).__name__}"
            )

        for field_name in ("input_price", "output_price"):
            price = getattr(self, field_name)
            if isinstance(price, bool) or not isinstance(price, (int, float)):
                raise ModelValidationError(
                    f"Model '{self.name}' {field_name} must be a number, "
                    f"got {type(price).__name__}"
                )
            # NaN fails every comparison
            if not price >= 0:
                raise ModelValidationError(
                    f"Model '{self.name}' has negative or NaN {field_name}: {price}"
                )

    def formatted_info(self) -> str:
        """Format name and description as a single line.

        Returns:
            "<name>: <description>"
        """
        return f"{self.name}: {self.description}"

    def __str__(self) -> str:
        return self.name


# Model used when the caller does not request one
DEFAULT_MODEL_NAME = "gpt-4o-mini"
