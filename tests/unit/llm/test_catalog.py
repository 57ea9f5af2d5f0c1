"""Built-in model table tests."""

from __future__ import annotations

import pytest

from genai_catalog.llm.catalog import BUILTIN_MODELS
from genai_catalog.llm.enums import Provider
from genai_catalog.llm.models import DEFAULT_MODEL_NAME, LLMModel


class TestBuiltinModels:
    """Tests for the built-in table."""

    def test_names_unique(self) -> None:
        """Every built-in name appears once."""
        names = [model.name for model in BUILTIN_MODELS]
        assert len(names) == len(set(names))

    @pytest.mark.parametrize("model", BUILTIN_MODELS, ids=lambda model: model.name)
    def test_prices_non_negative(self, model: LLMModel) -> None:
        """Every built-in price is non-negative."""
        assert model.input_price >= 0
        assert model.output_price >= 0

    def test_providers_are_enum_members(self) -> None:
        """Every built-in record has a supported provider."""
        assert all(isinstance(model.provider, Provider) for model in BUILTIN_MODELS)

    def test_default_model_included(self) -> None:
        """Default model is part of the table."""
        assert DEFAULT_MODEL_NAME in {model.name for model in BUILTIN_MODELS}

    def test_free_models(self) -> None:
        """Open Mistral models are listed as free."""
        free = sorted(
            model.name
            for model in BUILTIN_MODELS
            if model.input_price == 0.0 and model.output_price == 0.0
        )

        assert free == ["open-codestral-mamba", "open-mistral-nemo", "pixtral-12b-2409"]
