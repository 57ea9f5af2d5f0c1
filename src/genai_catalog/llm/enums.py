"""Enums for model records."""

from enum import Enum


class Provider(str, Enum):
    """Upstream service hosting a model."""

    GOOGLE = "google"
    OPEN_AI = "openai"
    ANTHROPIC = "anthropic"
    MISTRAL = "mistral"
    DEEPINFRA = "deepinfra"
    DEEPSEEK = "deepseek"
