"""Built-in model table.

Prices are USD per million tokens as published by each provider.
"""

from .enums import Provider
from .models import LLMModel

GOOGLE_MODELS: tuple[LLMModel, ...] = (
    LLMModel(
        Provider.GOOGLE,
        "gemini-2.0-flash",
        "Next-generation features, speed, and multimodal generation for a diverse variety of tasks.",
        0.10,
        0.40,
    ),
    LLMModel(
        Provider.GOOGLE,
        "gemini-2.0-flash-lite",
        "A Gemini 2.0 Flash model optimized for cost efficiency and low latency.",
        0.05,
        0.20,
    ),
    LLMModel(
        Provider.GOOGLE,
        "gemini-1.5-flash",
        "A fast and cost-effective model for rapid assessments. Highly recommended.",
        0.075,
        0.30,
    ),
    LLMModel(
        Provider.GOOGLE,
        "gemini-1.5-pro",
        "A professional version of the Gemini model with enhanced capabilities.",
        1.25,
        5.00,
    ),
)

OPENAI_MODELS: tuple[LLMModel, ...] = (
    LLMModel(Provider.OPEN_AI, "gpt-4.1-nano", "Fastest, most cost-effective GPT-4.1 model", 0.10, 0.40),
    LLMModel(Provider.OPEN_AI, "gpt-4.1-mini", "Balanced for intelligence, speed, and cost.", 0.40, 1.60),
    LLMModel(Provider.OPEN_AI, "gpt-4.1", "Fast, intelligent, flexible GPT model.", 2.00, 8.00),
    LLMModel(Provider.OPEN_AI, "o4-mini", "Faster, more affordable reasoning model.", 1.10, 4.40),
    LLMModel(
        Provider.OPEN_AI,
        "gpt-4o-mini",
        "Fast, affordable small model for focused tasks.",
        0.15,
        0.60,
    ),
    LLMModel(Provider.OPEN_AI, "o3-mini", "A small model alternative to o3.", 1.10, 4.40),
)

ANTHROPIC_MODELS: tuple[LLMModel, ...] = (
    LLMModel(
        Provider.ANTHROPIC,
        "claude-3-5-sonnet-20240620",
        "A sonnet model offering refined conversational capabilities.",
        3.00,
        15.00,
    ),
    LLMModel(
        Provider.ANTHROPIC,
        "claude-3-haiku-20240307",
        "A haiku model designed for concise and creative expression.",
        0.25,
        1.25,
    ),
    LLMModel(
        Provider.ANTHROPIC,
        "claude-3-5-sonnet-20241022",
        "An upgraded sonnet model with enhanced reasoning and computer use capabilities.",
        3.00,
        15.00,
    ),
    LLMModel(
        Provider.ANTHROPIC,
        "claude-3-5-haiku-20241022",
        "An upgraded haiku model with improved intelligence and performance.",
        0.50,
        2.50,
    ),
    LLMModel(
        Provider.ANTHROPIC,
        "claude-3-7-sonnet-20250224",
        "A hybrid reasoning model excelling in complex problem-solving, especially in math and coding.",
        3.00,
        15.00,
    ),
)

MISTRAL_MODELS: tuple[LLMModel, ...] = (
    # Open models, free tier
    LLMModel(
        Provider.MISTRAL,
        "open-codestral-mamba",
        "The first Mamba 2 open-source model, ideal for diverse tasks.",
        0.0,
        0.0,
    ),
    LLMModel(Provider.MISTRAL, "pixtral-12b", "Version-capable small model.", 0.15, 0.15),
    LLMModel(
        Provider.MISTRAL,
        "mistral-nemo",
        "State-of-the-art Mistral model trained specifically for code tasks.",
        0.15,
        0.15,
    ),
    LLMModel(
        Provider.MISTRAL,
        "pixtral-12b-2409",
        "A 12B model with image understanding capabilities in addition to text.",
        0.0,
        0.0,
    ),
    LLMModel(
        Provider.MISTRAL,
        "open-mistral-nemo",
        "A multilingual open-source model released in July 2024.",
        0.0,
        0.0,
    ),
    # Premier models
    LLMModel(
        Provider.MISTRAL,
        "mistral-large-latest",
        "Top-tier reasoning for high-complexity tasks, for your most sophisticated needs.",
        2.00,
        6.00,
    ),
    LLMModel(
        Provider.MISTRAL,
        "mistral-small-latest",
        "Cost-efficient, fast, and reliable option for translation, summarization, and sentiment analysis.",
        0.20,
        0.60,
    ),
    LLMModel(
        Provider.MISTRAL,
        "codestral-latest",
        "State-of-the-art Mistral model trained specifically for code tasks.",
        0.20,
        0.60,
    ),
    # Embedding model, no output price
    LLMModel(
        Provider.MISTRAL,
        "mistral-embed",
        "State-of-the-art semantic model for extracting text representations.",
        0.10,
        0.0,
    ),
    LLMModel(Provider.MISTRAL, "ministral-3b-latest", "Most efficient edge model.", 0.04, 0.04),
    LLMModel(Provider.MISTRAL, "ministral-8b-latest", "Powerful model for on-device use cases.", 0.10, 0.10),
    LLMModel(
        Provider.MISTRAL,
        "mistral-nemo-latest",
        "A state-of-the-art 12B model with 128k context length, built in collaboration with NVIDIA.",
        1.50,
        4.50,
    ),
    LLMModel(
        Provider.MISTRAL,
        "pixtral-large-latest",
        "Frontier-class multimodal model for image and text understanding.",
        2.50,
        7.50,
    ),
    LLMModel(
        Provider.MISTRAL,
        "mistral-saba-latest",
        "Efficient model optimized for languages from the Middle East and South Asia.",
        1.00,
        3.00,
    ),
)

DEEPINFRA_MODELS: tuple[LLMModel, ...] = (
    LLMModel(
        Provider.DEEPINFRA,
        "meta-llama/Llama-3.2-3B-Instruct",
        "A 3B instruct model by Meta for instructional tasks.",
        0.15,
        0.45,
    ),
    LLMModel(
        Provider.DEEPINFRA,
        "Qwen/Qwen2.5-72B-Instruct",
        "A large instruct model for various applications.",
        0.20,
        0.50,
    ),
    LLMModel(
        Provider.DEEPINFRA,
        "google/gemma-2-9b-it",
        "Gemini model specialized for IT tasks, with a focus on performance.",
        0.10,
        0.30,
    ),
    LLMModel(
        Provider.DEEPINFRA,
        "microsoft/WizardLM-2-8x22B",
        "An 8x22B model designed for advanced conversational applications.",
        0.25,
        0.75,
    ),
    LLMModel(
        Provider.DEEPINFRA,
        "mistralai/Mistral-7B-Instruct-v0.3",
        "A 7B instruct model optimized for general tasks.",
        0.15,
        0.45,
    ),
)

DEEPSEEK_MODELS: tuple[LLMModel, ...] = (
    LLMModel(Provider.DEEPSEEK, "deepseek-chat", "", 0.014, 0.28),
)

BUILTIN_MODELS: tuple[LLMModel, ...] = (
    *GOOGLE_MODELS,
    *OPENAI_MODELS,
    *ANTHROPIC_MODELS,
    *MISTRAL_MODELS,
    *DEEPINFRA_MODELS,
    *DEEPSEEK_MODELS,
)
