"""LLM provider abstraction layer."""

import os

from flashdeck.config.models import LLMSettings
from flashdeck.llm.base import LLMProvider
from flashdeck.llm.claude import ClaudeProvider
from flashdeck.llm.client import ModelClient, RetryBudget
from flashdeck.llm.models import LLMConfig, LLMResponse, TokenUsage
from flashdeck.llm.openai_adapter import OpenAIProvider

_PROVIDER_MAP: dict[str, type[LLMProvider]] = {
    "anthropic": ClaudeProvider,
    "openai": OpenAIProvider,
}


def create_llm_provider(config: LLMSettings) -> LLMProvider:
    """Create an LLM provider from app-level settings.

    Resolves the API key from the env var in config.api_key_env, then
    bridges LLMSettings to the provider-level LLMConfig.
    For "auto" provider, delegates to auto_detect_provider().
    """
    if config.provider == "auto":
        from flashdeck.llm.auto_detect import auto_detect_provider

        return auto_detect_provider(max_tokens=config.max_tokens, timeout=config.timeout)

    cls = _PROVIDER_MAP.get(config.provider)
    if cls is None:
        raise ValueError(
            f"Unsupported LLM provider: {config.provider!r}. "
            f"Supported: {', '.join(_PROVIDER_MAP)}"
        )
    api_key = os.environ.get(config.api_key_env)
    if not api_key:
        raise ValueError(
            f"Missing API key: set environment variable {config.api_key_env!r}"
        )
    llm_config = LLMConfig(
        provider=config.provider,
        model=config.model,
        max_tokens=config.max_tokens,
        temperature=config.temperature,
        api_key=api_key,
        timeout=config.timeout,
    )
    return cls(llm_config)


def create_model_client(config: LLMSettings) -> ModelClient:
    """Build a ModelClient whose retry budget comes from config.max_retries."""
    return ModelClient(
        create_llm_provider(config),
        max_tokens=config.max_tokens,
        retry=RetryBudget(
            max_attempts=config.max_retries + 1,
            delay=config.retry_delay,
        ),
    )


__all__ = [
    "ClaudeProvider",
    "LLMConfig",
    "LLMProvider",
    "LLMResponse",
    "ModelClient",
    "OpenAIProvider",
    "RetryBudget",
    "TokenUsage",
    "create_llm_provider",
    "create_model_client",
]
