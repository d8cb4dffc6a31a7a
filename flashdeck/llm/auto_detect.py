"""Auto-detect the best available LLM provider."""

from __future__ import annotations

import os

from flashdeck.llm.base import LLMProvider
from flashdeck.llm.models import LLMConfig


def auto_detect_provider(
    max_tokens: int = 1000, timeout: float = 60.0
) -> LLMProvider:
    """Return the first provider whose API key is set.

    Order: Anthropic > OpenAI. Raises ValueError if neither key is present.
    """
    api_key = os.environ.get("ANTHROPIC_API_KEY")
    if api_key:
        from flashdeck.llm.claude import ClaudeProvider

        return ClaudeProvider(
            LLMConfig(
                provider="anthropic",
                model="claude-haiku-4-5-20251001",
                max_tokens=max_tokens,
                api_key=api_key,
                timeout=timeout,
            )
        )

    api_key = os.environ.get("OPENAI_API_KEY")
    if api_key:
        from flashdeck.llm.openai_adapter import OpenAIProvider

        return OpenAIProvider(
            LLMConfig(
                provider="openai",
                model="gpt-4o-mini",
                max_tokens=max_tokens,
                api_key=api_key,
                timeout=timeout,
            )
        )

    raise ValueError(
        "No LLM provider found. Set provider in flashdeck.yaml or export an "
        "API key (ANTHROPIC_API_KEY, OPENAI_API_KEY)."
    )
