"""Pydantic models for the LLM subsystem."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class LLMConfig(BaseModel):
    """Configuration for an LLM provider."""

    provider: Literal["openai", "anthropic"]
    model: str
    max_tokens: int = 1000
    temperature: float = 0.3
    api_key: str | None = None
    timeout: float = 60.0


class TokenUsage(BaseModel):
    """Token usage stats from a single LLM call."""

    input_tokens: int
    output_tokens: int


class LLMResponse(BaseModel):
    """Raw assistant output from one backend call, not yet parsed."""

    content: str
    usage: TokenUsage
    model: str
