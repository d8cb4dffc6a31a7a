"""Abstract LLM interface for Flashdeck."""

from __future__ import annotations

from abc import ABC, abstractmethod

from flashdeck.llm.models import LLMConfig, LLMResponse


class LLMProvider(ABC):
    """Provider-agnostic interface for one-shot generation.

    Adapters make exactly one request per call and raise
    BackendFailureError for anything the backend rejects.
    """

    def __init__(self, config: LLMConfig) -> None:
        self.config = config

    @abstractmethod
    async def generate(
        self,
        system: str,
        user: str,
        max_tokens: int = 1000,
    ) -> LLMResponse:
        """Generate a complete response."""
        ...
