"""OpenAI adapter for Flashdeck."""

from __future__ import annotations

from openai import APIError, AsyncOpenAI, RateLimitError

from flashdeck.errors import BackendFailureError
from flashdeck.llm.base import LLMProvider
from flashdeck.llm.models import LLMConfig, LLMResponse, TokenUsage


class OpenAIProvider(LLMProvider):
    """OpenAI adapter using the async SDK."""

    def __init__(self, config: LLMConfig) -> None:
        super().__init__(config)
        self._client = AsyncOpenAI(
            api_key=config.api_key,  # falls back to OPENAI_API_KEY env var
            timeout=config.timeout,
            max_retries=0,
        )

    async def generate(
        self,
        system: str,
        user: str,
        max_tokens: int = 1000,
    ) -> LLMResponse:
        try:
            response = await self._client.chat.completions.create(
                model=self.config.model,
                max_tokens=max_tokens,
                temperature=self.config.temperature,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": user},
                ],
            )
        except APIError as e:
            raise BackendFailureError(
                "openai", e, rate_limited=isinstance(e, RateLimitError)
            ) from e

        if not response.choices:
            raise BackendFailureError("openai", ValueError("No choices in OpenAI response"))
        choice = response.choices[0]
        usage = response.usage
        return LLMResponse(
            content=choice.message.content or "",
            usage=TokenUsage(
                input_tokens=usage.prompt_tokens if usage else 0,
                output_tokens=usage.completion_tokens if usage else 0,
            ),
            model=response.model,
        )
