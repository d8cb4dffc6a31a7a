"""Model client: the single backend call of a pipeline run."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from flashdeck.errors import BackendFailureError
from flashdeck.generator.models import GenerationPrompt
from flashdeck.llm.base import LLMProvider
from flashdeck.llm.models import LLMResponse

logger = logging.getLogger(__name__)


def _is_rate_limited(exc: BaseException) -> bool:
    return isinstance(exc, BackendFailureError) and exc.rate_limited


@dataclass(frozen=True)
class RetryBudget:
    """How many backend attempts one pipeline run may spend.

    The default of one attempt means no retries. Extra attempts are only
    spent on rate-limit rejections, with exponential backoff starting at
    `delay` seconds.
    """

    max_attempts: int = 1
    delay: float = 1.0

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")


class ModelClient:
    """Sends a GenerationPrompt to the provider with a fixed token ceiling."""

    def __init__(
        self,
        provider: LLMProvider,
        max_tokens: int = 1000,
        retry: RetryBudget | None = None,
    ) -> None:
        self.provider = provider
        self.max_tokens = max_tokens
        self.retry = retry or RetryBudget()

    async def generate(self, prompt: GenerationPrompt) -> LLMResponse:
        """Return raw assistant output. Raises BackendFailureError."""
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.retry.max_attempts),
            wait=wait_exponential(multiplier=self.retry.delay),
            retry=retry_if_exception(_is_rate_limited),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )
        async for attempt in retrying:
            with attempt:
                response = await self.provider.generate(
                    system=prompt.system,
                    user=prompt.user,
                    max_tokens=self.max_tokens,
                )
        logger.debug(
            "backend %s returned %d chars (%d in / %d out tokens)",
            response.model,
            len(response.content),
            response.usage.input_tokens,
            response.usage.output_tokens,
        )
        return response
