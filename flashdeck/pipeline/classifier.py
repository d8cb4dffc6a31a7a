"""Map pipeline failures to user-facing category/status/message triples."""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import BaseModel, ConfigDict

from flashdeck.errors import BackendFailureError, ErrorKind, PipelineError

logger = logging.getLogger(__name__)

RATE_LIMIT_MARKERS: tuple[str, ...] = ("rate_limit", "rate limit")
TOO_LARGE_MARKERS: tuple[str, ...] = (
    "context_length_exceeded",
    "maximum context length",
    "prompt is too long",
)

_BAD_INPUT_KINDS = frozenset({
    ErrorKind.MISSING_INPUT,
    ErrorKind.UNSUPPORTED_FORMAT,
    ErrorKind.EMPTY_CONTENT,
})

RATE_LIMITED_MESSAGE = "Rate limit exceeded. Please try again in a few minutes."
TOO_LARGE_MESSAGE = "Document is too large. Please try with a smaller document."
INTERNAL_MESSAGE = "Failed to generate flashcards. Please try again."


class ErrorCategory(str, Enum):
    BAD_INPUT = "bad_input"
    RATE_LIMITED = "rate_limited"
    TOO_LARGE = "too_large"
    INTERNAL = "internal"


class ClassifiedError(BaseModel):
    """What the caller gets to see about a failed run."""

    model_config = ConfigDict(frozen=True)

    category: ErrorCategory
    status_code: int
    message: str

    def to_body(self) -> dict:
        return {"error": self.message}


def _mentions(text: str, markers: tuple[str, ...]) -> bool:
    lowered = text.lower()
    return any(marker in lowered for marker in markers)


def classify(error: BaseException) -> ClassifiedError:
    """Classify any failure. Total: unknown errors become Internal/500.

    Internal diagnostics are logged here and replaced by a generic message.
    """
    text = str(error)

    if (isinstance(error, BackendFailureError) and error.rate_limited) or _mentions(
        text, RATE_LIMIT_MARKERS
    ):
        logger.warning("backend rate limit: %s", text)
        return ClassifiedError(
            category=ErrorCategory.RATE_LIMITED,
            status_code=429,
            message=RATE_LIMITED_MESSAGE,
        )

    if _mentions(text, TOO_LARGE_MARKERS):
        logger.warning("document exceeds backend context: %s", text)
        return ClassifiedError(
            category=ErrorCategory.TOO_LARGE,
            status_code=413,
            message=TOO_LARGE_MESSAGE,
        )

    if isinstance(error, PipelineError) and error.kind in _BAD_INPUT_KINDS:
        logger.info("rejected input: %s", text)
        return ClassifiedError(
            category=ErrorCategory.BAD_INPUT,
            status_code=400,
            message=error.message,
        )

    logger.error("flashcard generation failed: %s", text, exc_info=error)
    return ClassifiedError(
        category=ErrorCategory.INTERNAL,
        status_code=500,
        message=INTERNAL_MESSAGE,
    )
