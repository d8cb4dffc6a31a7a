"""Parse and validate backend output into a FlashcardSet."""

from __future__ import annotations

import json
import logging
import re

from flashdeck.errors import MalformedResponseError
from flashdeck.generator.models import Flashcard, FlashcardSet

logger = logging.getLogger(__name__)

# First fenced block, optionally tagged as json. Later blocks are ignored.
_FENCE_RE = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```", re.IGNORECASE)

_REQUIRED_FIELDS = ("question", "answer")


def strip_code_fence(content: str) -> str:
    """Return the interior of the first ``` block, or the input unchanged."""
    match = _FENCE_RE.search(content)
    if match:
        return match.group(1)
    return content


def parse_flashcards(raw_output: str) -> FlashcardSet:
    """Parse raw assistant text into validated flashcards.

    A bare JSON array is parsed as is; fence stripping only applies when
    the text does not decode on its own. Fails on the first invalid
    element; a partially valid array is never returned.
    """
    content = raw_output.strip()

    try:
        data = json.loads(content)
    except json.JSONDecodeError:
        content = strip_code_fence(content)
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise _malformed(str(e), content) from e

    if not isinstance(data, list):
        raise _malformed("not an array", content)

    cards: list[Flashcard] = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise _malformed(
                f"flashcard at index {index} is not an object", content, index=index
            )
        for field in _REQUIRED_FIELDS:
            value = item.get(field)
            if not isinstance(value, str) or not value.strip():
                raise _malformed(
                    f"flashcard at index {index} is missing {field}",
                    content,
                    index=index,
                    field=field,
                )
        cards.append(Flashcard(question=item["question"], answer=item["answer"]))

    logger.debug("parsed %d flashcards", len(cards))
    return FlashcardSet(tuple(cards))


def _malformed(
    message: str, content: str, index: int | None = None, field: str | None = None
) -> MalformedResponseError:
    logger.error(
        "Error parsing assistant response (%s). Response content: %s", message, content
    )
    return MalformedResponseError(message, content=content, index=index, field=field)
