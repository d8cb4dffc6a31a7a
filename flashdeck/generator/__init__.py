"""Generator subsystem: prompt construction and response parsing."""

from flashdeck.generator.models import (
    Flashcard,
    FlashcardSet,
    GenerationPrompt,
    GenerationResult,
)
from flashdeck.generator.parser import parse_flashcards, strip_code_fence
from flashdeck.generator.prompts import SYSTEM_PROMPT, build_prompt

__all__ = [
    "Flashcard",
    "FlashcardSet",
    "GenerationPrompt",
    "GenerationResult",
    "SYSTEM_PROMPT",
    "build_prompt",
    "parse_flashcards",
    "strip_code_fence",
]
