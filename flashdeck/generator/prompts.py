"""Prompt templates for flashcard generation."""

from __future__ import annotations

from flashdeck.extractor.models import ExtractedText
from flashdeck.generator.models import GenerationPrompt

SYSTEM_PROMPT = "You are a flashcard generation assistant."

USER_PROMPT_TEMPLATE = """\
Generate flashcards from the following content. Respond ONLY with a JSON array \
of flashcard objects. Each object must have "question" and "answer" fields. \
Do not include any other text or explanations.

Content:
{content}

Flashcards:
"""


def build_prompt(extracted: ExtractedText | str) -> GenerationPrompt:
    """Wrap document text in the fixed generation instructions."""
    content = extracted.text if isinstance(extracted, ExtractedText) else extracted
    return GenerationPrompt(
        system=SYSTEM_PROMPT,
        user=USER_PROMPT_TEMPLATE.format(content=content),
    )
