"""Pydantic models for the generator subsystem."""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator


class GenerationPrompt(BaseModel):
    """System/user prompt pair sent to the backend for one document."""

    model_config = ConfigDict(frozen=True)

    system: str
    user: str


class Flashcard(BaseModel):
    """One question/answer study card."""

    model_config = ConfigDict(frozen=True)

    question: str = Field(min_length=1)
    answer: str = Field(min_length=1)

    @field_validator("question", "answer")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("flashcard fields cannot be empty or whitespace")
        return v


class FlashcardSet(RootModel[tuple[Flashcard, ...]]):
    """Cards in the order the backend generated them."""

    model_config = ConfigDict(frozen=True)

    def __iter__(self) -> Iterator[Flashcard]:  # type: ignore[override]
        return iter(self.root)

    def __getitem__(self, index: int) -> Flashcard:
        return self.root[index]

    def __len__(self) -> int:
        return len(self.root)


class GenerationResult(BaseModel):
    """Successful pipeline output.

    The document is always processed as a single unit, so both chunk
    counters are 1. Callers may still compare them to detect partial runs.
    """

    model_config = ConfigDict(frozen=True)

    flashcards: FlashcardSet
    total_chunks: int = Field(default=1, serialization_alias="totalChunks")
    processed_chunks: int = Field(default=1, serialization_alias="processedChunks")

    def to_body(self) -> dict:
        """JSON response body for the outer HTTP/UI layer."""
        return self.model_dump(mode="json", by_alias=True)
