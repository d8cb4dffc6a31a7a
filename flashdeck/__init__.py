"""Flashdeck: turn documents into question/answer study cards."""

from flashdeck.extractor import Document
from flashdeck.generator import Flashcard, FlashcardSet, GenerationResult
from flashdeck.pipeline import FlashcardPipeline, PipelineResponse

__version__ = "0.1.0"

__all__ = [
    "Document",
    "Flashcard",
    "FlashcardPipeline",
    "FlashcardSet",
    "GenerationResult",
    "PipelineResponse",
]
