"""Pipeline subsystem: orchestration and failure classification."""

from flashdeck.pipeline.classifier import ClassifiedError, ErrorCategory, classify
from flashdeck.pipeline.orchestrator import FlashcardPipeline, PipelineResponse

__all__ = [
    "ClassifiedError",
    "ErrorCategory",
    "FlashcardPipeline",
    "PipelineResponse",
    "classify",
]
