"""Pipeline orchestrator: document in, flashcards or one classified error out."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict

from flashdeck.config import FlashdeckConfig
from flashdeck.errors import MissingInputError
from flashdeck.extractor import Document, DocumentExtractor
from flashdeck.generator import GenerationResult, build_prompt, parse_flashcards
from flashdeck.llm import ModelClient, create_model_client
from flashdeck.pipeline.classifier import ClassifiedError, classify

logger = logging.getLogger(__name__)


class PipelineResponse(BaseModel):
    """Status code plus JSON body, ready for an HTTP or UI layer."""

    model_config = ConfigDict(frozen=True)

    status_code: int
    body: dict
    result: GenerationResult | None = None
    error: ClassifiedError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class FlashcardPipeline:
    """Runs one document through the generation pipeline.

    Pipeline:
        Document → extract → build_prompt → ModelClient → parse → GenerationResult

    Holds no per-run state, so one instance can serve concurrent runs.
    """

    def __init__(
        self,
        client: ModelClient,
        extractor: DocumentExtractor | None = None,
    ) -> None:
        self.client = client
        self.extractor = extractor or DocumentExtractor()

    @classmethod
    def from_config(cls, config: FlashdeckConfig) -> FlashcardPipeline:
        return cls(create_model_client(config.llm))

    async def run(self, document: Document | None) -> GenerationResult:
        """Generate flashcards, raising the first stage's PipelineError.

        Steps:
            1. Extract normalized text (fails on unsupported/empty/corrupt input)
            2. Build the generation prompt
            3. Call the backend once (or per the client's retry budget)
            4. Parse and validate the cards
        """
        if document is None:
            raise MissingInputError()

        extracted = await self.extractor.extract_async(document)
        prompt = build_prompt(extracted)
        raw = await self.client.generate(prompt)
        flashcards = parse_flashcards(raw.content)

        logger.info(
            "generated %d flashcards from %s (%d chars)",
            len(flashcards),
            document.filename or "<upload>",
            extracted.char_count,
        )
        return GenerationResult(flashcards=flashcards)

    async def process(self, document: Document | None) -> PipelineResponse:
        """Run the pipeline and present the outcome; never raises on failure."""
        try:
            result = await self.run(document)
        except Exception as e:
            return _error_response(classify(e))
        return PipelineResponse(status_code=200, body=result.to_body(), result=result)


def _error_response(error: ClassifiedError) -> PipelineResponse:
    return PipelineResponse(
        status_code=error.status_code,
        body=error.to_body(),
        error=error,
    )
