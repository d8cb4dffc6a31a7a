"""Format-dispatched text extraction for uploaded documents."""

from __future__ import annotations

import asyncio
import io
import logging
import unicodedata
from collections.abc import Callable
from functools import cached_property

import mammoth
from markitdown import MarkItDown

from flashdeck.errors import EmptyContentError, ExtractionFailureError
from flashdeck.extractor.models import Document, DocumentFormat, ExtractedText

logger = logging.getLogger(__name__)

_PDF_HINT = "Could not parse PDF file. Please check the file format."
_WORD_HINT = (
    "Could not read Word document. Legacy .doc files may need to be "
    "re-saved as .docx."
)


class DocumentExtractor:
    """Turns a Document into ExtractedText using one strategy per format.

    PDF goes through MarkItDown's text-layer converter, Word documents
    through mammoth's raw-text extraction, plain text is decoded as UTF-8.
    Whatever the strategy, blank output is rejected with EmptyContentError.
    """

    def __init__(self) -> None:
        self._strategies: dict[DocumentFormat, Callable[[bytes], str]] = {
            DocumentFormat.PLAIN_TEXT: self._extract_plain_text,
            DocumentFormat.PDF: self._extract_pdf,
            DocumentFormat.DOC: self._extract_word,
            DocumentFormat.DOCX: self._extract_word,
        }

    @cached_property
    def _md(self) -> MarkItDown:
        return MarkItDown(enable_plugins=False)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def extract(self, document: Document) -> ExtractedText:
        """Extract normalized text. Raises a PipelineError subclass on failure."""
        fmt = DocumentFormat.from_mime(document.mime_type)
        logger.debug(
            "extracting %s (%d bytes) as %s",
            document.filename or "<upload>",
            document.size_bytes,
            fmt.name,
        )

        raw = self._strategies[fmt](document.content)
        text = unicodedata.normalize("NFC", raw).strip()
        if not text:
            raise EmptyContentError()

        logger.debug("extracted %d chars from %s", len(text), fmt.name)
        return ExtractedText(text=text, format=fmt)

    async def extract_async(self, document: Document) -> ExtractedText:
        """Run extract() off the event loop; parsing PDFs is CPU-bound."""
        return await asyncio.to_thread(self.extract, document)

    # ------------------------------------------------------------------
    # Strategies
    # ------------------------------------------------------------------

    @staticmethod
    def _extract_plain_text(data: bytes) -> str:
        return data.decode("utf-8-sig", errors="replace")

    def _extract_pdf(self, data: bytes) -> str:
        try:
            result = self._md.convert_stream(io.BytesIO(data), file_extension=".pdf")
        except Exception as e:
            logger.warning("PDF parsing failed", exc_info=True)
            raise ExtractionFailureError("pdf", _PDF_HINT) from e
        return result.markdown or ""

    @staticmethod
    def _extract_word(data: bytes) -> str:
        try:
            result = mammoth.extract_raw_text(io.BytesIO(data))
        except Exception as e:
            logger.warning("Word extraction failed", exc_info=True)
            raise ExtractionFailureError("word", _WORD_HINT) from e
        return result.value or ""
