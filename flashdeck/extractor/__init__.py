"""Extraction subsystem: turns uploaded bytes into normalized text."""

from flashdeck.extractor.extractor import DocumentExtractor
from flashdeck.extractor.models import (
    SUFFIX_MIME_TYPES,
    Document,
    DocumentFormat,
    ExtractedText,
)

__all__ = [
    "Document",
    "DocumentExtractor",
    "DocumentFormat",
    "ExtractedText",
    "SUFFIX_MIME_TYPES",
]
