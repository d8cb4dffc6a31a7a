"""Pydantic models for the extraction subsystem."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from flashdeck.errors import UnsupportedFormatError


class DocumentFormat(str, Enum):
    """Closed set of document types the extractor understands."""

    PLAIN_TEXT = "text/plain"
    PDF = "application/pdf"
    DOC = "application/msword"
    DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

    @classmethod
    def from_mime(cls, mime_type: str) -> DocumentFormat:
        """Resolve a declared MIME type, ignoring case and parameters."""
        base = mime_type.split(";", 1)[0].strip().lower()
        try:
            return cls(base)
        except ValueError:
            raise UnsupportedFormatError(mime_type) from None


# Suffix → MIME type used when the caller hands us a path instead of an upload.
SUFFIX_MIME_TYPES: dict[str, str] = {
    ".txt": DocumentFormat.PLAIN_TEXT.value,
    ".md": DocumentFormat.PLAIN_TEXT.value,
    ".pdf": DocumentFormat.PDF.value,
    ".doc": DocumentFormat.DOC.value,
    ".docx": DocumentFormat.DOCX.value,
}


class Document(BaseModel):
    """Raw upload: bytes plus the MIME type the caller declared."""

    model_config = ConfigDict(frozen=True)

    content: bytes
    mime_type: str
    filename: str | None = None

    @classmethod
    def from_path(cls, path: str | Path, mime_type: str | None = None) -> Document:
        """Read a file, guessing the MIME type from its suffix when not given.

        Unknown suffixes fall back to application/octet-stream so the
        extractor reports them as unsupported.
        """
        p = Path(path)
        if mime_type is None:
            mime_type = SUFFIX_MIME_TYPES.get(p.suffix.lower(), "application/octet-stream")
        return cls(content=p.read_bytes(), mime_type=mime_type, filename=p.name)

    @property
    def size_bytes(self) -> int:
        return len(self.content)


class ExtractedText(BaseModel):
    """Normalized, non-blank text pulled out of a Document."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(min_length=1)
    format: DocumentFormat

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("extracted text cannot be empty or whitespace")
        return v

    @property
    def char_count(self) -> int:
        return len(self.text)
