"""Exception hierarchy for the flashcard generation pipeline."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Which pipeline stage failed, and how."""

    MISSING_INPUT = "missing_input"
    UNSUPPORTED_FORMAT = "unsupported_format"
    EMPTY_CONTENT = "empty_content"
    EXTRACTION_FAILURE = "extraction_failure"
    BACKEND_FAILURE = "backend_failure"
    MALFORMED_RESPONSE = "malformed_response"


class PipelineError(Exception):
    """Terminal failure of one pipeline stage.

    Every stage raises a subclass of this and never catches another
    stage's error. Only the classifier turns it into a user-facing outcome.
    """

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MissingInputError(PipelineError):
    kind = ErrorKind.MISSING_INPUT

    def __init__(self, message: str = "No file provided") -> None:
        super().__init__(message)


class UnsupportedFormatError(PipelineError):
    kind = ErrorKind.UNSUPPORTED_FORMAT

    def __init__(self, mime_type: str) -> None:
        self.mime_type = mime_type
        super().__init__(f"Unsupported file type: {mime_type}")


class EmptyContentError(PipelineError):
    kind = ErrorKind.EMPTY_CONTENT

    def __init__(self, message: str = "No text could be extracted from the file") -> None:
        super().__init__(message)


class ExtractionFailureError(PipelineError):
    kind = ErrorKind.EXTRACTION_FAILURE

    def __init__(self, format_name: str, hint: str) -> None:
        self.format_name = format_name
        super().__init__(hint)


class BackendFailureError(PipelineError):
    """Wraps a provider exception, keeping the provider's message untouched."""

    kind = ErrorKind.BACKEND_FAILURE

    def __init__(
        self, provider: str, cause: Exception, rate_limited: bool = False
    ) -> None:
        self.provider = provider
        self.rate_limited = rate_limited
        super().__init__(str(cause))
        self.__cause__ = cause


class MalformedResponseError(PipelineError):
    """Backend output that is not a valid flashcard array.

    `content` holds the offending text for diagnostics and is kept out of
    the message.
    """

    kind = ErrorKind.MALFORMED_RESPONSE

    def __init__(
        self,
        message: str,
        content: str = "",
        index: int | None = None,
        field: str | None = None,
    ) -> None:
        self.content = content
        self.index = index
        self.field = field
        super().__init__(f"Failed to parse flashcards: {message}")
