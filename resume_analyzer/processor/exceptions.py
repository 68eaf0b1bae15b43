"""Typed failures of the analysis pipeline.

Every failure path of a single analysis ends in exactly one of these.
``message`` and ``details`` are safe to show to the caller; internal causes
travel on the exception chain and in the logs only.
"""

from resume_analyzer.processor.models import DocumentFormat


class PipelineError(Exception):
    """Base exception for all analysis pipeline failures."""

    default_message = "Failed to analyze resume"

    def __init__(self, message: str | None = None, *, details: str | None = None) -> None:
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


class UnsupportedFormatError(PipelineError):
    """Raised when neither media type nor file extension is PDF or plain text."""

    default_message = "Only PDF and TXT files are allowed"


class SizeExceededError(PipelineError):
    """Raised when the uploaded buffer is larger than the configured limit."""

    default_message = "File is too large"

    def __init__(self, size: int, limit: int) -> None:
        super().__init__(details=f"Maximum upload size is {limit} bytes, got {size}")
        self.size = size
        self.limit = limit


class EmptyExtractionError(PipelineError):
    """Raised when a document yields no usable text."""

    default_message = "Could not extract text from file"


class ExtractionFailureError(PipelineError):
    """Raised when a format-specific decoder cannot recover any text."""

    def __init__(self, document_format: DocumentFormat, cause: str) -> None:
        super().__init__(f"Failed to parse {document_format.label} file", details=cause)
        self.document_format = document_format
        self.cause = cause


class ModelUnavailableError(PipelineError):
    """Raised when the remote model cannot be reached or refuses the request."""

    def __init__(self, cause: str) -> None:
        super().__init__(details="The analysis service is currently unavailable")
        self.cause = cause

    def __str__(self) -> str:
        return self.cause


class MalformedStructuredResultError(PipelineError):
    """Raised when no valid analysis can be recovered from the model reply.

    ``raw_text`` keeps the untouched reply for diagnostics; it is never part
    of the user-facing message.
    """

    default_message = "AI returned invalid JSON format"

    def __init__(self, raw_text: str, reason: str) -> None:
        super().__init__()
        self.raw_text = raw_text
        self.reason = reason

    def __str__(self) -> str:
        return f"{self.message}: {self.reason}"
