from dataclasses import dataclass
from enum import Enum


class DocumentFormat(Enum):
    """Document formats the pipeline can extract text from."""

    PLAIN_TEXT = "text"
    PDF = "pdf"

    @property
    def label(self) -> str:
        return "PDF" if self is DocumentFormat.PDF else "text"


@dataclass(frozen=True)
class UploadedDocument:
    """A single uploaded file as received from the caller."""

    raw_bytes: bytes
    media_type: str
    file_name: str

    def __repr__(self) -> str:
        return (
            f"UploadedDocument(file_name={self.file_name!r}, "
            f"media_type={self.media_type!r}, size={len(self.raw_bytes)})"
        )


@dataclass(frozen=True)
class ExtractedText:
    """Non-empty text recovered from a document."""

    content: str
    source_format: DocumentFormat
