from resume_analyzer.processor.exceptions import SizeExceededError, UnsupportedFormatError
from resume_analyzer.processor.models import DocumentFormat, UploadedDocument

PDF_MEDIA_TYPE = "application/pdf"
TEXT_MEDIA_TYPE = "text/plain"

DEFAULT_MAX_BYTES = 10 * 1024 * 1024


class DocumentValidator:
    """Classifies an upload as PDF or plain text and enforces the size limit."""

    def __init__(self, max_bytes: int = DEFAULT_MAX_BYTES) -> None:
        self._max_bytes = max_bytes

    def validate(self, document: UploadedDocument) -> DocumentFormat:
        """Resolve the document format once for the rest of the pipeline.

        Media type and file extension are OR-ed: either signal is enough.

        Raises:
            UnsupportedFormatError: if neither signal names PDF or plain text.
            SizeExceededError: if the buffer is over the configured limit.
        """
        media_type = _normalize_media_type(document.media_type)
        file_name = document.file_name.lower()

        is_pdf = media_type == PDF_MEDIA_TYPE or file_name.endswith(".pdf")
        is_text = media_type == TEXT_MEDIA_TYPE or file_name.endswith(".txt")
        if not (is_pdf or is_text):
            raise UnsupportedFormatError(
                details=f"Received {document.media_type or 'unknown type'} ({document.file_name})"
            )

        size = len(document.raw_bytes)
        if size > self._max_bytes:
            raise SizeExceededError(size=size, limit=self._max_bytes)

        return DocumentFormat.PDF if is_pdf else DocumentFormat.PLAIN_TEXT


def _normalize_media_type(media_type: str) -> str:
    return media_type.split(";", 1)[0].strip().lower()
