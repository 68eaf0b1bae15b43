from resume_analyzer.logging.logger import Log
from resume_analyzer.pdf.base import BasePdfExtractor
from resume_analyzer.pdf.exceptions import PdfExtractionError, PdfNoTextLayerError
from resume_analyzer.processor.exceptions import EmptyExtractionError, ExtractionFailureError
from resume_analyzer.processor.models import DocumentFormat, ExtractedText

NO_TEXT_LAYER_CAUSE = "No readable text found in PDF (possibly scanned image)"
CORRUPT_PDF_CAUSE = "PDF structure could not be decoded"


class TextExtractor:
    """Turns a validated buffer into non-empty text, dispatching on its format."""

    def __init__(self, pdf_extractor: BasePdfExtractor) -> None:
        self._pdf_extractor = pdf_extractor

    def extract(self, raw_bytes: bytes, document_format: DocumentFormat) -> ExtractedText:
        """Extract text from an in-memory document.

        Raises:
            ExtractionFailureError: if the PDF engine fails or finds no text layer.
            EmptyExtractionError: if a plain-text document is blank.
        """
        if document_format is DocumentFormat.PDF:
            content = self._extract_pdf(raw_bytes)
        else:
            content = raw_bytes.decode("utf-8", errors="replace")

        if not content.strip():
            raise EmptyExtractionError()
        return ExtractedText(content=content, source_format=document_format)

    def _extract_pdf(self, raw_bytes: bytes) -> str:
        try:
            text = self._pdf_extractor.extract(raw_bytes)
        except PdfNoTextLayerError as exc:
            Log.warning(f"PDF has no extractable text layer: {exc}")
            raise ExtractionFailureError(DocumentFormat.PDF, NO_TEXT_LAYER_CAUSE) from exc
        except PdfExtractionError as exc:
            Log.error(f"PDF parsing error: {exc}")
            raise ExtractionFailureError(DocumentFormat.PDF, CORRUPT_PDF_CAUSE) from exc

        if not text.strip():
            Log.warning("PDF has no extractable text layer")
            raise ExtractionFailureError(DocumentFormat.PDF, NO_TEXT_LAYER_CAUSE)
        return text
