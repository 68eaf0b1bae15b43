from abc import ABC, abstractmethod
from typing import ClassVar

from resume_analyzer.pdf.exceptions import PdfExtractionError, PdfNoTextLayerError


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters.

    Subclasses only read per-page text; joining, trimming and the
    empty-text-layer check are shared.
    """

    engine_name: ClassVar[str]

    def extract(self, pdf_bytes: bytes) -> str:
        """Extract the text layer from PDF bytes.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            Text of all pages joined by newlines and stripped. Never empty.

        Raises:
            PdfNoTextLayerError: if the document has no readable text.
            PdfExtractionError: if the document cannot be decoded.
        """
        try:
            pages = self._page_texts(pdf_bytes)
        except Exception as exc:
            raise PdfExtractionError(f"{self.engine_name} extraction failed: {exc}") from exc

        text = "\n".join(pages).strip()
        if not text:
            raise PdfNoTextLayerError(
                f"{self.engine_name} found no text in {len(pages)} page(s)"
            )
        return text

    @abstractmethod
    def _page_texts(self, pdf_bytes: bytes) -> list[str]:
        """Return the raw text of each page, in order."""
