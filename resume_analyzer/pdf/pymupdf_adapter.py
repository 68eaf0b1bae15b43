import pymupdf

from resume_analyzer.pdf.base import BasePdfExtractor


class PyMuPdfAdapter(BasePdfExtractor):
    """Reads page text with PyMuPDF."""

    engine_name = "pymupdf"

    def _page_texts(self, pdf_bytes: bytes) -> list[str]:
        with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
            return [page.get_text() for page in doc]
