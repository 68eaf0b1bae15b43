class PdfExtractionError(Exception):
    """Raised when a PDF engine cannot decode the document structure."""


class PdfNoTextLayerError(PdfExtractionError):
    """Raised when a PDF decodes but carries no extractable text (e.g. a scan)."""
