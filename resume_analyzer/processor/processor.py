from resume_analyzer.analysis.factory import AnalyzerFactory
from resume_analyzer.analysis.models import ResumeAnalysis
from resume_analyzer.config.settings import Settings
from resume_analyzer.logging.logger import Log
from resume_analyzer.pdf.factory import PdfExtractorFactory
from resume_analyzer.processor.exceptions import PipelineError
from resume_analyzer.processor.models import UploadedDocument
from resume_analyzer.processor.pipeline import PipelineContext, PipelineStep
from resume_analyzer.processor.steps import AnalyzeStep, ExtractTextStep, ValidateDocumentStep
from resume_analyzer.processor.text_extractor import TextExtractor
from resume_analyzer.processor.validator import DocumentValidator


class Processor:
    """Orchestrates the resume analysis pipeline.

    Pipeline: validate -> extract text -> analyze.
    Each call owns its own context; nothing is shared between documents.
    """

    def __init__(self, steps: list[PipelineStep]) -> None:
        self._steps = steps

    def analyze(self, file_bytes: bytes, media_type: str, file_name: str) -> ResumeAnalysis:
        """Analyze an uploaded file given as its raw parts."""
        document = UploadedDocument(
            raw_bytes=file_bytes,
            media_type=media_type,
            file_name=file_name,
        )
        return self.process(document)

    def process(self, document: UploadedDocument) -> ResumeAnalysis:
        """Run all steps for a document.

        Raises:
            PipelineError: the typed failure of whichever step stopped the run.
        """
        context = PipelineContext(document=document)
        try:
            for step in self._steps:
                context = step.run(context)
        except PipelineError as exc:
            Log.warning(f"Analysis of {document.file_name!r} failed: {exc}")
            raise

        if context.analysis is None:
            raise ValueError("Pipeline finished without producing an analysis")
        return context.analysis


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with all required adapters."""
    validator = DocumentValidator(max_bytes=settings.max_upload_bytes)
    text_extractor = TextExtractor(PdfExtractorFactory.create(settings))
    analyzer = AnalyzerFactory.create(settings)
    return Processor(
        steps=[
            ValidateDocumentStep(validator),
            ExtractTextStep(text_extractor),
            AnalyzeStep(analyzer),
        ]
    )
