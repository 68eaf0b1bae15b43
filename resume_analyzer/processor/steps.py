from resume_analyzer.analysis.base import BaseAnalyzer
from resume_analyzer.logging.logger import Log
from resume_analyzer.processor.pipeline import PipelineContext, PipelineStep
from resume_analyzer.processor.text_extractor import TextExtractor
from resume_analyzer.processor.validator import DocumentValidator


class ValidateDocumentStep(PipelineStep):
    def __init__(self, validator: DocumentValidator) -> None:
        self._validator = validator

    def run(self, context: PipelineContext) -> PipelineContext:
        context.document_format = self._validator.validate(context.document)
        Log.info(
            f"Accepted {context.document.file_name!r} as {context.document_format.value} "
            f"({len(context.document.raw_bytes)} bytes)"
        )
        return context


class ExtractTextStep(PipelineStep):
    def __init__(self, text_extractor: TextExtractor) -> None:
        self._text_extractor = text_extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.document_format is None:
            raise ValueError("PipelineContext.document_format must be set before extraction")
        context.extracted_text = self._text_extractor.extract(
            context.document.raw_bytes,
            context.document_format,
        )
        Log.info(
            f"Extracted {len(context.extracted_text.content)} chars from "
            f"{context.document.file_name!r}"
        )
        return context


class AnalyzeStep(PipelineStep):
    def __init__(self, analyzer: BaseAnalyzer) -> None:
        self._analyzer = analyzer

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.extracted_text is None:
            raise ValueError("PipelineContext.extracted_text must be set before analysis")
        context.analysis = self._analyzer.analyze(context.extracted_text.content)
        return context
