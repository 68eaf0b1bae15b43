from abc import ABC, abstractmethod
from dataclasses import dataclass

from resume_analyzer.analysis.models import ResumeAnalysis
from resume_analyzer.processor.models import DocumentFormat, ExtractedText, UploadedDocument


@dataclass(slots=True)
class PipelineContext:
    document: UploadedDocument
    document_format: DocumentFormat | None = None
    extracted_text: ExtractedText | None = None
    analysis: ResumeAnalysis | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
