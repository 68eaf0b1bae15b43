from abc import ABC, abstractmethod

from resume_analyzer.analysis.models import ResumeAnalysis


class BaseAnalyzer(ABC):
    """Contract for all resume analyzers."""

    @abstractmethod
    def analyze(self, text: str) -> ResumeAnalysis:
        """Produce a structured assessment of resume text.

        Raises:
            ModelUnavailableError: if the model cannot be reached.
            MalformedStructuredResultError: if the reply holds no valid analysis.
        """
