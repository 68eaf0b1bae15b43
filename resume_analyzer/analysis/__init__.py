from resume_analyzer.analysis.analyzer import ResumeAnalyzer
from resume_analyzer.analysis.base import BaseAnalyzer
from resume_analyzer.analysis.factory import AnalyzerFactory
from resume_analyzer.analysis.models import ResumeAnalysis

__all__ = ["AnalyzerFactory", "BaseAnalyzer", "ResumeAnalysis", "ResumeAnalyzer"]
