"""Example analysis client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseAnalysisClient and register the provider in AnalyzerFactory.
"""

import json
from typing import ClassVar

from resume_analyzer.analysis.client_base import BaseAnalysisClient


class ExampleClientAdapter(BaseAnalysisClient):
    """Example adapter that returns a fixed valid analysis JSON.

    No network calls. Useful for local development and tests.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "overall_score": 70,
        "strengths": [
            "Clear chronological work history",
            "Relevant technical skills listed",
            "Concise formatting",
        ],
        "weaknesses": [
            "Few quantified achievements",
            "Generic objective statement",
            "No links to portfolio or projects",
        ],
        "suggestions": [
            "Add metrics to each role's accomplishments",
            "Replace the objective with a targeted summary",
            "Link to a portfolio or public repositories",
        ],
        "keywords_missing": ["CI/CD", "cloud infrastructure"],
        "summary": "A solid resume with a clear structure. Quantifying impact would make it stronger.",
    }

    def __init__(self, response: dict[str, object] | None = None) -> None:
        self._response = response if response is not None else self.DEFAULT_RESPONSE

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
    ) -> str:
        _ = model, temperature, system_prompt, user_prompt, json_schema
        return json.dumps(self._response)
