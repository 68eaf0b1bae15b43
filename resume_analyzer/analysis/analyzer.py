"""AI-powered resume analyzer."""

import json
from pathlib import Path

from resume_analyzer.analysis.base import BaseAnalyzer
from resume_analyzer.analysis.client_base import BaseAnalysisClient
from resume_analyzer.analysis.models import ResumeAnalysis
from resume_analyzer.analysis.prompt_builder import build_prompt
from resume_analyzer.analysis.prompt_loader import load_json_schema, load_prompt_template
from resume_analyzer.analysis.recovery import OUTERMOST, RECOVERY_MODES, recover_json_object
from resume_analyzer.analysis.validator import validate_and_build
from resume_analyzer.logging.logger import Log
from resume_analyzer.processor.exceptions import MalformedStructuredResultError


class ResumeAnalyzer(BaseAnalyzer):
    """Analyzes resume text into a structured assessment using an AI provider."""

    def __init__(
        self,
        *,
        client: BaseAnalysisClient,
        model: str,
        temperature: float = 0.2,
        recovery_mode: str = OUTERMOST,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
        system_prompt: str = "",
    ) -> None:
        if recovery_mode not in RECOVERY_MODES:
            raise ValueError(
                f"Unknown JSON recovery mode '{recovery_mode}'. "
                f"Choose from: {sorted(RECOVERY_MODES)}"
            )
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))
        self._recovery_mode = recovery_mode
        self._system_prompt = system_prompt
        self._prompt_template = load_prompt_template(prompt_template_path)
        self._json_schema = json.loads(load_json_schema(json_schema_path))

    def analyze(self, text: str) -> ResumeAnalysis:
        """Send resume text to the model and recover its structured reply."""
        prompt = build_prompt(self._prompt_template, text)
        Log.debug(f"Analysis prompt:\n{prompt}")

        raw_response = self._call_ai(prompt)
        Log.debug(f"AI raw response:\n{raw_response}")

        try:
            parsed = recover_json_object(raw_response, mode=self._recovery_mode)
            result = validate_and_build(parsed, raw_response)
        except MalformedStructuredResultError as exc:
            Log.error(f"Error parsing AI JSON: {exc.reason}\nResponse text:\n{exc.raw_text}")
            raise

        Log.info(f"Analysis complete: overall score {result.overall_score}")
        return result

    def _call_ai(self, prompt: str) -> str:
        return self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
            json_schema=self._json_schema,
        )
