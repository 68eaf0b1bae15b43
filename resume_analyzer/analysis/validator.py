"""Validates a recovered JSON object into a ResumeAnalysis."""

from typing import Any

from resume_analyzer.analysis.models import ResumeAnalysis
from resume_analyzer.processor.exceptions import MalformedStructuredResultError

_MIN_SCORE = 0
_MAX_SCORE = 100
_LIST_FIELDS = ("strengths", "weaknesses", "suggestions", "keywords_missing")
_REQUIRED_FIELDS = ("overall_score", *_LIST_FIELDS, "summary")


class _InvalidField(Exception):
    pass


def validate_and_build(data: dict[str, Any], raw_text: str) -> ResumeAnalysis:
    """Validate a recovered object and build a ResumeAnalysis.

    Keys other than the six analysis fields are ignored.

    Raises:
        MalformedStructuredResultError: on any missing or mistyped field.
    """
    try:
        _require_fields(data)
        return ResumeAnalysis(
            overall_score=_build_score(data["overall_score"]),
            strengths=_build_string_list(data["strengths"], "strengths"),
            weaknesses=_build_string_list(data["weaknesses"], "weaknesses"),
            suggestions=_build_string_list(data["suggestions"], "suggestions"),
            keywords_missing=_build_string_list(data["keywords_missing"], "keywords_missing"),
            summary=_build_summary(data["summary"]),
        )
    except _InvalidField as exc:
        raise MalformedStructuredResultError(raw_text, str(exc)) from exc


def _require_fields(data: dict[str, Any]) -> None:
    for name in _REQUIRED_FIELDS:
        if name not in data:
            raise _InvalidField(f"Missing required field: {name}")


def _build_score(raw: Any) -> int:
    # bool is an int subclass
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise _InvalidField("'overall_score' must be a number")
    if isinstance(raw, float) and not raw.is_integer():
        raise _InvalidField(f"'overall_score' must be a whole number, got {raw}")
    score = int(raw)
    if not _MIN_SCORE <= score <= _MAX_SCORE:
        raise _InvalidField(
            f"'overall_score' must be between {_MIN_SCORE} and {_MAX_SCORE}, got {score}"
        )
    return score


def _build_string_list(raw: Any, name: str) -> tuple[str, ...]:
    if not isinstance(raw, list):
        raise _InvalidField(f"'{name}' must be a list")
    for i, item in enumerate(raw):
        if not isinstance(item, str):
            raise _InvalidField(f"'{name}' item at index {i} must be a string")
    return tuple(raw)


def _build_summary(raw: Any) -> str:
    if not isinstance(raw, str):
        raise _InvalidField("'summary' must be a string")
    return raw
