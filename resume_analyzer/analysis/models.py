from dataclasses import dataclass


@dataclass(frozen=True)
class ResumeAnalysis:
    """Structured resume assessment recovered from the model reply."""

    overall_score: int
    summary: str
    strengths: tuple[str, ...] = ()
    weaknesses: tuple[str, ...] = ()
    suggestions: tuple[str, ...] = ()
    keywords_missing: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {
            "overall_score": self.overall_score,
            "strengths": list(self.strengths),
            "weaknesses": list(self.weaknesses),
            "suggestions": list(self.suggestions),
            "keywords_missing": list(self.keywords_missing),
            "summary": self.summary,
        }
