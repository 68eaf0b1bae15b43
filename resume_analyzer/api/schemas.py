from pydantic import BaseModel


class AnalysisPayload(BaseModel):
    overall_score: int
    strengths: list[str]
    weaknesses: list[str]
    suggestions: list[str]
    keywords_missing: list[str]
    summary: str


class AnalyzeResponse(BaseModel):
    success: bool = True
    analysis: AnalysisPayload


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None


class HealthResponse(BaseModel):
    status: str = "OK"
