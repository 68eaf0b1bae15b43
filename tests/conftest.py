import io
import json

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

RESUME_LINES = [
    "Jane Smith - Senior Backend Engineer",
    "Experience: 6 years building Python web services",
    "Skills: Python, FastAPI, PostgreSQL, Docker",
]


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page, like a scan)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def resume_pdf_bytes() -> bytes:
    """Generate a one-page resume PDF."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    y = 720
    for line in RESUME_LINES:
        c.drawString(72, y, line)
        y -= 20
    c.save()
    return buf.getvalue()


@pytest.fixture()
def resume_text() -> str:
    return "\n".join(RESUME_LINES) + "\n"


@pytest.fixture()
def analysis_payload() -> dict[str, object]:
    """A well-formed analysis as the model is asked to return it."""
    return {
        "overall_score": 81,
        "strengths": ["Strong Python background", "Modern stack", "Clear layout"],
        "weaknesses": ["No metrics", "Short summary", "No certifications"],
        "suggestions": ["Quantify impact", "Expand summary", "List certifications"],
        "keywords_missing": ["Kubernetes", "AWS"],
        "summary": "Experienced backend engineer. Impact should be quantified.",
    }


@pytest.fixture()
def analysis_json(analysis_payload: dict[str, object]) -> str:
    return json.dumps(analysis_payload)
