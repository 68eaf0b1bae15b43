from collections.abc import Callable, Generator
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from resume_analyzer.analysis.analyzer import ResumeAnalyzer
from resume_analyzer.analysis.client_base import BaseAnalysisClient
from resume_analyzer.api.app import create_app
from resume_analyzer.config.settings import Settings
from resume_analyzer.pdf.pdfplumber_adapter import PdfPlumberAdapter
from resume_analyzer.processor.processor import Processor
from resume_analyzer.processor.steps import AnalyzeStep, ExtractTextStep, ValidateDocumentStep
from resume_analyzer.processor.text_extractor import TextExtractor
from resume_analyzer.processor.validator import DocumentValidator


@pytest.fixture()
def model_client(analysis_json: str) -> MagicMock:
    """Stub model client returning a fixed well-formed reply."""
    client = MagicMock(spec=BaseAnalysisClient)
    client.create_chat_completion.return_value = analysis_json
    return client


@pytest.fixture()
def make_client(model_client: MagicMock) -> Generator[Callable[..., TestClient], None, None]:
    """Factory for a TestClient wired to the stub model client."""
    clients: list[TestClient] = []

    def _make(
        max_upload_bytes: int = 10 * 1024 * 1024, raise_server_exceptions: bool = True
    ) -> TestClient:
        settings = Settings(analysis_provider="example", max_upload_bytes=max_upload_bytes)
        processor = Processor(
            steps=[
                ValidateDocumentStep(DocumentValidator(max_bytes=max_upload_bytes)),
                ExtractTextStep(TextExtractor(PdfPlumberAdapter())),
                AnalyzeStep(ResumeAnalyzer(client=model_client, model="stub")),
            ]
        )
        test_client = TestClient(
            create_app(settings, processor=processor),
            raise_server_exceptions=raise_server_exceptions,
        )
        clients.append(test_client)
        return test_client

    yield _make
    for test_client in clients:
        test_client.close()


@pytest.fixture()
def client(make_client: Callable[..., TestClient]) -> TestClient:
    return make_client()
