"""Tests for the HTTP endpoints."""

from collections.abc import Callable
from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from resume_analyzer.processor.exceptions import ModelUnavailableError


def _upload(client: TestClient, name: str, content: bytes, media_type: str):  # type: ignore[no-untyped-def]
    return client.post("/api/analyze", files={"resume": (name, content, media_type)})


class TestHealthEndpoint:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json() == {"status": "OK"}


class TestAnalyzeSuccess:
    def test_text_resume(
        self,
        client: TestClient,
        model_client: MagicMock,
        resume_text: str,
        analysis_payload: dict[str, object],
    ) -> None:
        response = _upload(client, "resume.txt", resume_text.encode(), "text/plain")

        assert response.status_code == 200
        assert response.json() == {"success": True, "analysis": analysis_payload}
        user_prompt = model_client.create_chat_completion.call_args.kwargs["user_prompt"]
        assert resume_text in user_prompt

    def test_pdf_resume(
        self,
        client: TestClient,
        model_client: MagicMock,
        resume_pdf_bytes: bytes,
    ) -> None:
        response = _upload(client, "resume.pdf", resume_pdf_bytes, "application/pdf")

        assert response.status_code == 200
        assert response.json()["analysis"]["overall_score"] == 81
        user_prompt = model_client.create_chat_completion.call_args.kwargs["user_prompt"]
        assert "Jane Smith" in user_prompt

    def test_pdf_detected_by_extension(self, client: TestClient, resume_pdf_bytes: bytes) -> None:
        response = _upload(client, "resume.pdf", resume_pdf_bytes, "application/octet-stream")
        assert response.status_code == 200

    def test_reply_wrapped_in_prose(self, client: TestClient, model_client: MagicMock) -> None:
        model_client.create_chat_completion.return_value = (
            "Sure! Here's the analysis: {\"overall_score\": 72, \"strengths\": "
            "[\"a\",\"b\",\"c\"], \"weaknesses\": [\"x\"], \"suggestions\": [\"y\"], "
            "\"keywords_missing\": [], \"summary\": \"ok\"} Hope this helps!"
        )
        response = _upload(client, "resume.txt", b"Jane Smith", "text/plain")
        assert response.status_code == 200
        assert response.json()["analysis"]["overall_score"] == 72


class TestClientErrors:
    def test_missing_file(self, client: TestClient) -> None:
        response = client.post(
            "/api/analyze",
            files={"attachment": ("resume.txt", b"Jane", "text/plain")},
        )
        assert response.status_code == 400
        assert response.json() == {"error": "No file uploaded"}

    def test_resume_sent_as_text_field(self, client: TestClient, model_client: MagicMock) -> None:
        response = client.post("/api/analyze", data={"resume": "not a file"})
        assert response.status_code == 400
        assert response.json() == {"error": "No file uploaded"}
        model_client.create_chat_completion.assert_not_called()

    def test_unsupported_format(self, client: TestClient, model_client: MagicMock) -> None:
        response = _upload(client, "photo.png", b"\x89PNG", "image/png")
        assert response.status_code == 400
        assert response.json()["error"] == "Only PDF and TXT files are allowed"
        model_client.create_chat_completion.assert_not_called()

    def test_oversized_file(
        self, make_client: Callable[..., TestClient], model_client: MagicMock
    ) -> None:
        client = make_client(max_upload_bytes=16)
        response = _upload(client, "resume.txt", b"x" * 64, "text/plain")
        assert response.status_code == 413
        assert "16 bytes" in response.json()["details"]
        model_client.create_chat_completion.assert_not_called()

    def test_empty_text_file(self, client: TestClient) -> None:
        response = _upload(client, "resume.txt", b"", "text/plain")
        assert response.status_code == 400
        assert response.json()["error"] == "Could not extract text from file"

    def test_scanned_pdf(self, client: TestClient, empty_pdf_bytes: bytes) -> None:
        response = _upload(client, "scan.pdf", empty_pdf_bytes, "application/pdf")
        assert response.status_code == 422
        body = response.json()
        assert body["error"] == "Failed to parse PDF file"
        assert "scanned image" in body["details"]

    def test_corrupt_pdf(self, client: TestClient) -> None:
        response = _upload(client, "broken.pdf", b"%PDF-1.4 garbage", "application/pdf")
        assert response.status_code == 422
        assert response.json()["error"] == "Failed to parse PDF file"


class TestServerErrors:
    def test_model_unavailable(self, client: TestClient, model_client: MagicMock) -> None:
        model_client.create_chat_completion.side_effect = ModelUnavailableError(
            "AI provider API error: invalid api key sk-secret"
        )
        response = _upload(client, "resume.txt", b"Jane Smith", "text/plain")
        assert response.status_code == 503
        assert "sk-secret" not in response.text

    def test_malformed_reply_is_not_exposed(
        self, client: TestClient, model_client: MagicMock
    ) -> None:
        model_client.create_chat_completion.return_value = "I cannot help with that <internal>"
        response = _upload(client, "resume.txt", b"Jane Smith", "text/plain")
        assert response.status_code == 502
        assert response.json() == {"error": "AI returned invalid JSON format"}
        assert "<internal>" not in response.text

    def test_single_model_call_per_request(
        self, client: TestClient, model_client: MagicMock
    ) -> None:
        model_client.create_chat_completion.return_value = "garbage"
        _upload(client, "resume.txt", b"Jane Smith", "text/plain")
        model_client.create_chat_completion.assert_called_once()

    def test_deeply_nested_reply_is_malformed(
        self, client: TestClient, model_client: MagicMock
    ) -> None:
        depth = 100_000
        model_client.create_chat_completion.return_value = (
            '{"overall_score": ' + "[" * depth + "]" * depth + "}"
        )
        response = _upload(client, "resume.txt", b"Jane Smith", "text/plain")
        assert response.status_code == 502
        assert response.json() == {"error": "AI returned invalid JSON format"}

    def test_unexpected_fault_returns_json_error(
        self, make_client: Callable[..., TestClient], model_client: MagicMock
    ) -> None:
        model_client.create_chat_completion.side_effect = RuntimeError("internal state sk-secret")
        client = make_client(raise_server_exceptions=False)
        response = _upload(client, "resume.txt", b"Jane Smith", "text/plain")
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to analyze resume"}
        assert "sk-secret" not in response.text
