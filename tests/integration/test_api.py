from collections.abc import Callable
from unittest.mock import MagicMock, patch

from fastapi import FastAPI, UploadFile
from fastapi.testclient import TestClient

from legal_analyzer.api.routes import read_upload
from legal_analyzer.processor.models import UploadedFile
from legal_analyzer.translation.client_base import BaseTranslationClient
from legal_analyzer.translation.exceptions import TranslationNetworkError
from legal_analyzer.translation.languages import FALLBACK_LANGUAGES, SUPPORTED_LANGUAGES
from legal_analyzer.translation.translator import Translator
from legal_analyzer.validation.file_validator import (
    DOCX_MIME_TYPE,
    MAX_FILE_SIZE_BYTES,
    PDF_MIME_TYPE,
)


def _post_document(
    client: TestClient,
    content: bytes,
    mime_type: str,
    filename: str = "lease.pdf",
    language: str | None = "en",
):  # type: ignore[no-untyped-def]
    data = {"language": language} if language is not None else {}
    return client.post(
        "/documents/analyze",
        files={"document": (filename, content, mime_type)},
        data=data,
    )


def _offline_translator(error: Exception | None = None) -> Translator:
    client = MagicMock(spec=BaseTranslationClient)
    if error is not None:
        client.translate.side_effect = error
        client.get_languages.side_effect = error
    else:
        client.translate.side_effect = lambda text, target: f"[{target}] {text}"
        client.get_languages.return_value = ["en"]
    return Translator(client=client)


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["version"] == "1.0.0"
        assert body["timestamp"].endswith("Z")

    def test_api_prefix_alias(self, client: TestClient) -> None:
        assert client.get("/api/health").status_code == 200
        assert client.get("/api/documents/supported-types").status_code == 200


class TestAnalyzeDocument:
    def test_text_pdf_in_english(self, client: TestClient, lease_pdf_bytes: bytes) -> None:
        response = _post_document(client, lease_pdf_bytes, PDF_MIME_TYPE)
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["analysis"]["documentType"]
        assert len(body["extractedText"]) <= 503
        assert body["extractedText"].startswith("RESIDENTIAL LEASE AGREEMENT")
        assert body["documentInfo"] == {
            "filename": "lease.pdf",
            "size": len(lease_pdf_bytes),
            "type": PDF_MIME_TYPE,
            "language": "en",
        }
        assert body["processedAt"].endswith("Z")

    def test_language_defaults_to_english(self, client: TestClient, lease_pdf_bytes: bytes) -> None:
        response = _post_document(client, lease_pdf_bytes, PDF_MIME_TYPE, language=None)
        assert response.status_code == 200
        assert response.json()["documentInfo"]["language"] == "en"

    def test_oversized_file(self, client: TestClient) -> None:
        content = b"\0" * (MAX_FILE_SIZE_BYTES + 1024)
        uploads: list[UploadedFile] = []

        def recording_read(document: UploadFile) -> UploadedFile:
            upload = read_upload(document)
            uploads.append(upload)
            return upload

        with patch("legal_analyzer.api.routes.read_upload", side_effect=recording_read):
            response = _post_document(client, content, PDF_MIME_TYPE)
        assert len(uploads) == 1
        assert len(uploads[0].content) <= MAX_FILE_SIZE_BYTES + 1
        assert response.status_code == 400
        assert response.json() == {"error": "File size exceeds 50MB limit"}

    def test_docx_without_text(self, client: TestClient, empty_docx_bytes: bytes) -> None:
        response = _post_document(client, empty_docx_bytes, DOCX_MIME_TYPE, filename="blank.docx")
        assert response.status_code == 400
        assert response.json()["error"].startswith("No readable text found")

    def test_docx_with_text(self, client: TestClient, docx_bytes: bytes) -> None:
        response = _post_document(client, docx_bytes, DOCX_MIME_TYPE, filename="job.docx")
        assert response.status_code == 200
        assert "Employment Agreement" in response.json()["extractedText"]

    def test_translation_unreachable_returns_untranslated(
        self,
        make_app: Callable[..., FastAPI],
        lease_pdf_bytes: bytes,
    ) -> None:
        translator = _offline_translator(TranslationNetworkError("offline"))
        client = TestClient(make_app(translator))
        response = _post_document(client, lease_pdf_bytes, PDF_MIME_TYPE, language="fr")
        assert response.status_code == 200
        analysis = response.json()["analysis"]
        assert analysis["documentType"] == "Example Agreement"
        assert analysis["summary"] == (
            "An example analysis produced without contacting an AI provider."
        )

    def test_translated_analysis(self, client: TestClient, lease_pdf_bytes: bytes) -> None:
        response = _post_document(client, lease_pdf_bytes, PDF_MIME_TYPE, language="es")
        assert response.status_code == 200
        analysis = response.json()["analysis"]
        assert analysis["summary"].startswith("[es] ")
        assert analysis["documentType"] == "Example Agreement"
        assert analysis["riskAssessment"]["level"] == "LOW"

    def test_scanned_pdf_uses_ocr(self, client: TestClient, empty_pdf_bytes: bytes) -> None:
        response = _post_document(client, empty_pdf_bytes, PDF_MIME_TYPE, filename="scan.pdf")
        assert response.status_code == 200
        assert response.json()["extractedText"].startswith("This Agreement is entered into")

    def test_numeric_pdf_is_unreadable(self, client: TestClient, numeric_pdf_bytes: bytes) -> None:
        response = _post_document(client, numeric_pdf_bytes, PDF_MIME_TYPE)
        assert response.status_code == 400
        assert response.json()["error"].startswith("No readable text found")

    def test_corrupt_pdf_is_server_error(self, client: TestClient) -> None:
        response = _post_document(client, b"not a pdf", PDF_MIME_TYPE)
        assert response.status_code == 500
        assert response.json()["error"].startswith("Failed to extract text from document")

    def test_unsupported_type(self, client: TestClient) -> None:
        response = _post_document(client, b"hello", "text/plain", filename="notes.txt")
        assert response.status_code == 400
        assert response.json()["error"].startswith("Unsupported file type: text/plain")

    def test_blocked_extension(self, client: TestClient, lease_pdf_bytes: bytes) -> None:
        response = _post_document(client, lease_pdf_bytes, PDF_MIME_TYPE, filename="lease.exe")
        assert response.status_code == 400
        assert response.json() == {"error": "File type not allowed for security reasons"}

    def test_unsupported_language(self, client: TestClient, lease_pdf_bytes: bytes) -> None:
        response = _post_document(client, lease_pdf_bytes, PDF_MIME_TYPE, language="xx")
        assert response.status_code == 400
        assert response.json() == {"error": "Unsupported language code: xx"}

    def test_missing_file(self, client: TestClient) -> None:
        response = client.post("/documents/analyze", data={"language": "en"})
        assert response.status_code == 400
        assert response.json() == {"error": "No file uploaded"}

    def test_unexpected_error_is_generic(
        self,
        client: TestClient,
        lease_pdf_bytes: bytes,
    ) -> None:
        with patch(
            "legal_analyzer.processor.processor.Processor.process",
            side_effect=RuntimeError("disk on fire"),
        ):
            response = _post_document(client, lease_pdf_bytes, PDF_MIME_TYPE)
        assert response.status_code == 500
        assert response.json() == {"error": "An unexpected error occurred. Please try again."}


class TestLanguages:
    def test_curated_catalog(self, client: TestClient) -> None:
        response = client.get("/documents/languages")
        assert response.status_code == 200
        languages = response.json()["languages"]
        assert len(languages) == len(SUPPORTED_LANGUAGES)
        assert languages[0] == {"code": "en", "name": "English"}

    def test_fallback_catalog(self, make_app: Callable[..., FastAPI]) -> None:
        translator = _offline_translator(TranslationNetworkError("offline"))
        client = TestClient(make_app(translator))
        languages = client.get("/documents/languages").json()["languages"]
        assert [item["code"] for item in languages] == [lang.code for lang in FALLBACK_LANGUAGES]


class TestSupportedTypes:
    def test_lists_types(self, client: TestClient) -> None:
        response = client.get("/documents/supported-types")
        assert response.status_code == 200
        types = response.json()["supportedTypes"]
        assert [item["type"] for item in types] == ["PDF", "DOCX", "DOC", "Images"]
        assert types[3]["mimeTypes"] == ["image/jpeg", "image/png", "image/gif", "image/webp"]


class TestCors:
    def test_preflight_allows_configured_origins(self, client: TestClient) -> None:
        for origin in ("http://localhost:3000", "https://app.example.test"):
            response = client.options(
                "/documents/analyze",
                headers={
                    "Origin": origin,
                    "Access-Control-Request-Method": "POST",
                },
            )
            assert response.status_code == 200
            assert response.headers["access-control-allow-origin"] == origin

    def test_unknown_origin_not_allowed(self, client: TestClient) -> None:
        response = client.get("/health", headers={"Origin": "https://evil.test"})
        assert "access-control-allow-origin" not in response.headers
