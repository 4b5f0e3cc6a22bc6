from google.api_core import exceptions as google_exceptions
from google.api_core.client_options import ClientOptions
from google.auth import exceptions as auth_exceptions
from google.cloud import documentai

from legal_analyzer.logging.logger import Log
from legal_analyzer.ocr.client_base import BaseOcrClient
from legal_analyzer.ocr.exceptions import OcrError


class DocumentAiClientAdapter(BaseOcrClient):
    """OCR through a Google Document AI processor.

    The SDK client resolves application-default credentials when it is built,
    so construction is deferred to the first request.
    """

    def __init__(
        self,
        *,
        project_id: str,
        location: str,
        processor_id: str,
        timeout_seconds: int,
    ) -> None:
        self._project_id = project_id
        self._location = location
        self._processor_id = processor_id
        self._timeout_seconds = timeout_seconds
        self._client: documentai.DocumentProcessorServiceClient | None = None

    @property
    def processor_name(self) -> str:
        return (
            f"projects/{self._project_id}/locations/{self._location}"
            f"/processors/{self._processor_id}"
        )

    def recognize(self, content: bytes, mime_type: str) -> str:
        if not self._project_id:
            raise OcrError("Document AI project id is not configured")

        request = documentai.ProcessRequest(
            name=self.processor_name,
            raw_document=documentai.RawDocument(content=content, mime_type=mime_type),
        )
        try:
            result = self._get_client().process_document(
                request=request,
                timeout=self._timeout_seconds,
            )
        except (google_exceptions.GoogleAPIError, auth_exceptions.GoogleAuthError) as exc:
            raise OcrError(f"Document AI processing failed: {exc}") from exc

        document = result.document
        if not document or not document.text:
            raise OcrError("No text extracted from document")

        Log.info("Document AI OCR completed", mime_type=mime_type, chars=len(document.text))
        return document.text

    def _get_client(self) -> documentai.DocumentProcessorServiceClient:
        if self._client is None:
            endpoint = f"{self._location}-documentai.googleapis.com"
            self._client = documentai.DocumentProcessorServiceClient(
                client_options=ClientOptions(api_endpoint=endpoint),
            )
        return self._client
