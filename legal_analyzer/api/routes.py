from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import JSONResponse

from legal_analyzer.api.dependencies import get_processor, get_settings, get_translator
from legal_analyzer.config.settings import Settings
from legal_analyzer.logging.logger import Log
from legal_analyzer.processor.exceptions import ProcessorError
from legal_analyzer.processor.models import UploadedFile
from legal_analyzer.processor.processor import Processor
from legal_analyzer.translation.translator import Translator
from legal_analyzer.validation.file_validator import (
    DOC_MIME_TYPE,
    DOCX_MIME_TYPE,
    IMAGE_MIME_TYPES,
    MAX_FILE_SIZE_BYTES,
    PDF_MIME_TYPE,
)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred. Please try again."

SUPPORTED_TYPES: list[dict[str, object]] = [
    {
        "type": "PDF",
        "mimeTypes": [PDF_MIME_TYPE],
        "description": "Portable Document Format files, including scanned documents",
    },
    {
        "type": "DOCX",
        "mimeTypes": [DOCX_MIME_TYPE],
        "description": "Microsoft Word documents (2007 and newer)",
    },
    {
        "type": "DOC",
        "mimeTypes": [DOC_MIME_TYPE],
        "description": "Legacy Microsoft Word documents",
    },
    {
        "type": "Images",
        "mimeTypes": list(IMAGE_MIME_TYPES),
        "description": "Image files containing text (OCR will be performed)",
    },
]

router = APIRouter(prefix="/documents", tags=["documents"])


@router.post("/analyze")
def analyze_document(
    document: UploadFile | None = File(None),
    language: str | None = Form(None),
    processor: Processor = Depends(get_processor),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """Validate, extract, analyze and optionally translate an uploaded document."""
    if document is None:
        return JSONResponse(status_code=400, content={"error": "No file uploaded"})

    try:
        upload = read_upload(document)
        envelope = processor.process(upload, language or settings.default_language)
    except ProcessorError as exc:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
    except Exception:
        Log.exception("Unexpected error in document analysis")
        return JSONResponse(status_code=500, content={"error": UNEXPECTED_ERROR_MESSAGE})

    return JSONResponse(content=envelope)


@router.get("/languages")
def list_languages(translator: Translator = Depends(get_translator)) -> dict[str, object]:
    languages = translator.supported_languages()
    return {"languages": [{"code": item.code, "name": item.name} for item in languages]}


@router.get("/supported-types")
def list_supported_types() -> dict[str, object]:
    return {"supportedTypes": SUPPORTED_TYPES}


def read_upload(document: UploadFile) -> UploadedFile:
    """Read the multipart file without buffering more than one byte past the limit.

    An upload whose declared size is already over the limit is not read at all;
    the reported size still fails validation with the size message.
    """
    declared_size = document.size
    if declared_size is not None and declared_size > MAX_FILE_SIZE_BYTES:
        content = b""
        size = declared_size
    else:
        content = document.file.read(MAX_FILE_SIZE_BYTES + 1)
        size = len(content)
    return UploadedFile(
        content=content,
        mime_type=document.content_type or "",
        filename=document.filename or "",
        size=size,
    )
