"""PDF upload endpoints for story ingestion.

Handles file upload, validation and text extraction. Failures are returned
as ExtractionResult bodies so the client can map the error kind to its
translated message.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, UploadFile, status

from story_ingest.config import ExtractionConfig, get_extraction_config
from story_ingest.models.schemas import ExtractionResult, FileInfo, PDFErrorKind, UploadedFile
from story_ingest.parsing.pdf_service import PDFService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/upload", tags=["upload"])

ERROR_STATUS = {
    PDFErrorKind.INVALID_FILE_TYPE: status.HTTP_400_BAD_REQUEST,
    PDFErrorKind.FILE_TOO_LARGE: status.HTTP_413_CONTENT_TOO_LARGE,
    PDFErrorKind.TOO_MANY_PAGES: status.HTTP_422_UNPROCESSABLE_CONTENT,
    PDFErrorKind.NO_TEXT_FOUND: status.HTTP_422_UNPROCESSABLE_CONTENT,
    PDFErrorKind.PROCESSING_FAILED: status.HTTP_400_BAD_REQUEST,
}


def get_config() -> ExtractionConfig:
    """Load upload limits and layout thresholds from the environment."""
    return get_extraction_config()


def get_pdf_service(config: Annotated[ExtractionConfig, Depends(get_config)]) -> PDFService:
    """Build a fresh service per request."""
    return PDFService(thresholds=config.thresholds())


async def _to_uploaded_file(file: UploadFile) -> UploadedFile:
    """Adapt a multipart upload without reading it when the size is known."""
    name = file.filename or ""
    mime_type = file.content_type or ""
    if file.size is None:
        return UploadedFile.from_bytes(name, await file.read(), mime_type)
    return UploadedFile(name=name, size=file.size, mime_type=mime_type, reader=file.read)


@router.post("/pdf", response_model=ExtractionResult)
async def upload_pdf(
    file: UploadFile,
    response: Response,
    service: Annotated[PDFService, Depends(get_pdf_service)],
    config: Annotated[ExtractionConfig, Depends(get_config)],
) -> ExtractionResult:
    """Upload a PDF and extract its narrative text.

    Args:
        file: The uploaded PDF file (multipart/form-data).

    Returns:
        ExtractionResult with text and page count, or the failure kind.

    Raises:
        400: Not a PDF, or the PDF could not be processed.
        413: File exceeds the configured size limit.
        422: Too many pages, or no narrative text found.
    """
    uploaded = await _to_uploaded_file(file)
    result = await service.process_pdf(uploaded, config.max_size_mb, config.max_pages)

    if result.error is not None:
        logger.warning(f"PDF upload failed for {uploaded.name}: {result.error.value}")
        response.status_code = ERROR_STATUS[result.error]

    return result


@router.post("/pdf/info", response_model=FileInfo)
async def pdf_info(
    file: UploadFile,
    service: Annotated[PDFService, Depends(get_pdf_service)],
) -> FileInfo:
    """Return name, size and page count of a PDF without extracting text.

    Raises:
        400: The file could not be opened as a PDF.
    """
    info = await service.get_file_info(await _to_uploaded_file(file))
    if info is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=PDFErrorKind.PROCESSING_FAILED.message_key,
        )
    return info
