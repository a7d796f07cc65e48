"""Pydantic models shared by the extraction pipeline and the API.

Models:
    - UploadedFile: File handed in by the caller
    - ValidationResult / FileInfo: Pre-I/O checks and previews
    - TextRun / PageExtraction: Positioned text emitted by the PDF engine
    - LayoutThresholds: Tunable layout heuristics
    - ExtractionResult / PDFErrorKind: Pipeline outcome
"""

from story_ingest.models.schemas import (
    PDF_MIME_TYPE,
    ExtractionResult,
    FileInfo,
    LayoutThresholds,
    PageExtraction,
    PDFErrorKind,
    TextRun,
    UploadedFile,
    ValidationResult,
)

__all__ = [
    "PDF_MIME_TYPE",
    "ExtractionResult",
    "FileInfo",
    "LayoutThresholds",
    "PageExtraction",
    "PDFErrorKind",
    "TextRun",
    "UploadedFile",
    "ValidationResult",
]
