"""Cheap checks on an uploaded file before any PDF engine I/O."""

import logging

from story_ingest.models.schemas import (
    PDF_MIME_TYPE,
    FileInfo,
    PDFErrorKind,
    UploadedFile,
    ValidationResult,
)

logger = logging.getLogger(__name__)

BYTES_PER_KB = 1024
SIZE_UNITS = ("Bytes", "KB", "MB", "GB")


def format_file_size(size_bytes: int) -> str:
    """Format a byte count as a human-readable size.

    Args:
        size_bytes: Size in bytes.

    Returns:
        Size with at most one decimal place, e.g. "0 Bytes", "1.5 KB", "6 MB".

    Raises:
        ValueError: If size_bytes is negative.
    """
    if size_bytes < 0:
        raise ValueError(f"File size cannot be negative: {size_bytes}")
    if size_bytes == 0:
        return "0 Bytes"

    value = float(size_bytes)
    unit = 0
    while value >= BYTES_PER_KB and unit < len(SIZE_UNITS) - 1:
        value /= BYTES_PER_KB
        unit += 1

    formatted = f"{value:.1f}".rstrip("0").rstrip(".")
    return f"{formatted} {SIZE_UNITS[unit]}"


def validate_file(file: UploadedFile, max_size_mb: float, max_pages: int) -> ValidationResult:
    """Validate file type and size without reading the file.

    The page limit cannot be checked until the document is opened, so
    max_pages is enforced later by the extraction step.

    Args:
        file: The uploaded file.
        max_size_mb: Maximum allowed size in megabytes.
        max_pages: Maximum allowed page count (checked during extraction).

    Returns:
        ValidationResult with the failure kind, if any, and file info.
    """
    if file.mime_type != PDF_MIME_TYPE:
        logger.info(f"Rejected {file.name}: unsupported type {file.mime_type!r}")
        return ValidationResult(is_valid=False, error=PDFErrorKind.INVALID_FILE_TYPE)

    file_info = FileInfo(name=file.name, size=format_file_size(file.size))

    if file.size > max_size_mb * BYTES_PER_KB * BYTES_PER_KB:
        logger.info(f"Rejected {file.name}: {file_info.size} exceeds {max_size_mb} MB")
        return ValidationResult(
            is_valid=False,
            error=PDFErrorKind.FILE_TOO_LARGE,
            file_info=file_info,
        )

    return ValidationResult(is_valid=True, file_info=file_info)
