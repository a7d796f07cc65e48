from collections.abc import Awaitable, Callable
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

PDF_MIME_TYPE = "application/pdf"


class PDFErrorKind(str, Enum):
    """Failure kinds surfaced by the extraction pipeline."""

    INVALID_FILE_TYPE = "invalid_file_type"
    FILE_TOO_LARGE = "file_too_large"
    TOO_MANY_PAGES = "too_many_pages"
    NO_TEXT_FOUND = "no_text_found"
    PROCESSING_FAILED = "processing_failed"

    @property
    def message_key(self) -> str:
        """Translation key the UI shows for this failure."""
        return _MESSAGE_KEYS[self]


_MESSAGE_KEYS = {
    PDFErrorKind.INVALID_FILE_TYPE: "pdfUpload.errors.invalidFileType",
    PDFErrorKind.FILE_TOO_LARGE: "pdfUpload.errors.fileTooLarge",
    PDFErrorKind.TOO_MANY_PAGES: "pdfUpload.errors.tooManyPages",
    PDFErrorKind.NO_TEXT_FOUND: "pdfUpload.errors.noTextFound",
    PDFErrorKind.PROCESSING_FAILED: "pdfUpload.errors.processingFailed",
}


class UploadedFile(BaseModel):
    """An uploaded file as seen by the pipeline.

    Attributes:
        name: Original file name.
        size: Declared size in bytes.
        mime_type: Declared MIME type.
        reader: Zero-argument coroutine function returning the file bytes.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    size: int = Field(ge=0)
    mime_type: str
    reader: Callable[[], Awaitable[bytes]] = Field(exclude=True, repr=False)

    async def read(self) -> bytes:
        """Return the raw bytes of the file."""
        return await self.reader()

    @classmethod
    def from_bytes(
        cls, name: str, data: bytes, mime_type: str = PDF_MIME_TYPE
    ) -> "UploadedFile":
        """Wrap in-memory bytes as an uploaded file."""

        async def reader() -> bytes:
            return data

        return cls(name=name, size=len(data), mime_type=mime_type, reader=reader)


class FileInfo(BaseModel):
    """Lightweight description of an uploaded file.

    Attributes:
        name: Original file name.
        size: Human-readable size, e.g. "1.5 KB".
        pages: Page count, when the document has been opened.
    """

    name: str
    size: str
    pages: int | None = None


class ValidationResult(BaseModel):
    """Outcome of the pre-I/O file checks."""

    is_valid: bool
    error: PDFErrorKind | None = None
    file_info: FileInfo | None = None


class TextRun(BaseModel):
    """A positioned text fragment emitted by the PDF engine.

    Attributes:
        text: Fragment text, exactly as emitted.
        x: Horizontal position in PDF space.
        y: Vertical position in PDF space (origin bottom-left).
        width: Fragment width.
        height: Fragment height, used as a font-size proxy.
        page_index: Zero-based page the fragment belongs to.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    x: float = 0.0
    y: float
    width: float = 0.0
    height: float = 0.0
    page_index: int = Field(default=0, ge=0)


class PageExtraction(BaseModel):
    """Text runs of one page, in engine order, plus the page height."""

    model_config = ConfigDict(frozen=True)

    page_index: int = Field(ge=0)
    runs: list[TextRun]
    page_height: float = Field(gt=0)


class LayoutThresholds(BaseModel):
    """Heuristic constants for layout filtering and paragraph detection.

    Attributes:
        header_zone_ratio: Runs above this fraction of the page height are headers.
        footer_zone_ratio: Runs below this fraction of the page height are footers.
        footnote_height: Runs shorter than this are treated as footnotes.
        paragraph_gap: Vertical distance between runs that starts a new paragraph.
    """

    model_config = ConfigDict(frozen=True)

    header_zone_ratio: float = Field(default=0.9, gt=0.0, lt=1.0)
    footer_zone_ratio: float = Field(default=0.1, gt=0.0, lt=1.0)
    footnote_height: float = Field(default=8.0, ge=0.0)
    paragraph_gap: float = Field(default=20.0, gt=0.0)

    @model_validator(mode="after")
    def check_zone_order(self) -> "LayoutThresholds":
        """Footer zone must sit below the header zone."""
        if self.footer_zone_ratio >= self.header_zone_ratio:
            raise ValueError("footer_zone_ratio must be below header_zone_ratio")
        return self


class ExtractionResult(BaseModel):
    """Result of a full extraction run.

    Attributes:
        success: Whether narrative text was produced.
        text: Extracted prose, present only on success.
        page_count: Page count of the document, when it could be opened.
        error: Failure kind when success is False.
    """

    success: bool
    text: str | None = None
    page_count: int | None = Field(default=None, ge=0)
    error: PDFErrorKind | None = None

    @model_validator(mode="after")
    def check_text_on_success(self) -> "ExtractionResult":
        """Successful results always carry non-empty text."""
        if self.success and not self.text:
            raise ValueError("successful extraction requires non-empty text")
        return self
