"""PDF engine boundary.

The pipeline only talks to the engine through the DocumentLoader protocol,
so filtering and reconstruction can run against synthetic documents in tests.
PypdfLoader is the production engine.
"""

import asyncio
import io
import logging
from typing import Any, Protocol

from pypdf import PageObject, PdfReader
from pypdf.errors import PdfReadError

from story_ingest.models.schemas import TextRun

logger = logging.getLogger(__name__)

PDF_MAGIC_BYTES = b"%PDF"
# Average glyph advance as a fraction of the font size
AVERAGE_GLYPH_WIDTH = 0.5


class PDFParseError(Exception):
    """Raised when the engine cannot open a document."""

    pass


class LoadedPage(Protocol):
    """A single opened page."""

    @property
    def page_height(self) -> float: ...

    def get_text_runs(self) -> list[TextRun]: ...


class LoadedDocument(Protocol):
    """An opened document."""

    @property
    def num_pages(self) -> int: ...

    def get_page(self, index: int) -> LoadedPage: ...


class DocumentLoader(Protocol):
    """Opens raw bytes into a document."""

    async def open(self, data: bytes) -> LoadedDocument: ...


class PypdfPage:
    """LoadedPage backed by a pypdf page object."""

    def __init__(self, page: PageObject, index: int) -> None:
        self._page = page
        self._index = index

    @property
    def page_height(self) -> float:
        return float(self._page.mediabox.height)

    def get_text_runs(self) -> list[TextRun]:
        """Collect positioned runs through pypdf's text visitor.

        Whitespace-only output becomes a trailing space on the previous run.

        Returns:
            Runs in content-stream order.
        """
        runs: list[TextRun] = []
        bottom = float(self._page.mediabox.bottom)

        def visit(
            text: str,
            cm: list[float],
            tm: list[float],
            font_dict: dict[str, Any] | None,
            font_size: float,
        ) -> None:
            if not text:
                return
            text = text.replace("\r\n", " ").replace("\n", " ").replace("\r", " ")
            if not text.strip():
                # Line breaks arrive with a reset text matrix; their position is meaningless.
                if runs and not runs[-1].text.endswith(" "):
                    runs[-1] = runs[-1].model_copy(update={"text": runs[-1].text + " "})
                return
            x = tm[4] * cm[0] + tm[5] * cm[2] + cm[4]
            y = tm[4] * cm[1] + tm[5] * cm[3] + cm[5]
            height = abs(float(font_size) * tm[3] * cm[3]) or abs(float(font_size))
            runs.append(
                TextRun(
                    text=text,
                    x=x,
                    y=y - bottom,
                    width=len(text) * height * AVERAGE_GLYPH_WIDTH,
                    height=height,
                    page_index=self._index,
                )
            )

        self._page.extract_text(visitor_text=visit)
        return runs


class PypdfDocument:
    """LoadedDocument backed by a pypdf reader."""

    def __init__(self, reader: PdfReader) -> None:
        self._reader = reader
        self._num_pages = len(reader.pages)

    @property
    def num_pages(self) -> int:
        return self._num_pages

    def get_page(self, index: int) -> PypdfPage:
        return PypdfPage(self._reader.pages[index], index)


def _read_document(data: bytes) -> PypdfDocument:
    """Parse PDF bytes into a document.

    Args:
        data: Raw bytes of the PDF file.

    Returns:
        Opened document with its page tree loaded.

    Raises:
        PDFParseError: If the bytes are empty, not a PDF, or corrupt.
    """
    if not data:
        raise PDFParseError("Empty file provided")

    if not data.lstrip()[:10].startswith(PDF_MAGIC_BYTES):
        raise PDFParseError("Invalid PDF: file does not start with PDF header")

    try:
        return PypdfDocument(PdfReader(io.BytesIO(data)))
    except PdfReadError as e:
        raise PDFParseError(f"Corrupt or invalid PDF: {e}") from e
    except Exception as e:
        raise PDFParseError(f"Failed to read PDF: {e}") from e


class PypdfLoader:
    """DocumentLoader using pypdf."""

    async def open(self, data: bytes) -> PypdfDocument:
        """Open PDF bytes without blocking the event loop."""
        document = await asyncio.to_thread(_read_document, data)
        logger.debug(f"Opened PDF with {document.num_pages} pages")
        return document
