"""PDF to narrative prose pipeline.

validate -> load -> collect -> filter -> reconstruct -> normalize

Every public call runs the whole pipeline on its own input; the service
keeps no state between calls. Engine failures are caught here, once, and
reported as typed results instead of exceptions.
"""

import logging

from story_ingest.models.schemas import (
    ExtractionResult,
    FileInfo,
    LayoutThresholds,
    PDFErrorKind,
    UploadedFile,
    ValidationResult,
)
from story_ingest.parsing.collector import collect_pages
from story_ingest.parsing.layout_filter import filter_runs
from story_ingest.parsing.loader import DocumentLoader, LoadedDocument, PypdfLoader
from story_ingest.parsing.paragraphs import join_pages, reconstruct_page
from story_ingest.parsing.punctuation import fix_punctuation_spacing
from story_ingest.parsing.validation import format_file_size, validate_file

logger = logging.getLogger(__name__)


class PDFService:
    """Extracts clean prose from uploaded PDFs.

    Args:
        loader: PDF engine. Defaults to pypdf.
        thresholds: Layout heuristics. Defaults to LayoutThresholds().
    """

    def __init__(
        self,
        loader: DocumentLoader | None = None,
        thresholds: LayoutThresholds | None = None,
    ) -> None:
        self._loader = loader or PypdfLoader()
        self._thresholds = thresholds or LayoutThresholds()

    @staticmethod
    def validate_file(file: UploadedFile, max_size_mb: float, max_pages: int) -> ValidationResult:
        """Check type and size before touching the PDF engine."""
        return validate_file(file, max_size_mb, max_pages)

    @staticmethod
    def format_file_size(size_bytes: int) -> str:
        return format_file_size(size_bytes)

    def _document_text(self, document: LoadedDocument) -> str:
        page_texts: list[str] = []
        for page in collect_pages(document):
            runs = filter_runs(page.runs, page.page_height, self._thresholds)
            page_texts.append(reconstruct_page(runs, self._thresholds.paragraph_gap))
        return fix_punctuation_spacing(join_pages(page_texts)).strip()

    async def extract_text(self, file: UploadedFile, max_pages: int) -> ExtractionResult:
        """Extract narrative text from a PDF.

        Args:
            file: The uploaded PDF.
            max_pages: Maximum allowed page count.

        Returns:
            ExtractionResult with text and page count, or the failure kind.
            Page count is reported for too_many_pages and no_text_found.
        """
        try:
            document = await self._loader.open(await file.read())
            page_count = document.num_pages

            if page_count > max_pages:
                logger.info(f"Rejected {file.name}: {page_count} pages exceeds {max_pages}")
                return ExtractionResult(
                    success=False,
                    error=PDFErrorKind.TOO_MANY_PAGES,
                    page_count=page_count,
                )

            text = self._document_text(document)
        except Exception as e:
            logger.error(f"PDF processing failed for {file.name}: {e}")
            return ExtractionResult(success=False, error=PDFErrorKind.PROCESSING_FAILED)

        if not text:
            logger.warning(f"No narrative text found in {file.name} (may be scanned/image-based)")
            return ExtractionResult(
                success=False,
                error=PDFErrorKind.NO_TEXT_FOUND,
                page_count=page_count,
            )

        logger.info(f"Extracted {len(text)} characters from {file.name} ({page_count} pages)")
        return ExtractionResult(success=True, text=text, page_count=page_count)

    async def process_pdf(
        self, file: UploadedFile, max_size_mb: float, max_pages: int
    ) -> ExtractionResult:
        """Validate, then extract. Invalid files never reach the engine."""
        validation = self.validate_file(file, max_size_mb, max_pages)
        if not validation.is_valid:
            return ExtractionResult(success=False, error=validation.error)

        return await self.extract_text(file, max_pages)

    async def get_file_info(self, file: UploadedFile) -> FileInfo | None:
        """Name, size and page count for a preview.

        Best effort: returns None instead of raising when the file
        cannot be opened.
        """
        try:
            document = await self._loader.open(await file.read())
            return FileInfo(
                name=file.name,
                size=format_file_size(file.size),
                pages=document.num_pages,
            )
        except Exception as e:
            logger.warning(f"Could not read PDF info for {file.name}: {e}")
            return None
