"""Extraction configuration with environment variable loading.

Upload limits and layout heuristics for the HTTP layer. The pipeline itself
takes its limits from the caller and has no built-in defaults.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from story_ingest.models.schemas import LayoutThresholds

# Load environment variables from .env file
load_dotenv()


class ExtractionConfig(BaseModel):
    """Configuration for PDF uploads.

    Attributes:
        max_size_mb: Largest accepted upload, in megabytes.
        max_pages: Largest accepted page count.
        header_zone_ratio: Fraction of page height above which runs are headers.
        footer_zone_ratio: Fraction of page height below which runs are footers.
        footnote_height: Runs shorter than this are footnotes.
        paragraph_gap: Vertical gap between runs that starts a paragraph.
    """

    max_size_mb: float = Field(
        default_factory=lambda: float(os.getenv("PDF_MAX_SIZE_MB", "5")),
        gt=0,
        description="Maximum upload size in MB",
    )
    max_pages: int = Field(
        default_factory=lambda: int(os.getenv("PDF_MAX_PAGES", "10")),
        ge=1,
        description="Maximum number of pages",
    )
    header_zone_ratio: float = Field(
        default_factory=lambda: float(os.getenv("PDF_HEADER_ZONE_RATIO", "0.9")),
        gt=0.0,
        lt=1.0,
    )
    footer_zone_ratio: float = Field(
        default_factory=lambda: float(os.getenv("PDF_FOOTER_ZONE_RATIO", "0.1")),
        gt=0.0,
        lt=1.0,
    )
    footnote_height: float = Field(
        default_factory=lambda: float(os.getenv("PDF_FOOTNOTE_HEIGHT", "8")),
        ge=0.0,
    )
    paragraph_gap: float = Field(
        default_factory=lambda: float(os.getenv("PDF_PARAGRAPH_GAP", "20")),
        gt=0.0,
    )

    def thresholds(self) -> LayoutThresholds:
        """Layout heuristics for the extraction pipeline.

        Raises:
            ValidationError: If the footer zone does not sit below the header zone.
        """
        return LayoutThresholds(
            header_zone_ratio=self.header_zone_ratio,
            footer_zone_ratio=self.footer_zone_ratio,
            footnote_height=self.footnote_height,
            paragraph_gap=self.paragraph_gap,
        )


def get_extraction_config() -> ExtractionConfig:
    """Create extraction configuration from environment.

    Returns:
        Configured ExtractionConfig instance.
    """
    return ExtractionConfig()
