"""PDF text extraction and normalization.

Turns an uploaded PDF into clean narrative prose for translation.

Responsibilities:
    - File type and size validation before any engine I/O
    - Positioned text extraction with pypdf behind a loader protocol
    - Header, footer, page number, footnote and boilerplate removal
    - Paragraph reconstruction from vertical gaps and page boundaries
    - Punctuation, parenthesis and quote spacing repair

PDFService ties the steps together and reports failures as typed results.
"""

from story_ingest.parsing.loader import DocumentLoader, PDFParseError, PypdfLoader
from story_ingest.parsing.pdf_service import PDFService
from story_ingest.parsing.punctuation import fix_punctuation_spacing
from story_ingest.parsing.validation import format_file_size, validate_file

__all__ = [
    "DocumentLoader",
    "PDFParseError",
    "PDFService",
    "PypdfLoader",
    "fix_punctuation_spacing",
    "format_file_size",
    "validate_file",
]
