"""Rebuild paragraph-structured prose from filtered text runs."""

from story_ingest.models.schemas import TextRun

PARAGRAPH_SEPARATOR = "\n\n"


def reconstruct_page(runs: list[TextRun], paragraph_gap: float) -> str:
    """Merge the runs of one page into paragraphs.

    Runs are concatenated exactly as received. A vertical jump larger than
    paragraph_gap between consecutive runs starts a new paragraph.

    Args:
        runs: Filtered runs of one page, in engine order.
        paragraph_gap: Vertical distance that marks a paragraph break.

    Returns:
        Page text with paragraphs separated by a blank line.
    """
    paragraphs: list[list[str]] = []
    previous: TextRun | None = None
    for run in runs:
        if previous is None or abs(previous.y - run.y) > paragraph_gap:
            paragraphs.append([])
        paragraphs[-1].append(run.text)
        previous = run

    merged = ("".join(parts).strip() for parts in paragraphs)
    return PARAGRAPH_SEPARATOR.join(text for text in merged if text)


def join_pages(page_texts: list[str]) -> str:
    """Join page texts; a page boundary is always a paragraph break."""
    return PARAGRAPH_SEPARATOR.join(text for text in page_texts if text)
