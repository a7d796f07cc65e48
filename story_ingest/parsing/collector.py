"""Per-page collection of positioned text runs."""

from story_ingest.models.schemas import PageExtraction
from story_ingest.parsing.loader import LoadedDocument


def collect_pages(document: LoadedDocument) -> list[PageExtraction]:
    """Pull the text runs and height of every page, in page order.

    No filtering happens here; runs keep the order the engine emitted them in.
    """
    pages: list[PageExtraction] = []
    for index in range(document.num_pages):
        page = document.get_page(index)
        pages.append(
            PageExtraction(
                page_index=index,
                runs=page.get_text_runs(),
                page_height=page.page_height,
            )
        )
    return pages
