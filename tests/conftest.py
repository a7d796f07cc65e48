"""Pytest fixtures and shared test configuration.

Fixtures:
    - story_pdf: Two-page PDF with a running header and page numbers
    - pdf_upload: The same PDF wrapped as an UploadedFile
    - thresholds: Default layout heuristics
    - async_client: HTTPX client for API testing
"""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from story_ingest.api import app
from story_ingest.models.schemas import LayoutThresholds, UploadedFile
from tests.fakes import build_pdf


@pytest.fixture
def story_pdf() -> bytes:
    """Return a two-page story PDF.

    Each page carries a header, one body paragraph and a page number in the footer.
    """
    return build_pdf(
        [
            [
                (72, 760, 10, "The Fox and the Crow"),
                (72, 400, 12, "First paragraph text"),
                (300, 30, 10, "1"),
            ],
            [
                (72, 760, 10, "The Fox and the Crow"),
                (72, 400, 12, "Second paragraph text"),
                (300, 30, 10, "2"),
            ],
        ]
    )


@pytest.fixture
def pdf_upload(story_pdf: bytes) -> UploadedFile:
    return UploadedFile.from_bytes("story.pdf", story_pdf)


@pytest.fixture
def thresholds() -> LayoutThresholds:
    return LayoutThresholds()


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
