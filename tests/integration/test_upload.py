"""Integration tests for PDF upload endpoints.

Tests the real upload flow with generated PDFs through pypdf.
Validates file validation, extraction and error mapping.
"""

from httpx import AsyncClient

from story_ingest.api.app import app
from story_ingest.api.upload import get_config
from story_ingest.config import ExtractionConfig
from story_ingest.models.schemas import ExtractionResult, FileInfo
from tests.fakes import build_pdf


class TestPDFUpload:
    """Integration tests for POST /upload/pdf."""

    async def test_upload_pdf_success(self, async_client: AsyncClient, story_pdf: bytes) -> None:
        """Valid PDF returns narrative text without headers or page numbers."""
        response = await async_client.post(
            "/upload/pdf",
            files={"file": ("story.pdf", story_pdf, "application/pdf")},
        )

        assert response.status_code == 200

        data = ExtractionResult.model_validate(response.json())
        assert data.success is True
        assert data.text == "First paragraph text\n\nSecond paragraph text"
        assert data.page_count == 2
        assert data.error is None

    async def test_reject_non_pdf_type(self, async_client: AsyncClient) -> None:
        """Non-PDF content type is rejected with 400."""
        response = await async_client.post(
            "/upload/pdf",
            files={"file": ("document.txt", b"This is a plain text file.", "text/plain")},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "invalid_file_type"

    async def test_reject_fake_pdf(self, async_client: AsyncClient) -> None:
        """PDF content type with non-PDF bytes fails processing."""
        response = await async_client.post(
            "/upload/pdf",
            files={"file": ("fake.pdf", b"This is not a real PDF file", "application/pdf")},
        )

        assert response.status_code == 400
        data = response.json()
        assert data["success"] is False
        assert data["error"] == "processing_failed"

    async def test_reject_oversized_file(self, async_client: AsyncClient) -> None:
        """File over the configured limit is rejected with 413."""
        app.dependency_overrides[get_config] = lambda: ExtractionConfig(max_size_mb=1, max_pages=10)
        oversized = b"%PDF-1.4\n" + b"x" * (1024 * 1024 + 1)

        response = await async_client.post(
            "/upload/pdf",
            files={"file": ("large.pdf", oversized, "application/pdf")},
        )

        assert response.status_code == 413
        assert response.json()["error"] == "file_too_large"

    async def test_reject_too_many_pages(self, async_client: AsyncClient, story_pdf: bytes) -> None:
        """Page limit failure reports the real page count."""
        app.dependency_overrides[get_config] = lambda: ExtractionConfig(max_size_mb=5, max_pages=1)

        response = await async_client.post(
            "/upload/pdf",
            files={"file": ("story.pdf", story_pdf, "application/pdf")},
        )

        assert response.status_code == 422
        data = response.json()
        assert data["error"] == "too_many_pages"
        assert data["page_count"] == 2

    async def test_reject_pdf_without_text(self, async_client: AsyncClient) -> None:
        """PDF with only boilerplate is rejected with no_text_found."""
        pdf = build_pdf([[(72, 400, 12, "Chapter 1"), (300, 30, 10, "1")]])

        response = await async_client.post(
            "/upload/pdf",
            files={"file": ("empty.pdf", pdf, "application/pdf")},
        )

        assert response.status_code == 422
        assert response.json()["error"] == "no_text_found"

    async def test_missing_file_returns_422(self, async_client: AsyncClient) -> None:
        """Request without file attachment returns 422."""
        response = await async_client.post("/upload/pdf")

        assert response.status_code == 422


class TestPDFInfo:
    """Integration tests for POST /upload/pdf/info."""

    async def test_info_reports_pages(self, async_client: AsyncClient, story_pdf: bytes) -> None:
        """Info returns name, size and page count."""
        response = await async_client.post(
            "/upload/pdf/info",
            files={"file": ("story.pdf", story_pdf, "application/pdf")},
        )

        assert response.status_code == 200
        info = FileInfo.model_validate(response.json())
        assert info.name == "story.pdf"
        assert info.pages == 2

    async def test_info_on_corrupt_file(self, async_client: AsyncClient) -> None:
        """Unreadable files return 400 with the processing message key."""
        response = await async_client.post(
            "/upload/pdf/info",
            files={"file": ("corrupt.pdf", b"%PDF-1.4\n1 0 obj\n<<", "application/pdf")},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "pdfUpload.errors.processingFailed"


class TestHealth:
    """Tests for service endpoints."""

    async def test_health(self, async_client: AsyncClient) -> None:
        """Health endpoint reports the service."""
        response = await async_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "story-ingest"}

    async def test_wrong_http_method_returns_405(self, async_client: AsyncClient) -> None:
        """GET request to POST endpoint returns 405 Method Not Allowed."""
        response = await async_client.get("/upload/pdf")

        assert response.status_code == 405
