"""Unit tests for the pypdf-backed document loader."""

import pytest
import pytest_check as check

from story_ingest.models.schemas import UploadedFile
from story_ingest.parsing.loader import PDFParseError, PypdfLoader
from story_ingest.parsing.pdf_service import PDFService
from tests.fakes import build_pdf


class TestPypdfLoaderValid:
    """Tests for opening real PDF bytes."""

    async def test_reports_page_count(self, story_pdf: bytes) -> None:
        """Page count is available right after opening."""
        document = await PypdfLoader().open(story_pdf)

        assert document.num_pages == 2

    async def test_page_height_from_media_box(self, story_pdf: bytes) -> None:
        """Page height is the media box height."""
        document = await PypdfLoader().open(story_pdf)

        assert document.get_page(0).page_height == pytest.approx(792.0)

    async def test_runs_carry_text_and_position(self, story_pdf: bytes) -> None:
        """Runs keep content-stream order with their baseline and font size."""
        document = await PypdfLoader().open(story_pdf)

        runs = document.get_page(0).get_text_runs()

        check.equal([run.text.strip() for run in runs], ["The Fox and the Crow", "First paragraph text", "1"])
        check.almost_equal(runs[1].y, 400.0)
        check.almost_equal(runs[1].height, 12.0)
        check.almost_equal(runs[0].y, 760.0)
        check.is_true(all(run.page_index == 0 for run in runs))

    async def test_runs_on_second_page(self, story_pdf: bytes) -> None:
        """Page index is recorded on every run."""
        document = await PypdfLoader().open(story_pdf)

        runs = document.get_page(1).get_text_runs()

        check.is_in("Second paragraph text", "".join(run.text for run in runs))
        check.is_true(all(run.page_index == 1 for run in runs))

    async def test_line_breaks_attach_to_previous_run(self) -> None:
        """Lines drawn in separate text blocks keep a space and their own position."""
        pdf = build_pdf([[(72, 500, 12, "The crow sat"), (72, 486, 12, "on a branch.")]])
        document = await PypdfLoader().open(pdf)

        runs = document.get_page(0).get_text_runs()

        check.equal([run.text.strip() for run in runs], ["The crow sat", "on a branch."])
        check.equal(runs[0].text, "The crow sat ")
        check.equal([round(run.y) for run in runs], [500, 486])
        check.is_true(all(run.text.strip() for run in runs))

    async def test_multi_line_paragraphs_extract_as_prose(self) -> None:
        """Consecutive lines join with spaces; a large gap starts a paragraph."""
        pdf = build_pdf(
            [
                [
                    (72, 500, 12, "The crow sat"),
                    (72, 486, 12, "on a branch."),
                    (72, 472, 12, "The fox came."),
                    (72, 400, 12, "New paragraph here."),
                ]
            ]
        )

        result = await PDFService().extract_text(UploadedFile.from_bytes("fable.pdf", pdf), 10)

        check.is_true(result.success)
        check.equal(result.text, "The crow sat on a branch. The fox came.\n\nNew paragraph here.")

    async def test_blank_page_has_no_runs(self) -> None:
        """A page without text yields no visible runs."""
        document = await PypdfLoader().open(build_pdf([[]]))

        runs = document.get_page(0).get_text_runs()

        assert "".join(run.text for run in runs).strip() == ""


class TestPypdfLoaderRejection:
    """Tests for bytes the engine cannot open."""

    async def test_rejects_empty_bytes(self) -> None:
        """Empty bytes raise PDFParseError."""
        with pytest.raises(PDFParseError, match="Empty file"):
            await PypdfLoader().open(b"")

    async def test_rejects_non_pdf_bytes(self) -> None:
        """Bytes without the PDF header raise PDFParseError."""
        with pytest.raises(PDFParseError, match="Invalid PDF"):
            await PypdfLoader().open(b"This is a plain text file, not a PDF.")

    async def test_rejects_truncated_pdf(self) -> None:
        """Truncated PDF raises PDFParseError."""
        with pytest.raises(PDFParseError, match="Corrupt|Failed"):
            await PypdfLoader().open(b"%PDF-1.4\n1 0 obj\n<<")
