"""Unit tests for PdfExtractor."""
import sys
from pathlib import Path

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

import fitz  # PyMuPDF
import pytest
from unittest.mock import Mock, patch
from errors import ExtractionError, UnsupportedMediaError
from models.document import Document, Page, PDF_MEDIA_TYPE, guess_media_type
from services.pdf_extractor import PdfExtractor


def make_pdf(pages, **save_options) -> bytes:
    """Build a PDF where each page holds the given strings, one per line."""
    pdf_document = fitz.open()
    for items in pages:
        page = pdf_document.new_page()
        for index, item in enumerate(items):
            page.insert_text((72, 72 + 36 * index), item)
    data = pdf_document.tobytes(**save_options)
    pdf_document.close()
    return data


def make_document(pages, **save_options) -> Document:
    return Document(content=make_pdf(pages, **save_options), media_type=PDF_MEDIA_TYPE, filename="test.pdf")


class TestDocument:
    """Test suite for the Document model."""

    def test_accepts_pdf_media_type(self):
        document = Document(content=b"%PDF-1.7", media_type="application/pdf")
        assert document.filename is None

    @pytest.mark.parametrize("media_type", ["text/plain", "image/png", "", "application/pdf; charset=binary"])
    def test_rejects_other_media_types(self, media_type):
        with pytest.raises(UnsupportedMediaError):
            Document(content=b"data", media_type=media_type)

    def test_guess_media_type(self):
        assert guess_media_type("notes.pdf") == "application/pdf"
        assert guess_media_type("notes.PDF") == "application/pdf"
        assert guess_media_type("notes") == "application/octet-stream"


class TestPdfExtractor:
    """Test suite for PdfExtractor."""

    @pytest.fixture
    def extractor(self):
        return PdfExtractor()

    def test_joins_items_with_spaces(self, extractor):
        """Test a page's text items are joined with single spaces."""
        document = make_document([["Hello", "World"]])

        assert extractor.extract_text(document) == "Hello World\n"

    def test_preserves_page_order(self, extractor):
        """Test pages are concatenated in document order."""
        document = make_document([["First", "page"], ["Second"], ["Third", "page", "here"]])

        assert extractor.extract_text(document) == "First page\nSecond\nThird page here\n"

    def test_empty_pages_contribute_newline(self, extractor):
        """Test a document without text yields one newline per page."""
        document = make_document([[], [], []])

        assert extractor.extract_text(document) == "\n\n\n"

    def test_mixed_empty_and_text_pages(self, extractor):
        document = make_document([["Intro"], [], ["End"]])

        assert extractor.extract_text(document) == "Intro\n\nEnd\n"

    def test_extract_pages(self, extractor):
        """Test the per-page view."""
        pages = extractor.extract_pages(make_document([["Hello", "World"], []]))

        assert pages == [
            Page(page_number=1, text="Hello World", word_count=2),
            Page(page_number=2, text="", word_count=0),
        ]

    def test_extraction_is_deterministic(self, extractor):
        document = make_document([["Same", "text"], ["again"]])

        assert extractor.extract_text(document) == extractor.extract_text(document)

    @pytest.mark.parametrize("content", [b"", b"not a pdf at all", b"\x00\x01\x02\x03" * 64])
    def test_corrupt_document(self, extractor, content):
        """Test unparseable bytes raise ExtractionError."""
        document = Document(content=content, media_type=PDF_MEDIA_TYPE)

        with pytest.raises(ExtractionError):
            extractor.extract_text(document)

    def test_encrypted_document(self, extractor):
        """Test a password-protected PDF raises ExtractionError."""
        document = make_document(
            [["Secret"]],
            encryption=fitz.PDF_ENCRYPT_AES_256,
            owner_pw="owner",
            user_pw="user"
        )

        with pytest.raises(ExtractionError):
            extractor.extract_text(document)

    def test_zero_page_document(self, extractor):
        """Test a PDF without pages raises ExtractionError."""
        empty = Mock(needs_pass=False, page_count=0)
        document = Document(content=b"%PDF-1.7", media_type=PDF_MEDIA_TYPE)

        with patch('services.pdf_extractor.fitz.open', return_value=empty):
            with pytest.raises(ExtractionError):
                extractor.extract_text(document)

        empty.close.assert_called_once()

    def test_page_failure_raises_extraction_error(self, extractor):
        """Test failures while reading a page are wrapped."""
        document = make_document([["Hello"]])

        with patch.object(PdfExtractor, '_text_items', side_effect=RuntimeError("bad page")):
            with pytest.raises(ExtractionError):
                extractor.extract_text(document)

    def test_render_preview(self, extractor):
        """Test the first page is rendered as a reduced-size PNG."""
        preview = extractor.render_preview(make_document([["Cover"], ["Body"]]))

        assert preview is not None
        assert preview.png.startswith(b"\x89PNG")
        assert preview.page_count == 2
        # Default page is 595x842 points, rendered at half scale
        assert 290 <= preview.width <= 300
        assert 415 <= preview.height <= 425

    def test_render_preview_scale(self):
        preview = PdfExtractor(preview_scale=1.0).render_preview(make_document([["Cover"]]))

        assert preview.width >= 590

    def test_render_preview_of_corrupt_document(self, extractor):
        """Test preview failures degrade to no preview."""
        document = Document(content=b"not a pdf", media_type=PDF_MEDIA_TYPE)

        assert extractor.render_preview(document) is None

    def test_render_failure_does_not_block_extraction(self, extractor):
        """Test a rendering failure leaves the text path intact."""
        document = make_document([["Hello", "World"]])

        with patch.object(fitz.Page, 'get_pixmap', side_effect=RuntimeError("render failed")):
            assert extractor.render_preview(document) is None

        assert extractor.extract_text(document) == "Hello World\n"
