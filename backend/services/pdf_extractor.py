"""PDF text extraction and first-page preview."""
import logging
from typing import List, Optional
import fitz  # PyMuPDF

from config import PREVIEW_SCALE
from errors import ExtractionError
from models.document import Document, Page, Preview

logger = logging.getLogger(__name__)


class PdfExtractor:
    """Extracts plain text from PDF documents held in memory."""

    def __init__(self, preview_scale: float = PREVIEW_SCALE):
        """
        Initialize PdfExtractor.

        Args:
            preview_scale: Zoom factor for the first-page preview
        """
        self.preview_scale = preview_scale

    def extract_text(self, document: Document) -> str:
        """
        Extract the text of every page, in page order.

        Each page contributes its text items joined by single spaces followed
        by one newline; a page without text contributes the newline only.

        Args:
            document: PDF document

        Returns:
            Concatenated page text

        Raises:
            ExtractionError: If the document cannot be parsed
        """
        return "".join(f"{page.text}\n" for page in self.extract_pages(document))

    def extract_pages(self, document: Document) -> List[Page]:
        """
        Extract text page-by-page.

        Args:
            document: PDF document

        Returns:
            List of Page objects, 1-indexed

        Raises:
            ExtractionError: If the document cannot be parsed
        """
        pdf_document = self._open(document)
        try:
            pages = []
            for page_num in range(pdf_document.page_count):
                page = pdf_document[page_num]
                text = " ".join(self._text_items(page))
                pages.append(Page(
                    page_number=page_num + 1,
                    text=text,
                    word_count=len(text.split())
                ))
        except Exception as e:
            logger.error(f"Failed to extract text from {document.filename or 'document'}: {e}")
            raise ExtractionError() from e
        finally:
            pdf_document.close()

        logger.info(f"Extracted text from {len(pages)} pages of {document.filename or 'document'}")
        return pages

    def render_preview(self, document: Document) -> Optional[Preview]:
        """
        Render the first page as a PNG at ``preview_scale``.

        Best effort: any failure is logged and ``None`` is returned.

        Args:
            document: PDF document

        Returns:
            Preview, or None if rendering failed
        """
        try:
            pdf_document = self._open(document)
        except ExtractionError as e:
            logger.warning(f"Error loading PDF preview: {e}")
            return None

        try:
            page_count = pdf_document.page_count
            matrix = fitz.Matrix(self.preview_scale, self.preview_scale)
            pixmap = pdf_document[0].get_pixmap(matrix=matrix)
            return Preview(
                png=pixmap.tobytes("png"),
                width=pixmap.width,
                height=pixmap.height,
                page_count=page_count
            )
        except Exception as e:
            logger.warning(f"Error rendering PDF preview: {e}", exc_info=True)
            return None
        finally:
            pdf_document.close()

    @staticmethod
    def _text_items(page) -> List[str]:
        """Text spans of a page in content-stream order."""
        items = []
        for block in page.get_text("dict")["blocks"]:
            if block.get("type") != 0:
                continue
            for line in block["lines"]:
                for span in line["spans"]:
                    items.append(span["text"])
        return items

    @staticmethod
    def _open(document: Document):
        """
        Open a document with PyMuPDF.

        Raises:
            ExtractionError: For corrupt, encrypted or page-less documents
        """
        name = document.filename or "document"
        try:
            pdf_document = fitz.open(stream=document.content, filetype="pdf")
        except Exception as e:
            logger.error(f"Failed to open PDF {name}: {str(e)}")
            raise ExtractionError() from e

        if pdf_document.needs_pass:
            pdf_document.close()
            logger.error(f"PDF {name} is encrypted")
            raise ExtractionError("PDF is encrypted")

        if pdf_document.page_count == 0:
            pdf_document.close()
            logger.error(f"PDF {name} has no pages")
            raise ExtractionError("PDF has no pages")

        return pdf_document
