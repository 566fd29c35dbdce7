"""
Infrastructure Adapter: PyMuPDF Extractor
Implements IPDFExtractor using PyMuPDF (fitz) library

Statement tables are laid out as positioned words, not as text lines, so
words are bucketed into physical rows by their vertical position and each
row is rebuilt left to right. A wide horizontal gap between two words is a
column boundary and is kept as a double space.
"""

import logging
from typing import Optional

import fitz  # PyMuPDF

from application.ports.pdf_extractor import IPDFExtractor
from domain.exceptions import ExtractionError
from config import settings

logger = logging.getLogger(__name__)

COLUMN_SEPARATOR = "  "
WORD_SEPARATOR = " "


class PyMuPDFExtractor(IPDFExtractor):
    """
    PDF text extraction using PyMuPDF (fitz)
    """

    def __init__(
        self,
        row_tolerance: Optional[float] = None,
        column_gap: Optional[float] = None
    ):
        """
        Args:
            row_tolerance: Max vertical distance (points) between words of one row
            column_gap: Min horizontal gap (points) treated as a column boundary
        """
        self.row_tolerance = row_tolerance if row_tolerance is not None else settings.PDF_ROW_TOLERANCE
        self.column_gap = column_gap if column_gap is not None else settings.PDF_COLUMN_GAP

    def extract_text(self, pdf_bytes: bytes, password: Optional[str] = None) -> str:
        """
        Extract text from every page, one physical row per line.
        """
        if not pdf_bytes:
            raise ExtractionError("PDF content is empty")

        try:
            doc = fitz.open(stream=pdf_bytes, filetype="pdf")
        except Exception as e:
            raise ExtractionError(f"Not a readable PDF: {e}") from e

        try:
            if doc.is_encrypted:
                if not password:
                    raise ExtractionError("PDF is password protected, password required")
                if not doc.authenticate(password):
                    raise ExtractionError("Incorrect PDF password")
            if doc.page_count == 0:
                raise ExtractionError("PDF has no pages")

            logger.info("Extracting M-Pesa statement with %d pages", doc.page_count)

            page_texts = []
            for page in doc:
                rows = self._page_rows(page)
                logger.debug("[extract_page] page=%d rows=%d", page.number + 1, len(rows))
                page_texts.append("\n".join(rows))
        except ExtractionError:
            raise
        except Exception as e:
            raise ExtractionError(f"Failed to extract PDF text: {e}") from e
        finally:
            doc.close()

        return "\n".join(text for text in page_texts if text)

    def _page_rows(self, page) -> list[str]:
        """Cluster a page's words into rows, top to bottom"""
        words = sorted(page.get_text("words"), key=lambda w: (w[1], w[0]))

        rows: list[list[tuple]] = []
        row_top: Optional[float] = None
        for word in words:
            y0 = word[1]
            if row_top is None or abs(y0 - row_top) > self.row_tolerance:
                rows.append([])
                row_top = y0
            rows[-1].append(word)

        return [self._join_row(row) for row in rows]

    def _join_row(self, row: list[tuple]) -> str:
        """Rebuild a row left to right, keeping column gaps"""
        parts: list[str] = []
        previous_x1: Optional[float] = None
        for x0, _y0, x1, _y1, text, *_ in sorted(row, key=lambda w: w[0]):
            if previous_x1 is not None:
                gap = x0 - previous_x1
                parts.append(COLUMN_SEPARATOR if gap > self.column_gap else WORD_SEPARATOR)
            parts.append(text)
            previous_x1 = x1
        return "".join(parts)
