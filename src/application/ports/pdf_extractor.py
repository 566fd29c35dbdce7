"""
Port: PDF Extractor Interface
Defines contract for PDF text extraction implementations
"""

from abc import ABC, abstractmethod
from typing import Optional


class IPDFExtractor(ABC):
    """Interface for PDF text extraction"""

    @abstractmethod
    def extract_text(self, pdf_bytes: bytes, password: Optional[str] = None) -> str:
        """
        Extract the text of every page in reading order

        Args:
            pdf_bytes: Raw PDF file content
            password: PDF password if encrypted

        Returns:
            Text of all pages, one physical row per line

        Raises:
            ExtractionError: If the bytes are empty, not a PDF, or locked
        """
        pass
