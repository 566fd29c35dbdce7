"""
Application Errors
Errors an import call reports back to its caller
"""

from typing import Optional


class StatementImportError(Exception):
    """Base class for errors that abort a whole statement import"""

    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message}: {self.detail}"
        return self.message


class InvalidFileError(StatementImportError):
    """Upload is empty or is not a PDF"""


class ParseFailureError(StatementImportError):
    """PDF text extraction failed (corrupt, unsupported or locked file)"""
