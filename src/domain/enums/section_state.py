"""Statement section states used while scanning extracted text."""

from enum import Enum


class SectionState(str, Enum):
    """Where the scanner currently is inside an M-Pesa statement"""

    PREAMBLE = "preamble"
    SUMMARY = "summary"
    DETAIL = "detail"

    def __str__(self) -> str:
        return self.value
