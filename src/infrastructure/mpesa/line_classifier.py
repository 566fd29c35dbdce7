"""
M-Pesa statement line classifier

State machine over extracted text lines:

    PREAMBLE --"SUMMARY"--> SUMMARY --"DETAILED STATEMENT"--> DETAIL (stop)

Only non-noise lines seen while in SUMMARY are candidate summary rows.
"""

import re
import logging
from dataclasses import dataclass

from domain.enums import SectionState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassifiedLine:
    """A data line and the section it was found in"""

    line: str
    state: SectionState


class StatementLineClassifier:
    """Locates the SUMMARY section and filters header/noise lines"""

    SUMMARY_MARKER = "SUMMARY"
    DETAIL_MARKER = "DETAILED STATEMENT"

    NOISE_KEYWORDS = (
        "receipt",
        "completion time",
        "transaction status",
        "paid in",
        "paid out",
        "withdraw",
        "balance",
        "mpesa",
        "customer name",
        "mobile number",
        "statement period",
        "summary",
        "transaction type",
        "total",
    )
    PIPES_ONLY_RE = re.compile(r"^[\s|]+$")

    def is_noise(self, line: str) -> bool:
        """Header, column-title or separator line"""
        lower = line.lower()
        if any(keyword in lower for keyword in self.NOISE_KEYWORDS):
            return True
        return bool(self.PIPES_ONLY_RE.match(line))

    def _next_state(self, line: str, state: SectionState) -> SectionState:
        upper = line.upper()
        if state == SectionState.SUMMARY and self.DETAIL_MARKER in upper:
            return SectionState.DETAIL
        if state == SectionState.PREAMBLE and self.SUMMARY_MARKER in upper:
            return SectionState.SUMMARY
        return state

    def classify(self, text: str) -> list[ClassifiedLine]:
        """
        Walk the text line by line and tag data lines with their section.

        Section-marker lines are consumed as transitions and never returned.
        Scanning stops at the detailed statement.
        """
        classified: list[ClassifiedLine] = []
        state = SectionState.PREAMBLE

        for raw_line in text.splitlines():
            line = raw_line.strip()
            if not line:
                continue

            new_state = self._next_state(line, state)
            if new_state != state:
                logger.info("Statement section %s -> %s", state, new_state)
                state = new_state
                if state == SectionState.DETAIL:
                    break
                continue

            if self.is_noise(line):
                logger.debug("Skipping header line: %s", line)
                continue

            classified.append(ClassifiedLine(line=line, state=state))

        return classified

    def summary_lines(self, text: str) -> list[str]:
        """Candidate rows from the SUMMARY section"""
        return [
            item.line
            for item in self.classify(text)
            if item.state == SectionState.SUMMARY
        ]
