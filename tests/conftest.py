"""
Pytest configuration and shared fixtures.
"""
import os
import sys
from pathlib import Path

import pytest

# Add src to path
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

# Never reach for PostgreSQL from the test suite
os.environ.setdefault("USE_IN_MEMORY_STORE", "true")

from domain.entities.category import Category  # noqa: E402
from infrastructure.database.memory_store import InMemoryTransactionStore  # noqa: E402
from tests.pdf_factory import SAMPLE_ROWS, NO_SUMMARY_ROWS, build_pdf, rows_to_text  # noqa: E402


@pytest.fixture
def statement_text() -> str:
    """Extracted text of a small M-Pesa statement."""
    return rows_to_text(SAMPLE_ROWS)


@pytest.fixture
def statement_pdf() -> bytes:
    """Real PDF bytes of a small M-Pesa statement."""
    return build_pdf(SAMPLE_ROWS)


@pytest.fixture
def no_summary_pdf() -> bytes:
    """Valid PDF without a SUMMARY section."""
    return build_pdf(NO_SUMMARY_ROWS)


@pytest.fixture
def mpesa_category() -> Category:
    return Category(id=1, name="M-Pesa", is_default=True)


@pytest.fixture
def memory_store(mpesa_category) -> InMemoryTransactionStore:
    """Empty in-memory store with the system M-Pesa category."""
    return InMemoryTransactionStore(categories=[mpesa_category])
