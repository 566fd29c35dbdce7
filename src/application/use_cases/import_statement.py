"""
Application Use Case: Import M-Pesa Statement
Orchestrates extraction, parsing, duplicate detection and persistence
"""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from application.errors import InvalidFileError, ParseFailureError
from application.ports.pdf_extractor import IPDFExtractor
from application.ports.statement_parser import IStatementParser
from application.ports.transaction_store import ITransactionStore
from domain.entities.category import Category
from domain.entities.import_result import ImportResult
from domain.entities.parsed_transaction import ParsedTransaction
from domain.entities.transaction import Transaction
from domain.exceptions import ExtractionError
from config import settings

logger = logging.getLogger(__name__)


class ImportStatementUseCase:
    """Use case for importing M-Pesa statements into a user's transactions"""

    def __init__(
        self,
        pdf_extractor: IPDFExtractor,
        statement_parser: IStatementParser,
        store: ITransactionStore,
        default_category_name: Optional[str] = None
    ):
        """Initialize use case with dependencies"""

        self.pdf_extractor = pdf_extractor
        self.statement_parser = statement_parser
        self.store = store
        self.default_category_name = default_category_name or settings.DEFAULT_CATEGORY_NAME

    async def execute(
        self,
        file_bytes: bytes,
        filename: str,
        user_id: str,
        password: Optional[str] = None,
        today: Optional[date] = None
    ) -> ImportResult:
        """
        Execute statement import workflow

        File-shape and extraction errors abort before anything is stored.
        A failure while storing one row only skips that row.

        Raises:
            InvalidFileError: Empty upload or non-PDF filename
            ParseFailureError: PDF text could not be extracted
        """

        # 1. Validate upload
        if not file_bytes:
            raise InvalidFileError("File is empty")
        if not filename or not filename.lower().endswith(".pdf"):
            raise InvalidFileError("File must be a PDF", detail=filename or None)

        logger.info("Processing M-Pesa statement upload for user: %s", user_id)

        # 2. Extract text
        try:
            text = self.pdf_extractor.extract_text(file_bytes, password)
        except ExtractionError as e:
            logger.warning("M-Pesa statement extraction failed: %s", e)
            raise ParseFailureError("Failed to parse M-Pesa statement", detail=str(e)) from e

        # 3. Parse summary rows
        candidates = self.statement_parser.parse(text, today)
        if not candidates:
            logger.info("No transactions found in statement %s", filename)
            return ImportResult.empty()

        # 4. Resolve default category
        category = await self._resolve_default_category(user_id)
        category_id = category.id if category else None

        # 5. Save candidates
        saved_count = 0
        skipped_count = 0
        total_income = Decimal("0.00")
        total_expense = Decimal("0.00")

        for candidate in candidates:
            try:
                if await self._is_duplicate(user_id, candidate):
                    skipped_count += 1
                    continue

                await self.store.insert_transaction(
                    Transaction.from_parsed(candidate, user_id=user_id, category_id=category_id)
                )
            except Exception:
                logger.exception("Error saving transaction: %s", candidate.description)
                skipped_count += 1
                continue

            saved_count += 1
            if candidate.is_income:
                total_income += candidate.amount
            else:
                total_expense += candidate.amount

        result = ImportResult(
            total_parsed=len(candidates),
            saved_count=saved_count,
            skipped_count=skipped_count,
            total_income=total_income,
            total_expense=total_expense,
        )
        logger.info(
            "M-Pesa statement processed: %d saved, %d skipped",
            result.saved_count,
            result.skipped_count,
        )
        return result

    async def _resolve_default_category(self, user_id: str) -> Optional[Category]:
        """Find the user's (or the system) M-Pesa category"""
        categories = await self.store.find_categories_for_user(user_id)
        for category in categories:
            if category.matches(self.default_category_name):
                return category
        logger.debug("No '%s' category for user %s", self.default_category_name, user_id)
        return None

    async def _is_duplicate(self, user_id: str, candidate: ParsedTransaction) -> bool:
        """Reference-code dedup; rows without a reference are always new"""
        if not candidate.external_reference:
            return False
        existing = await self.store.find_existing_by_user_and_description_contains_and_date(
            user_id,
            candidate.external_reference,
            candidate.date,
        )
        return existing is not None
