"""
Unit tests for domain entities.
"""
from datetime import date
from decimal import Decimal

import pytest

from domain.entities import Category, ImportResult, ParsedTransaction, Transaction
from domain.enums import TransactionDirection


class TestParsedTransaction:
    """Test ParsedTransaction invariants."""

    def test_rejects_zero_amount(self):
        with pytest.raises(ValueError):
            ParsedTransaction(
                date=date(2025, 10, 21),
                description="Airtime (Sent)",
                amount=Decimal("0.00"),
                direction=TransactionDirection.EXPENSE,
            )

    def test_to_dict(self):
        tx = ParsedTransaction(
            date=date(2025, 10, 21),
            description="Send Money (Received)",
            amount=Decimal("4630.00"),
            direction=TransactionDirection.INCOME,
            raw_source_line="Send Money  4,630.00  157.00",
        )

        assert tx.is_income
        assert tx.to_dict() == {
            "date": "2025-10-21",
            "description": "Send Money (Received)",
            "amount": "4630.00",
            "direction": "INCOME",
            "external_reference": "",
            "raw_source_line": "Send Money  4,630.00  157.00",
        }


class TestTransaction:
    """Test persisted transaction entity."""

    def test_from_parsed(self):
        parsed = ParsedTransaction(
            date=date(2025, 10, 21),
            description="Pay Bill (Sent)",
            amount=Decimal("1200.50"),
            direction=TransactionDirection.EXPENSE,
        )

        tx = Transaction.from_parsed(parsed, user_id="user-1", category_id=7)

        assert tx.id is None
        assert tx.user_id == "user-1"
        assert tx.amount == Decimal("1200.50")
        assert tx.direction == TransactionDirection.EXPENSE
        assert tx.category_id == 7
        assert tx.to_dict()["type"] == "EXPENSE"


class TestImportResult:
    """Test ImportResult."""

    def test_empty(self):
        result = ImportResult.empty()

        assert result.no_transactions_found
        assert result.total_income == Decimal("0")
        assert result.message == "Statement processed successfully - no new transactions found"

    def test_counts_must_partition(self):
        with pytest.raises(ValueError):
            ImportResult(total_parsed=3, saved_count=1, skipped_count=1)

    def test_to_response_keys(self):
        result = ImportResult(
            total_parsed=3,
            saved_count=2,
            skipped_count=1,
            total_income=Decimal("4630.00"),
            total_expense=Decimal("157.00"),
        )

        response = result.to_response()

        assert response == {
            "success": True,
            "message": "Statement processed successfully! Imported 2 transactions",
            "totalTransactions": 3,
            "savedTransactions": 2,
            "skippedTransactions": 1,
            "totalIncome": Decimal("4630.00"),
            "totalExpense": Decimal("157.00"),
        }

    def test_immutable(self):
        result = ImportResult.empty()
        with pytest.raises(Exception):
            result.saved_count = 5


class TestCategory:
    """Test Category name matching."""

    def test_matches_case_insensitive(self):
        assert Category(id=1, name="M-Pesa").matches("m-pesa")
        assert Category(id=1, name=" M-PESA ").matches("M-Pesa")
        assert not Category(id=1, name="Mpesa").matches("M-Pesa")
