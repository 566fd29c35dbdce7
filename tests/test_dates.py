"""
Tests for statement date parsing
"""
from datetime import date

from infrastructure.mpesa.dates import parse_statement_date, find_statement_date

TODAY = date(2026, 1, 15)


class TestParseStatementDate:
    """Test the 'Date of Statement:' header."""

    def test_ordinal_day(self):
        assert parse_statement_date("Date of Statement:     21st 10 2025") == date(2025, 10, 21)

    def test_other_ordinals(self):
        assert parse_statement_date("Date of Statement: 2nd 3 2024") == date(2024, 3, 2)
        assert parse_statement_date("Date of Statement: 3rd 3 2024") == date(2024, 3, 3)
        assert parse_statement_date("Date of Statement: 11th 3 2024") == date(2024, 3, 11)

    def test_plain_numbers(self):
        assert parse_statement_date("Date of Statement: 5 1 2025") == date(2025, 1, 5)

    def test_invalid_falls_back_to_today(self):
        assert parse_statement_date("Date of Statement: soon", today=TODAY) == TODAY
        assert parse_statement_date("Date of Statement: 31 02 2025", today=TODAY) == TODAY
        assert parse_statement_date("Date of Statement", today=TODAY) == TODAY

    def test_year_out_of_range_falls_back_to_today(self):
        assert parse_statement_date("Date of Statement: 21st 10 99999999999999999999", today=TODAY) == TODAY
        assert parse_statement_date("Date of Statement: 21st 10 99999", today=TODAY) == TODAY


class TestFindStatementDate:
    """Test locating the header in a statement."""

    def test_first_header_wins(self):
        lines = [
            "Customer Name:  JOHN DOE",
            "Date of Statement:  21st 10 2025",
            "Date of Statement:  1st 1 2020",
        ]
        assert find_statement_date(lines, today=TODAY) == date(2025, 10, 21)

    def test_missing_header_defaults_to_today(self):
        assert find_statement_date(["SUMMARY"], today=TODAY) == TODAY
