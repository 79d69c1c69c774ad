"""
Unit tests for the journal entry balance check and submission
"""
import asyncio
from decimal import Decimal

import pytest

from conftest import request_json
from erp_console.core.errors import FormValidationError
from erp_console.services.journal_entry_service import (
    UNBALANCED_MESSAGE, JournalEntryService, check_balance, to_cents,
)

JOURNAL = "/api/v1/finance/journal-entries"


def _entry(*lines):
    return {
        "description": "Office rent October",
        "reference": "RENT-10",
        "lines": [
            {"account_id": account, "debit": debit, "credit": credit}
            for account, debit, credit in lines
        ],
    }


class TestCheckBalance:
    def test_balanced_lines_pass(self):
        check_balance([
            {"account_id": "6100", "debit": "500.00", "credit": "0"},
            {"account_id": "1000", "debit": "0", "credit": "500.00"},
        ])

    def test_difference_within_a_cent_passes(self):
        check_balance([
            {"account_id": "6100", "debit": "100.005", "credit": "0"},
            {"account_id": "1000", "debit": "0", "credit": "100.00"},
        ])

    def test_exactly_one_cent_passes(self):
        check_balance([
            {"account_id": "6100", "debit": "100.01", "credit": "0"},
            {"account_id": "1000", "debit": "0", "credit": "100.00"},
        ])

    def test_more_than_a_cent_fails(self):
        with pytest.raises(FormValidationError) as exc_info:
            check_balance([
                {"account_id": "6100", "debit": "100.02", "credit": "0"},
                {"account_id": "1000", "debit": "0", "credit": "100.00"},
            ])
        assert str(exc_info.value) == UNBALANCED_MESSAGE

    def test_blank_amounts_count_as_zero(self):
        check_balance([
            {"account_id": "6100", "debit": "75", "credit": ""},
            {"account_id": "1000", "debit": None, "credit": "75"},
        ])

    @pytest.mark.parametrize("amount", ["abc", "1,000", "NaN"])
    def test_non_numeric_amount_is_a_form_error(self, amount):
        with pytest.raises(FormValidationError) as exc_info:
            check_balance([
                {"account_id": "6100", "debit": amount, "credit": "0"},
                {"account_id": "1000", "debit": "0", "credit": "100.00"},
            ])
        assert str(exc_info.value) == f"Invalid amount '{amount}'"

    def test_empty_entry_fails(self):
        with pytest.raises(FormValidationError):
            check_balance([])


class TestToCents:
    @pytest.mark.parametrize("amount, cents", [
        ("1234.56", 123456),
        ("0.005", 1),
        ("10", 1000),
    ])
    def test_converts_major_units(self, amount, cents):
        assert to_cents(Decimal(amount)) == cents


class TestJournalEntryService:
    def test_unbalanced_entry_sends_no_request(self, backend, api):
        """Unequal debit/credit blocks submission"""
        service = JournalEntryService(api.finance)

        with pytest.raises(FormValidationError) as exc_info:
            asyncio.run(service.submit(_entry(("6100", "500", "0"), ("1000", "0", "499"))))

        assert str(exc_info.value) == "Journal entry must balance (debits must equal credits)"
        assert backend.requests == []

    def test_balanced_entry_is_posted_in_cents(self, backend, api):
        backend.add("POST", JOURNAL, status=201, json={
            "id": "je-1", "entry_number": "JE-0001", "description": "Office rent October",
            "status": "Draft",
        })
        service = JournalEntryService(api.finance)

        entry = asyncio.run(service.submit(_entry(("6100", "1500.25", "0"), ("1000", "0", "1500.25"))))

        assert entry.entry_number == "JE-0001"
        body = request_json(backend.requests[0])
        assert body["description"] == "Office rent October"
        assert body["reference"] == "RENT-10"
        assert body["lines"] == [
            {"account_id": "6100", "debit": 150025, "credit": 0},
            {"account_id": "1000", "debit": 0, "credit": 150025},
        ]

    def test_incomplete_form_sends_no_request(self, backend, api):
        service = JournalEntryService(api.finance)

        with pytest.raises(FormValidationError):
            asyncio.run(service.submit({"description": "", "lines": []}))

        assert backend.requests == []

    @pytest.mark.parametrize("lines", [
        (("6100", "-100", "0"), ("1000", "0", "-100")),
        (("6100", "0", "-50"), ("1000", "-50", "0")),
    ])
    def test_negative_amounts_send_no_request(self, backend, api, lines):
        """Balanced but negative lines are rejected by the form model"""
        service = JournalEntryService(api.finance)

        with pytest.raises(FormValidationError):
            asyncio.run(service.submit(_entry(*lines)))

        assert backend.requests == []

    def test_post_entry(self, backend, api):
        backend.add("POST", f"{JOURNAL}/je-1/post", json={"message": "Posted"})

        asyncio.run(JournalEntryService(api.finance).post("je-1"))

        assert backend.requests[0].url.path == f"{JOURNAL}/je-1/post"
