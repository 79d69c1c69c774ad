"""
Unit tests for the credit management and currency revaluation workflows
"""
import asyncio
from datetime import date

import pytest

from conftest import request_json
from erp_console.core.errors import FormValidationError
from erp_console.services.credit_service import CreditService, format_cents
from erp_console.services.revaluation_service import RevaluationService, default_form

CREDIT = "/api/v1/credit"


class TestFormatCents:
    @pytest.mark.parametrize("cents, expected", [
        (123456, "$1,234.56"),
        (0, "$0.00"),
        (5, "$0.05"),
        (-250000, "-$2,500.00"),
    ])
    def test_format(self, cents, expected):
        assert format_cents(cents) == expected


class TestCreditService:
    def test_overview_loads_four_sections(self, backend, api):
        backend.add("GET", f"{CREDIT}/summary", json={"total_customers": 2, "customers_on_hold": 1})
        backend.add("GET", f"{CREDIT}/profiles", json={"success": True, "data": [
            {"customer_id": "c-1", "customer_name": "Acme Corporation", "credit_limit": 500000},
        ]})
        backend.add("GET", f"{CREDIT}/profiles/on-hold", json={"data": [
            {"customer_id": "c-2", "is_on_hold": True, "hold_reason": "Overdue"},
        ]})
        backend.add("GET", f"{CREDIT}/profiles/high-risk", json=[])

        overview = asyncio.run(CreditService(api.credit).load_overview())

        assert overview["summary"].total_customers == 2
        assert overview["profiles"][0].customer_name == "Acme Corporation"
        assert overview["on_hold"][0].is_on_hold is True
        assert overview["high_risk"] == []
        profile_request = backend.calls("GET", f"{CREDIT}/profiles")[0]
        assert profile_request.url.params["page"] == "1"
        assert profile_request.url.params["limit"] == "50"
        assert "per_page" not in profile_request.url.params

    def test_profile_details(self, backend, api):
        backend.add("GET", f"{CREDIT}/customers/c-1/transactions", json={"data": []})
        backend.add("GET", f"{CREDIT}/customers/c-1/holds", json={"data": [
            {"id": "h-1", "customer_id": "c-1", "reason": "Overdue"},
        ]})

        details = asyncio.run(CreditService(api.credit).load_profile_details("c-1"))

        assert details["transactions"] == []
        assert details["holds"][0].reason == "Overdue"

    @pytest.mark.parametrize("call, message", [
        (lambda s: s.update_limit("c-1", 100000, " "), "Please provide a reason for the limit change"),
        (lambda s: s.place_hold("c-1", ""), "Please provide a reason for the hold"),
        (lambda s: s.release_hold("c-1", None), "Please provide a reason for releasing the hold"),
    ])
    def test_blank_reason_sends_nothing(self, backend, api, call, message):
        with pytest.raises(FormValidationError) as exc_info:
            asyncio.run(call(CreditService(api.credit)))

        assert str(exc_info.value) == message
        assert backend.requests == []

    def test_update_limit(self, backend, api):
        backend.add("POST", f"{CREDIT}/customers/c-1/limit", json={"message": "Updated"})

        asyncio.run(CreditService(api.credit).update_limit("c-1", 750000, "Annual review"))

        assert request_json(backend.requests[0]) == {"credit_limit": 750000, "reason": "Annual review"}

    def test_place_hold(self, backend, api):
        backend.add("POST", f"{CREDIT}/customers/c-1/hold", json={"message": "Hold placed"})

        asyncio.run(CreditService(api.credit).place_hold("c-1", "  Overdue invoices "))

        assert request_json(backend.requests[0]) == {"reason": "Overdue invoices"}


class TestRevaluationService:
    def test_default_form_covers_current_month(self):
        form = default_form(date(2024, 2, 10))

        assert form.revaluation_date == date(2024, 2, 10)
        assert form.period_start == date(2024, 2, 1)
        assert form.period_end == date(2024, 2, 29)
        assert form.base_currency == "USD"

    def test_preview_sends_date_and_currency(self, backend, api):
        backend.add("POST", "/api/v1/finance/currency-revaluations/preview", json={
            "revaluation_date": "2025-10-17",
            "base_currency": "USD",
            "lines": [{"account_id": "1200", "currency": "EUR", "unrealized_gain": 1500}],
            "total_unrealized_gain": 1500,
        })

        preview = asyncio.run(RevaluationService(api.finance).preview(default_form(date(2025, 10, 17))))

        assert preview.lines[0].currency == "EUR"
        assert request_json(backend.requests[0]) == {"revaluation_date": "2025-10-17", "base_currency": "USD"}

    def test_create_sends_full_form(self, backend, api):
        backend.add("POST", "/api/v1/finance/currency-revaluations", status=201, json={
            "id": "rv-1", "revaluation_number": "REV-0001", "revaluation_date": "2025-10-17",
        })

        created = asyncio.run(RevaluationService(api.finance).create({
            "revaluation_date": "2025-10-17",
            "period_start": "2025-10-01",
            "period_end": "2025-10-31",
            "base_currency": "USD",
        }))

        assert created.revaluation_number == "REV-0001"
        assert request_json(backend.requests[0]) == {
            "revaluation_date": "2025-10-17",
            "period_start": "2025-10-01",
            "period_end": "2025-10-31",
            "base_currency": "USD",
        }

    def test_invalid_form_sends_nothing(self, backend, api):
        with pytest.raises(FormValidationError):
            asyncio.run(RevaluationService(api.finance).create({"revaluation_date": "not a date"}))
        assert backend.requests == []

    def test_reversed_period_is_rejected(self, backend, api):
        with pytest.raises(FormValidationError):
            asyncio.run(RevaluationService(api.finance).create({
                "revaluation_date": "2025-10-17",
                "period_start": "2025-10-31",
                "period_end": "2025-10-01",
            }))
        assert backend.requests == []

    def test_post_reverse_and_lines(self, backend, api):
        base = "/api/v1/finance/currency-revaluations/rv-1"
        backend.add("POST", f"{base}/post", json={"message": "Posted"})
        backend.add("POST", f"{base}/reverse", json={"message": "Reversed"})
        backend.add("GET", f"{base}/lines", json={"data": [{"account_id": "1200", "currency": "EUR"}]})
        service = RevaluationService(api.finance)

        asyncio.run(service.post("rv-1"))
        asyncio.run(service.reverse("rv-1"))
        lines = asyncio.run(service.lines("rv-1"))

        assert lines[0].account_id == "1200"
        assert [r.url.path for r in backend.requests] == [f"{base}/post", f"{base}/reverse", f"{base}/lines"]
