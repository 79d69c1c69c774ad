"""
Unit tests for the per-module repositories (auth, finance, credit,
notifications, governance)
"""
import asyncio

import pytest

from conftest import page_body, request_json
from erp_console.domain import AuditLog, CreditHold, CreditProfile, CreditTransaction, Notification


class TestAuthRepository:
    def test_login_stores_token(self, backend, api, token_store):
        backend.add("POST", "/auth/login", json={
            "token": "new-token",
            "user": {"id": "u-1", "username": "admin", "email": "admin@example.com"},
        })

        result = asyncio.run(api.auth.login("admin", "secret"))

        assert result.user.username == "admin"
        assert token_store.get() == "new-token"
        assert request_json(backend.requests[0]) == {"username": "admin", "password": "secret"}

    def test_me(self, backend, api):
        backend.add("GET", "/auth/me", json={"id": "u-1", "username": "admin", "full_name": "Ada Admin"})

        user = asyncio.run(api.auth.me())

        assert user.full_name == "Ada Admin"

    def test_logout_clears_token_without_request(self, backend, api, token_store):
        api.auth.logout()

        assert token_store.get() is None
        assert backend.requests == []


class TestFinanceRepository:
    def test_reports(self, backend, api):
        backend.add("GET", "/api/v1/finance/reports/trial-balance", json={"accounts": [], "balanced": True})

        report = asyncio.run(api.finance.get_trial_balance())

        assert report["balanced"] is True

    def test_unknown_report(self, api):
        with pytest.raises(ValueError):
            asyncio.run(api.finance.get_report("cash-flow"))

    def test_preview_sends_date_and_currency_only(self, backend, api):
        backend.add("POST", "/api/v1/finance/currency-revaluations/preview", json={
            "revaluation_date": "2025-10-17", "base_currency": "USD", "lines": [],
        })

        preview = asyncio.run(api.finance.preview_revaluation("2025-10-17", "USD"))

        assert preview.base_currency == "USD"
        assert request_json(backend.requests[0]) == {"revaluation_date": "2025-10-17", "base_currency": "USD"}


class TestCreditRepository:
    def test_profiles_page_with_limit_and_envelope(self, backend, api):
        backend.add("GET", "/api/v1/credit/profiles", json={"success": True, "data": [
            {"customer_id": "c-1", "customer_name": "Acme Corporation", "credit_limit": 500000},
        ]})

        profiles = asyncio.run(api.credit.get_profiles(page=2, limit=10))

        assert isinstance(profiles[0], CreditProfile)
        assert profiles[0].customer_name == "Acme Corporation"
        params = backend.requests[0].url.params
        assert (params["page"], params["limit"]) == ("2", "10")

    def test_profiles_resource_lists_without_page_params(self, backend, api):
        backend.add("GET", "/api/v1/credit/profiles", json={"success": True, "data": []})

        profiles = asyncio.run(api.resource("credit", "profiles").list())

        assert profiles == []
        assert "per_page" not in backend.requests[0].url.params

    def test_transactions_accept_data_envelope(self, backend, api):
        backend.add("GET", "/api/v1/credit/customers/c-1/transactions", json={"data": [
            {"id": "t-1", "customer_id": "c-1", "transaction_type": "Invoice", "amount": 150000},
        ]})

        transactions = asyncio.run(api.credit.get_transactions("c-1"))

        assert isinstance(transactions[0], CreditTransaction)
        assert transactions[0].amount == 150000
        assert backend.requests[0].url.params["limit"] == "20"

    def test_holds(self, backend, api):
        backend.add("GET", "/api/v1/credit/customers/c-1/holds", json={"data": [
            {"id": "h-1", "customer_id": "c-1", "reason": "Overdue", "status": "Active"},
        ]})

        holds = asyncio.run(api.credit.get_holds("c-1"))

        assert isinstance(holds[0], CreditHold)

    def test_release_sends_override_reason(self, backend, api):
        backend.add("POST", "/api/v1/credit/customers/c-1/release", json={"message": "Released"})

        asyncio.run(api.credit.release_hold("c-1", "Paid in full"))

        assert request_json(backend.requests[0]) == {"override_reason": "Paid in full"}

    def test_profile_utilization(self, backend, api):
        backend.add("GET", "/api/v1/credit/profiles/high-risk", json=[
            {"customer_id": "c-1", "credit_limit": 100000, "credit_used": 90000, "risk_level": "High"},
        ])

        profiles = asyncio.run(api.credit.get_high_risk())

        assert profiles[0].utilization == pytest.approx(0.9)


class TestNotificationRepository:
    def test_list_and_unread_count(self, backend, api, sample_notification_data):
        backend.add("GET", "/api/v1/notifications", json=[sample_notification_data])
        backend.add("GET", "/api/v1/notifications/unread-count", json={"count": 3})

        notifications = asyncio.run(api.notifications.list())
        count = asyncio.run(api.notifications.unread_count())

        assert isinstance(notifications[0], Notification)
        assert notifications[0].notification_type == "ApprovalRequired"
        assert count == 3

    def test_read_flag_from_backend(self, backend, api, sample_notification_data):
        backend.add("GET", "/api/v1/notifications", json=[
            {**sample_notification_data, "read": True},
            {**sample_notification_data, "id": "n-2"},
        ])

        notifications = asyncio.run(api.notifications.list())

        assert [n.read for n in notifications] == [True, False]

    def test_unread_count_as_plain_number(self, backend, api):
        backend.add("GET", "/api/v1/notifications/unread-count", json=7)

        assert asyncio.run(api.notifications.unread_count()) == 7

    def test_mark_read(self, backend, api):
        backend.add("POST", "/api/v1/notifications/n-1/read", status=204)
        backend.add("POST", "/api/v1/notifications/read", status=204)

        asyncio.run(api.notifications.mark_read("n-1"))
        asyncio.run(api.notifications.mark_all_read())

        assert [r.url.path for r in backend.requests] == [
            "/api/v1/notifications/n-1/read",
            "/api/v1/notifications/read",
        ]


class TestGovernanceRepositories:
    def test_audit_logs_send_only_given_filters(self, backend, api):
        backend.add("GET", "/api/v1/audit-logs", json=page_body([
            {"id": "a-1", "entity_type": "Account", "action": "Create"},
        ]))

        page = asyncio.run(api.audit.get_logs(entity_type="Account"))

        assert isinstance(page.items[0], AuditLog)
        params = backend.requests[0].url.params
        assert params["entity_type"] == "Account"
        assert "entity_id" not in params
        assert "page" not in params

    def test_reject_request_sends_reason(self, backend, api):
        backend.add("POST", "/api/v1/approval-workflow/requests/r-1/reject", json={"message": "Rejected"})

        asyncio.run(api.approval_workflow.reject_request("r-1", "Over budget"))

        assert request_json(backend.requests[0]) == {"reason": "Over budget"}

    def test_ticket_status_is_validated(self, api, backend):
        with pytest.raises(ValueError):
            asyncio.run(api.service.update_ticket_status("t-1", "Exploded"))
        assert backend.requests == []

    def test_blank_article_search_sends_nothing(self, api, backend):
        assert asyncio.run(api.service.search_articles("   ")) == []
        assert backend.requests == []
