"""
Finance page: accounts, journal entries, reports and currency revaluation

Journal entries are checked for balance here before anything reaches the
backend.
"""
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from erp_console.api.deps import get_api
from erp_console.core.errors import UnknownResourceError
from erp_console.repositories.erp_api import ErpApi
from erp_console.repositories.finance_repository import REPORTS
from erp_console.services.journal_entry_service import JournalEntryService
from erp_console.services.page_loader import load_sections
from erp_console.services.revaluation_service import RevaluationService, default_form

router = APIRouter(prefix="/console/finance", tags=["Finance"])


@router.get("")
async def finance_page(api: ErpApi = Depends(get_api)):
    """Accounts (first 50) and journal entries (first 20), loaded together"""
    return await load_sections(
        accounts=api.finance.get_accounts(page=1, per_page=50),
        journal_entries=api.finance.get_journal_entries(page=1, per_page=20),
    )


@router.post("/accounts", status_code=201)
async def create_account(data: Dict[str, Any] = Body(...), api: ErpApi = Depends(get_api)):
    account = await api.finance.create_account(data)
    return {"message": "Account created successfully", "data": account}


@router.post("/journal-entries", status_code=201)
async def create_journal_entry(data: Dict[str, Any] = Body(...), api: ErpApi = Depends(get_api)):
    """
    Create a journal entry

    The body uses major units ({"description", "reference", "lines": [{account_id,
    debit, credit}]}); an unbalanced entry is rejected with 422.
    """
    entry = await JournalEntryService(api.finance).submit(data)
    return {"message": "Journal entry created successfully", "data": entry}


@router.get("/reports/{report}")
async def get_report(report: str, api: ErpApi = Depends(get_api)):
    if report not in REPORTS:
        raise UnknownResourceError(f"Unknown report '{report}'")
    return await api.finance.get_report(report)


# ==================== CURRENCY REVALUATION ====================

@router.get("/revaluations")
async def revaluations_page(api: ErpApi = Depends(get_api)):
    return {
        "revaluations": await api.finance.list_revaluations(),
        "form": default_form(),
    }


@router.get("/revaluations/default-form")
async def revaluation_form():
    return default_form()


@router.post("/revaluations/preview")
async def preview_revaluation(data: Dict[str, Any] = Body(...), api: ErpApi = Depends(get_api)):
    return await RevaluationService(api.finance).preview(data)


@router.post("/revaluations", status_code=201)
async def create_revaluation(data: Dict[str, Any] = Body(...), api: ErpApi = Depends(get_api)):
    revaluation = await RevaluationService(api.finance).create(data)
    return {"message": "Revaluation created successfully", "data": revaluation}


@router.post("/revaluations/{revaluation_id}/post")
async def post_revaluation(revaluation_id: str, api: ErpApi = Depends(get_api)):
    result = await RevaluationService(api.finance).post(revaluation_id)
    return {"message": "Revaluation posted successfully", "data": result}


@router.post("/revaluations/{revaluation_id}/reverse")
async def reverse_revaluation(revaluation_id: str, api: ErpApi = Depends(get_api)):
    result = await RevaluationService(api.finance).reverse(revaluation_id)
    return {"message": "Revaluation reversed successfully", "data": result}


@router.get("/revaluations/{revaluation_id}/lines")
async def revaluation_lines(revaluation_id: str, api: ErpApi = Depends(get_api)):
    return await RevaluationService(api.finance).lines(revaluation_id)
