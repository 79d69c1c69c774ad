"""
Point of sale, e-commerce and document pages

Creation goes through the generic resource routes
(/console/pos/stores, /console/documents/folders, ...).
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from erp_console.api.deps import get_api
from erp_console.repositories.erp_api import ErpApi
from erp_console.services.page_loader import load_sections

router = APIRouter(prefix="/console", tags=["Commerce"])


@router.get("/pos")
async def pos_page(api: ErpApi = Depends(get_api)):
    """Stores and transactions, loaded together"""
    return await load_sections(
        stores=api.pos.get_stores(),
        transactions=api.pos.get_transactions(),
    )


@router.get("/ecommerce")
async def ecommerce_page(api: ErpApi = Depends(get_api)):
    return await load_sections(
        platforms=api.ecommerce.get_platforms(),
        orders=api.ecommerce.get_orders(),
    )


@router.get("/documents")
async def documents_page(folder_id: Optional[str] = Query(None, description="Open folder"),
                         api: ErpApi = Depends(get_api)):
    """Sub-folders and documents of one folder (the top level when omitted)"""
    return await load_sections(
        folders=api.documents.list_folders(parent_id=folder_id),
        documents=api.documents.list_documents(folder_id=folder_id),
    )
