"""
Generic console routes for every catalogued ERP resource

- GET    /console/{module}/{resource}              - List (page, per_page, filters)
- POST   /console/{module}/{resource}              - Create
- GET    /console/{module}/{resource}/export.csv   - Export every record as CSV
- POST   /console/{module}/{resource}/import       - Create records from a CSV body
- GET    /console/{module}/{resource}/{id}         - Detail
- PUT    /console/{module}/{resource}/{id}         - Update
- DELETE /console/{module}/{resource}/{id}         - Delete
- POST   /console/{module}/{resource}/{id}/{action} - State transition

Path placeholders of nested resources (project_id, event_id, customer_id)
are passed as query parameters.

Author: TM3
Date: 2025-10-17
"""
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Request
from fastapi.responses import Response

from erp_console.api.deps import get_api
from erp_console.repositories.base import ResourceRepository
from erp_console.repositories.catalog import list_modules
from erp_console.repositories.erp_api import ErpApi
from erp_console.services.tabular_service import ImportService, export_csv, import_csv

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/console", tags=["Resources"])

_PAGING_PARAMS = {"page", "per_page"}


def _query_params(request: Request) -> Dict[str, Any]:
    return {k: v for k, v in request.query_params.items() if k not in _PAGING_PARAMS}


def _repository(api: ErpApi, module: str, resource: str) -> ResourceRepository:
    return api.resource(module, resource)


@router.get("/modules")
async def modules():
    """Every module and its resources"""
    return list_modules()


@router.get("/{module}/{resource}")
async def list_resource(
    module: str,
    resource: str,
    request: Request,
    page: int = Query(1, ge=1),
    per_page: Optional[int] = Query(None, ge=1, le=500),
    api: ErpApi = Depends(get_api),
):
    repository = _repository(api, module, resource)
    result = await repository.list(page=page, per_page=per_page, **_query_params(request))
    if isinstance(result, list):
        return {"items": result, "total": len(result)}
    return result


@router.post("/{module}/{resource}", status_code=201)
async def create_resource(
    module: str,
    resource: str,
    request: Request,
    data: Dict[str, Any] = Body(...),
    api: ErpApi = Depends(get_api),
):
    repository = _repository(api, module, resource)
    created = await repository.create(data, **_query_params(request))
    return {
        "message": f"{repository.spec.display_name} created successfully",
        "data": created,
    }


@router.get("/{module}/{resource}/export.csv")
async def export_resource(module: str, resource: str, request: Request,
                          api: ErpApi = Depends(get_api)):
    repository = _repository(api, module, resource)
    items = [item async for item in repository.iter_all(**_query_params(request))]
    return Response(
        content=export_csv(items),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{module}-{resource}.csv"'},
    )


@router.post("/{module}/{resource}/import")
async def import_resource(module: str, resource: str, request: Request,
                          api: ErpApi = Depends(get_api)):
    """Create one record per CSV row (raw text/csv body)"""
    repository = _repository(api, module, resource)
    body = (await request.body()).decode("utf-8-sig")
    rows = import_csv(body)
    result = await ImportService.import_rows(repository, rows, **_query_params(request))
    result["message"] = f"Imported {result['created']} of {len(rows)} rows"
    return result


@router.get("/{module}/{resource}/{entity_id}")
async def get_resource(module: str, resource: str, entity_id: str, request: Request,
                       api: ErpApi = Depends(get_api)):
    return await _repository(api, module, resource).get(entity_id, **_query_params(request))


@router.put("/{module}/{resource}/{entity_id}")
async def update_resource(
    module: str,
    resource: str,
    entity_id: str,
    request: Request,
    data: Dict[str, Any] = Body(...),
    api: ErpApi = Depends(get_api),
):
    repository = _repository(api, module, resource)
    updated = await repository.update(entity_id, data, **_query_params(request))
    return {
        "message": f"{repository.spec.display_name} updated successfully",
        "data": updated,
    }


@router.delete("/{module}/{resource}/{entity_id}")
async def delete_resource(module: str, resource: str, entity_id: str, request: Request,
                          api: ErpApi = Depends(get_api)):
    repository = _repository(api, module, resource)
    await repository.delete(entity_id, **_query_params(request))
    return {"message": f"{repository.spec.display_name} deleted successfully"}


@router.post("/{module}/{resource}/{entity_id}/{action}")
async def perform_action(
    module: str,
    resource: str,
    entity_id: str,
    action: str,
    request: Request,
    data: Optional[Dict[str, Any]] = Body(None),
    api: ErpApi = Depends(get_api),
):
    repository = _repository(api, module, resource)
    result = await repository.perform(entity_id, action, data, **_query_params(request))
    return {
        "message": f"{repository.spec.display_name} {action} successful",
        "data": result,
    }
