"""
Generic paginated resource

One repository class serves every list/create/update/delete/transition
endpoint of the ERP backend. A ResourceSpec describes the endpoint and the
entity type; ResourceRepository turns backend JSON into domain models.

Author: TM3
Date: 2025-10-17
"""
import logging
from dataclasses import dataclass
from string import Formatter
from typing import Any, AsyncIterator, Dict, Generic, List, Optional, Tuple, Type, TypeVar, Union
from urllib.parse import quote

from pydantic import BaseModel, ValidationError

from erp_console.connectors.erp_connector import ErpConnector
from erp_console.core.config import settings
from erp_console.core.errors import FormValidationError, UnknownResourceError
from erp_console.domain.common import Page

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True)
class ResourceSpec:
    """
    Description of one backend resource

    Fields:
        module: ERP module (finance, inventory, ...)
        name: Resource name inside the module (accounts, products, ...)
        path: Collection path; may hold placeholders such as {project_id}
        model: Domain model the backend returns
        paginated: Whether list returns {items, total, page, per_page, total_pages}
        actions: State transitions reachable as POST {item_path}/{action}
        item_path: Path of one entity; defaults to "{path}/{id}"
        create_model: Form model validated before POST (required fields)
    """
    module: str
    name: str
    path: str
    model: Type[BaseModel]
    label: str = ""
    paginated: bool = True
    actions: Tuple[str, ...] = ()
    can_list: bool = True
    can_get: bool = False
    can_create: bool = True
    can_update: bool = False
    can_delete: bool = False
    item_path: Optional[str] = None
    create_model: Optional[Type[BaseModel]] = None

    @property
    def key(self) -> Tuple[str, str]:
        return (self.module, self.name)

    @property
    def display_name(self) -> str:
        return self.label or self.name.replace('-', ' ').rstrip('s').title()

    @property
    def path_fields(self) -> List[str]:
        """Placeholders the collection path needs (e.g. ['project_id'])"""
        return [field for _, field, _, _ in Formatter().parse(self.path) if field]


def describe_validation_error(error: ValidationError) -> str:
    """Short human message for a form that failed validation"""
    problems = []
    for item in error.errors():
        field = '.'.join(str(part) for part in item.get('loc', ()))
        problems.append(f"{field}: {item.get('msg')}" if field else item.get('msg'))
    return "Invalid form: " + "; ".join(problems)


class ResourceRepository(Generic[T]):
    """Typed access to one backend resource"""

    def __init__(self, connector: ErpConnector, spec: ResourceSpec):
        self.connector = connector
        self.spec = spec

    # ==================== PATHS ====================

    def _split_params(self, params: Dict[str, Any]) -> Tuple[str, Dict[str, Any]]:
        """Separate path placeholders from query parameters"""
        path_values = {}
        query = dict(params)
        for field in self.spec.path_fields:
            value = query.pop(field, None)
            if value in (None, ''):
                raise UnknownResourceError(
                    f"{self.spec.module}/{self.spec.name} requires '{field}'"
                )
            path_values[field] = quote(str(value), safe='')
        return self.spec.path.format(**path_values), query

    def _item_path(self, entity_id: Any, **params) -> str:
        entity_id = quote(str(entity_id), safe='')
        if self.spec.item_path:
            return self.spec.item_path.format(id=entity_id)
        collection, _ = self._split_params(params)
        return f"{collection}/{entity_id}"

    def _require(self, allowed: bool, operation: str) -> None:
        if not allowed:
            raise UnknownResourceError(
                f"{self.spec.module}/{self.spec.name} does not support {operation}"
            )

    # ==================== PARSING ====================

    def _parse(self, data: Any) -> T:
        return self.spec.model.model_validate(data)

    def _parse_result(self, data: Any) -> Any:
        """Entity when the backend returned one, otherwise the raw status body"""
        if isinstance(data, dict):
            try:
                return self._parse(data)
            except ValidationError:
                return data
        return data

    def parse_page(self, data: Any) -> Page:
        page_model = Page[self.spec.model]
        if isinstance(data, list):
            return page_model(items=data, total=len(data), page=1,
                              per_page=len(data), total_pages=1 if data else 0)
        return page_model.model_validate(data or {})

    def _parse_items(self, data: Any) -> List[T]:
        if isinstance(data, dict):
            data = data.get('data', data.get('items', []))
        return [self._parse(item) for item in data or []]

    def _form_payload(self, data: Union[Dict[str, Any], BaseModel]) -> Dict[str, Any]:
        if isinstance(data, BaseModel):
            return data.model_dump(mode='json', exclude_none=True)
        if self.spec.create_model is not None:
            try:
                form = self.spec.create_model.model_validate(data)
            except ValidationError as e:
                raise FormValidationError(describe_validation_error(e)) from e
            return form.model_dump(mode='json', exclude_none=True)
        return dict(data)

    # ==================== OPERATIONS ====================

    async def list(self, page: int = 1, per_page: int = None, **filters) -> Union[Page, List[T]]:
        """
        List entities

        Args:
            page: Page number (1-based), paginated resources only
            per_page: Page size (defaults to ERP_DEFAULT_PER_PAGE)
            **filters: Path placeholders and query filters

        Returns:
            Page of entities, or a plain list for non-paginated endpoints
        """
        self._require(self.spec.can_list, "list")
        path, query = self._split_params(filters)

        if not self.spec.paginated:
            data = await self.connector.get(path, params=query or None)
            return self._parse_items(data)

        query['page'] = page
        query['per_page'] = per_page or settings.ERP_DEFAULT_PER_PAGE
        data = await self.connector.get(path, params=query)
        return self.parse_page(data)

    async def iter_all(self, per_page: int = None, **filters) -> AsyncIterator[T]:
        """Yield every entity, page by page"""
        if not self.spec.paginated:
            for item in await self.list(**filters):
                yield item
            return

        page = 1
        while True:
            result = await self.list(page=page, per_page=per_page, **filters)
            for item in result.items:
                yield item
            if not result.items or page >= result.total_pages:
                break
            page += 1

    async def get(self, entity_id: Any, **params) -> T:
        self._require(self.spec.can_get, "get")
        data = await self.connector.get(self._item_path(entity_id, **params))
        return self._parse(data)

    async def create(self, data: Union[Dict[str, Any], BaseModel], **params) -> Any:
        self._require(self.spec.can_create, "create")
        payload = self._form_payload(data)
        path, _ = self._split_params(params)
        logger.info(f"Creating {self.spec.module}/{self.spec.name}")
        return self._parse_result(await self.connector.post(path, json=payload))

    async def update(self, entity_id: Any, data: Union[Dict[str, Any], BaseModel], **params) -> Any:
        self._require(self.spec.can_update, "update")
        if isinstance(data, BaseModel):
            data = data.model_dump(mode='json', exclude_none=True)
        result = await self.connector.put(self._item_path(entity_id, **params), json=dict(data))
        return self._parse_result(result)

    async def delete(self, entity_id: Any, **params) -> Any:
        self._require(self.spec.can_delete, "delete")
        logger.info(f"Deleting {self.spec.module}/{self.spec.name} {entity_id}")
        return await self.connector.delete(self._item_path(entity_id, **params))

    async def perform(self, entity_id: Any, action: str, data: Optional[Dict[str, Any]] = None,
                      **params) -> Any:
        """Run a state transition (post, confirm, approve, ...)"""
        self._require(action in self.spec.actions, f"action '{action}'")
        path = f"{self._item_path(entity_id, **params)}/{action}"
        logger.info(f"{self.spec.module}/{self.spec.name} {entity_id}: {action}")
        return self._parse_result(await self.connector.post(path, json=data))
