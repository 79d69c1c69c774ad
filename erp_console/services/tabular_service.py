"""
Tabular Service - tables and CSV files for list pages

Uses pandas to turn entity lists into text tables and CSV exports, and to
read CSV files whose rows are created one by one through a resource.

Author: TM3
Date: 2025-10-17
"""
import io
import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence

import pandas as pd
from pydantic import BaseModel

from erp_console.core.errors import ErpApiError, FormValidationError, SessionExpiredError, get_error_message
from erp_console.repositories.base import ResourceRepository

logger = logging.getLogger(__name__)


def _as_dict(item: Any) -> Dict[str, Any]:
    if isinstance(item, BaseModel):
        return item.model_dump(mode='json')
    return dict(item)


def to_frame(items: Iterable[Any], columns: Optional[Sequence[str]] = None) -> pd.DataFrame:
    """
    Build a DataFrame from models or dicts

    Nested values (lines, addresses) are left as objects; pass `columns` to
    pick and order the columns to show.
    """
    rows = [_as_dict(item) for item in items]
    df = pd.DataFrame(rows)
    if columns:
        df = df.reindex(columns=list(columns))
    return df


def render_table(items: Iterable[Any], columns: Optional[Sequence[str]] = None) -> str:
    df = to_frame(items, columns)
    if df.empty:
        return "(no records)"
    return df.fillna('').to_string(index=False)


def export_csv(items: Iterable[Any], columns: Optional[Sequence[str]] = None) -> str:
    return to_frame(items, columns).to_csv(index=False)


def import_csv(text: str) -> List[Dict[str, Any]]:
    """
    Parse CSV text into row dicts

    Every cell is read as a string; blank cells are dropped so that the form
    model applies its defaults.
    """
    if not text or not text.strip():
        return []
    df = pd.read_csv(io.StringIO(text), dtype=str, keep_default_na=False)
    rows = []
    for record in df.to_dict(orient='records'):
        row = {key.strip(): value.strip() for key, value in record.items()
               if isinstance(value, str) and value.strip()}
        if row:
            rows.append(row)
    return rows


class ImportService:
    """Creates entities from imported rows"""

    @staticmethod
    async def import_rows(repository: ResourceRepository, rows: List[Dict[str, Any]],
                          **params) -> Dict[str, Any]:
        """
        Create one entity per row

        A row that fails validation or is rejected by the backend is counted
        and reported; an expired session stops the import.

        Returns:
            {"created": int, "failed": int, "errors": [{"row": n, "error": msg}]}
        """
        created = 0
        errors = []

        for index, row in enumerate(rows, start=1):
            try:
                await repository.create(row, **params)
                created += 1
            except SessionExpiredError:
                raise
            except (FormValidationError, ErpApiError) as e:
                message = get_error_message(e, f"Failed to create {repository.spec.display_name}")
                logger.warning(f"Import row {index} failed: {message}")
                errors.append({'row': index, 'error': message})

        logger.info(f"Imported {created}/{len(rows)} {repository.spec.module}/{repository.spec.name}")
        return {'created': created, 'failed': len(errors), 'errors': errors}
