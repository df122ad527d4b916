# db/store.py

from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx
from postgrest.exceptions import APIError


class StoreError(Exception):
    """A read or write against the record store failed."""

    def __init__(self, message: str, table: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.table = table


def _error_message(e: Exception) -> str:
    if getattr(e, "message", None):
        return e.message
    if getattr(e, "details", None):
        return e.details
    return str(e) or e.__class__.__name__


class SupabaseStore:
    """Opaque record store on top of a supabase-py client."""

    def __init__(self, client):
        self.client = client

    def insert(self, table: str, record: Dict[str, Any]) -> Dict[str, Any]:
        try:
            response = self.client.table(table).insert(record).execute()
        except (APIError, httpx.HTTPError) as e:
            raise StoreError(_error_message(e), table) from e

        if not response.data:
            raise StoreError(f"Failed to insert into {table}. No data returned.", table)

        return response.data[0]

    def query(
        self,
        table: str,
        columns: str = "*",
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[str] = None,
        descending: bool = False,
    ) -> List[Dict[str, Any]]:
        try:
            request = self.client.table(table).select(columns)
            for column, value in (filters or {}).items():
                request = request.eq(column, value)
            if order_by:
                request = request.order(order_by, desc=descending)
            response = request.execute()
        except (APIError, httpx.HTTPError) as e:
            raise StoreError(_error_message(e), table) from e

        return list(response.data or [])

    def delete(self, table: str, filters: Dict[str, Any]) -> int:
        if not filters:
            # PostgREST refuses unfiltered deletes anyway
            raise ValueError("delete requires at least one filter")

        try:
            request = self.client.table(table).delete()
            for column, value in filters.items():
                request = request.eq(column, value)
            response = request.execute()
        except (APIError, httpx.HTTPError) as e:
            raise StoreError(_error_message(e), table) from e

        return len(response.data or [])
