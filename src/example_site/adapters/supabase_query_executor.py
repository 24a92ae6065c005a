"""Supabase-backed raw query execution."""

import logging
from dataclasses import dataclass
from typing import Any

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from example_site.domain.errors import QueryExecutionError
from example_site.services.example import QueryExecutor

logger = logging.getLogger(__name__)


@dataclass
class SupabaseQueryExecutor(QueryExecutor):
    """Runs raw SQL through a Postgres function exposed over RPC."""

    client: Client
    function_name: str = "query_raw"

    def query_raw(self, sql: str) -> list[dict[str, Any]]:
        """Execute ``sql`` and return the rows as dictionaries."""
        try:
            response = self.client.rpc(self.function_name, {"query": sql}).execute()
        except APIError as exc:
            logger.error("Query rejected by Supabase: %s", exc.message)
            raise QueryExecutionError(f"Query rejected: {exc.message}") from exc
        except httpx.HTTPError as exc:
            logger.error("Supabase unreachable: %s", exc)
            raise QueryExecutionError("Database unavailable") from exc
        return list(response.data or [])
