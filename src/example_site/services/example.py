"""Example domain service."""

from dataclasses import dataclass
from typing import Any, Protocol

from example_site.domain.errors import QueryExecutionError
from example_site.domain.models import ExampleRecord

EXAMPLE_QUERY = "SELECT gen_random_uuid() AS id"


class QueryExecutor(Protocol):
    """Interface for issuing raw queries."""

    def query_raw(self, sql: str) -> list[dict[str, Any]]:
        """Run a query and return its rows."""


@dataclass
class ExampleService:
    """Service returning a freshly generated identifier."""

    executor: QueryExecutor

    def get_example(self) -> list[ExampleRecord]:
        """Return a single record holding a new random UUID."""
        rows = self.executor.query_raw(EXAMPLE_QUERY)
        if len(rows) != 1 or not isinstance(rows[0], dict) or "id" not in rows[0]:
            raise QueryExecutionError("Expected exactly one row with an id column")
        return [ExampleRecord(id=str(rows[0]["id"]))]
