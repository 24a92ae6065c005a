"""Shared test fixtures."""

from dataclasses import dataclass, field
from typing import Any
from uuid import uuid4

import pytest

from example_site.config import Settings
from example_site.containers import AppContainer
from example_site.services.example import ExampleService, QueryExecutor

SAMPLE_ID = "123e4567-e89b-12d3-a456-426614174000"


@dataclass
class FakeQueryExecutor(QueryExecutor):
    """Query executor returning queued rows and recording queries."""

    rows: list[dict[str, Any]] = field(default_factory=lambda: [{"id": SAMPLE_ID}])
    queries: list[str] = field(default_factory=list)

    def query_raw(self, sql: str) -> list[dict[str, Any]]:
        self.queries.append(sql)
        return self.rows


@dataclass
class RandomUuidQueryExecutor(QueryExecutor):
    """Query executor mimicking gen_random_uuid()."""

    def query_raw(self, sql: str) -> list[dict[str, Any]]:
        return [{"id": str(uuid4())}]


@dataclass
class FailingQueryExecutor(QueryExecutor):
    """Query executor that always raises."""

    error: Exception

    def query_raw(self, sql: str) -> list[dict[str, Any]]:
        raise self.error


@dataclass
class StubSupabaseClient:
    """Stand-in for the shared Supabase client."""


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
    )


@pytest.fixture
def query_executor() -> FakeQueryExecutor:
    return FakeQueryExecutor()


@pytest.fixture
def container(settings: Settings, query_executor: FakeQueryExecutor) -> AppContainer:
    return AppContainer(
        settings=settings,
        supabase_client=StubSupabaseClient(),  # type: ignore[arg-type]
        example_service=ExampleService(query_executor),
    )
