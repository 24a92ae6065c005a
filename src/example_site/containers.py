"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import Client, create_client

from example_site.adapters.supabase_query_executor import SupabaseQueryExecutor
from example_site.config import Settings
from example_site.services.example import ExampleService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    supabase_client: Client
    example_service: ExampleService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    query_executor = SupabaseQueryExecutor(
        client=supabase_client,
        function_name=resolved_settings.query_function,
    )
    return AppContainer(
        settings=resolved_settings,
        supabase_client=supabase_client,
        example_service=ExampleService(query_executor),
    )
