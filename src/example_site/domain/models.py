"""Domain models for the example site."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ExampleRecord:
    """A database-generated identifier."""

    id: str
