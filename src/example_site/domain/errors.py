"""Domain errors."""


class QueryExecutionError(RuntimeError):
    """Raised when the database is unreachable or rejects a query."""
