"""Exceptions raised by Pulse Report."""


class FetchError(Exception):
    """A feed fetch failed and the fallback policy did not substitute data.

    Args:
        operation: Name of the fetcher operation that failed.
        cause: Human-readable description of the underlying failure.
    """

    def __init__(self, operation: str, cause: str) -> None:
        super().__init__(f"{operation} failed: {cause}")
        self.operation = operation
        self.cause = cause
