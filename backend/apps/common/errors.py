from contextlib import contextmanager
from typing import Iterator, Optional

from django.db import DatabaseError

from .logger import AppLogger, get_logger

logger = get_logger(__name__).bind(component="common", layer="storage")


class StorageError(Exception):
    """Raised when the relational store fails; carries the backend message."""

    def __init__(self, message: str, *, operation: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.operation = operation


@contextmanager
def storage_guard(operation: str, log: Optional[AppLogger] = None) -> Iterator[None]:
    """Translate database failures inside the block into ``StorageError``.

    Nothing is retried; the original exception is chained.
    """
    try:
        yield
    except DatabaseError as exc:
        (log or logger).error(
            "Storage operation failed",
            operation=operation,
            error=str(exc),
            exception=exc.__class__.__name__,
        )
        raise StorageError(str(exc) or exc.__class__.__name__, operation=operation) from exc


__all__ = ["StorageError", "storage_guard"]
