"""
Database utilities and error translation.
"""

import contextlib
import logging
from typing import Iterator

from django.db import DatabaseError, transaction

from core.domain.exceptions import StoreError
from core.metrics import store_errors_total

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def store_operation(operation: str) -> Iterator[None]:
    """
    Run a block of ORM work inside one transaction.

    Database failures are reported as StoreError with the operation name
    as context.

    Usage:
        with store_operation("updating license"):
            # Database operations
            pass
    """
    try:
        with transaction.atomic():
            yield
    except DatabaseError as exc:
        store_errors_total.labels(operation=operation).inc()
        logger.error("License store failure while %s: %s", operation, exc, exc_info=True)
        raise StoreError(f"Error {operation}: {exc}") from exc
