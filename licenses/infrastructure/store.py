"""
License store handle.

The outer surfaces (API views, management commands) obtain the record
store here and inject it into the application handlers.
"""
import logging
from typing import Optional

from asgiref.sync import sync_to_async
from django.db import DatabaseError, connections

from core.domain.exceptions import StoreError
from licenses.infrastructure.repositories.django_license_repository import (
    DjangoLicenseRepository,
)
from licenses.ports.license_repository import LicenseRepository

logger = logging.getLogger(__name__)

_store: Optional[LicenseRepository] = None


def _open(alias: str) -> None:
    connections[alias].ensure_connection()


async def open_license_store(alias: str = "default") -> LicenseRepository:
    """
    Open the license store.

    The first successful open is reused for the lifetime of the process.
    A failed open is not remembered, so the next call tries again.

    Args:
        alias: Database alias

    Returns:
        LicenseRepository backed by the database

    Raises:
        StoreError: If the database cannot be opened
    """
    global _store  # pylint: disable=global-statement
    if _store is not None:
        return _store

    try:
        await sync_to_async(_open)(alias)
    except DatabaseError as e:
        logger.error("Unable to open license store: %s", e, exc_info=True)
        raise StoreError(f"Database error: {e}") from e

    _store = DjangoLicenseRepository()
    logger.info("License store opened (database alias %s)", alias)
    return _store


def reset_license_store() -> None:
    """Forget the memoized store handle."""
    global _store  # pylint: disable=global-statement
    _store = None
