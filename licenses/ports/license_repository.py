"""
License repository port (interface).

This defines the contract of the license record store.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from licenses.domain.license import License


class LicenseRepository(ABC):
    """
    Abstract repository for License records, keyed by license key.

    Every call commits atomically and reports storage failures as
    StoreError. Callers receive snapshots; changes must be written back
    with put().
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[License]:
        """
        Find a license by key.

        Args:
            key: License key

        Returns:
            License entity or None if not found
        """
        pass

    @abstractmethod
    async def get_all(self) -> List[License]:
        """
        Return every license record. Order carries no meaning.

        Returns:
            List of License entities
        """
        pass

    @abstractmethod
    async def create(self, license: License) -> Tuple[License, bool]:
        """
        Insert a new license.

        If a record with the same key exists it is left untouched and
        returned; this is not an error.

        Args:
            license: License entity to insert

        Returns:
            Tuple of (stored License, created)
        """
        pass

    @abstractmethod
    async def put(self, license: License) -> License:
        """
        Insert or overwrite a license.

        Args:
            license: License entity to save

        Returns:
            Saved License entity
        """
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        """
        Delete a license. Missing keys are ignored.

        Args:
            key: License key
        """
        pass

    @abstractmethod
    async def clear(self) -> None:
        """Delete every license record."""
        pass
