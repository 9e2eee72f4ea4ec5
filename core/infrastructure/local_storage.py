"""
Device-scoped local storage abstraction (port).

This module defines the small key/value interface used for state that
belongs to the current device rather than to the license store, such as
the device identifier and the pointer to the license activated here.
"""
from abc import ABC, abstractmethod
from typing import Optional


class LocalStoragePort(ABC):
    """
    Abstract device-scoped storage port.

    Values are plain strings and never expire.
    """

    @abstractmethod
    async def get_item(self, key: str) -> Optional[str]:
        """
        Get a value from local storage.

        Args:
            key: Storage key

        Returns:
            Stored value or None if not set
        """
        pass

    @abstractmethod
    async def set_item(self, key: str, value: str) -> None:
        """
        Store a value.

        Args:
            key: Storage key
            value: Value to store
        """
        pass

    @abstractmethod
    async def remove_item(self, key: str) -> None:
        """
        Remove a value. Missing keys are ignored.

        Args:
            key: Storage key
        """
        pass
