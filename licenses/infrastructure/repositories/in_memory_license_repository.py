"""
In-memory implementation of LicenseRepository port.

Used by unit tests and anywhere a throwaway store is enough. It follows
the same contract as the Django adapter, including idempotent create.
"""
import copy
from typing import Dict, Iterable, List, Optional, Set, Tuple

from core.domain.exceptions import StoreError
from licenses.domain.license import License
from licenses.ports.license_repository import LicenseRepository


class InMemoryLicenseRepository(LicenseRepository):
    """
    Dictionary backed LicenseRepository.

    Operations named in ``failing_operations`` raise StoreError, which lets
    tests exercise storage failures.
    """

    def __init__(
        self,
        licenses: Iterable[License] = (),
        failing_operations: Optional[Set[str]] = None,
    ):
        self._records: Dict[str, License] = {}
        self.failing_operations: Set[str] = set(failing_operations or ())
        for license in licenses:
            self._records[license.key] = copy.deepcopy(license)

    def _check(self, operation: str) -> None:
        if operation in self.failing_operations:
            raise StoreError(f"Error {operation}: simulated failure")

    async def get(self, key: str) -> Optional[License]:
        self._check("get")
        license = self._records.get(key)
        return copy.deepcopy(license) if license else None

    async def get_all(self) -> List[License]:
        self._check("get_all")
        return [copy.deepcopy(license) for license in self._records.values()]

    async def create(self, license: License) -> Tuple[License, bool]:
        self._check("create")
        existing = self._records.get(license.key)
        if existing is not None:
            return copy.deepcopy(existing), False
        self._records[license.key] = copy.deepcopy(license)
        return copy.deepcopy(license), True

    async def put(self, license: License) -> License:
        self._check("put")
        self._records[license.key] = copy.deepcopy(license)
        return copy.deepcopy(license)

    async def delete(self, key: str) -> None:
        self._check("delete")
        self._records.pop(key, None)

    async def clear(self) -> None:
        self._check("clear")
        self._records.clear()
