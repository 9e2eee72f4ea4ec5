"""
Django implementation of LicenseRepository port.

This adapter converts between domain entities and Django ORM models.
"""
import logging
from typing import Any, Dict, List, Optional, Tuple

from asgiref.sync import sync_to_async
from django.db import IntegrityError, transaction

from core.infrastructure.database import store_operation
from licenses.domain.license import License
from licenses.infrastructure.models import License as LicenseModel
from licenses.ports.license_repository import LicenseRepository

logger = logging.getLogger(__name__)


class DjangoLicenseRepository(LicenseRepository):
    """
    Django ORM implementation of LicenseRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Converts domain entities to Django model fields
    3. Runs each call in its own transaction, off the event loop
    """

    def _to_domain(self, model: LicenseModel) -> License:
        """
        Convert Django model to domain entity.

        Args:
            model: Django License model

        Returns:
            License domain entity
        """
        return License(
            key=model.key,
            status=model.status,
            created_at=model.created_at,
            activation_date=model.activation_date,
            device_id=model.device_id,
            last_active=model.last_active,
            extra=dict(model.extra or {}),
        )

    def _to_fields(self, license: License) -> Dict[str, Any]:
        """
        Convert domain entity to Django model field values (without the key).

        Args:
            license: License domain entity

        Returns:
            Field values for the License model
        """
        return {
            "status": license.status,
            "created_at": license.created_at,
            "activation_date": license.activation_date,
            "device_id": license.device_id,
            "last_active": license.last_active,
            "extra": dict(license.extra),
        }

    def _get(self, key: str) -> Optional[License]:
        with store_operation("getting license"):
            # pylint: disable=no-member
            model = LicenseModel.objects.filter(key=key).first()
        return self._to_domain(model) if model else None

    def _get_all(self) -> List[License]:
        with store_operation("getting licenses"):
            models = list(LicenseModel.objects.all())  # pylint: disable=no-member
        return [self._to_domain(model) for model in models]

    def _create(self, license: License) -> Tuple[License, bool]:
        with store_operation("creating license"):
            try:
                with transaction.atomic():
                    # pylint: disable=no-member
                    model = LicenseModel.objects.create(key=license.key, **self._to_fields(license))
                return self._to_domain(model), True
            except IntegrityError:
                # pylint: disable=no-member
                existing = LicenseModel.objects.filter(key=license.key).first()
                if existing is None:
                    raise
                logger.debug("License %s already exists, keeping stored record", license.key)
                return self._to_domain(existing), False

    def _put(self, license: License) -> License:
        with store_operation("updating license"):
            # pylint: disable=no-member
            model, _ = LicenseModel.objects.update_or_create(
                key=license.key, defaults=self._to_fields(license)
            )
        return self._to_domain(model)

    def _delete(self, key: str) -> None:
        with store_operation("deleting license"):
            LicenseModel.objects.filter(key=key).delete()  # pylint: disable=no-member

    def _clear(self) -> None:
        with store_operation("clearing licenses"):
            LicenseModel.objects.all().delete()  # pylint: disable=no-member

    async def get(self, key: str) -> Optional[License]:
        """
        Find a license by key.

        Args:
            key: License key

        Returns:
            License entity or None if not found
        """
        return await sync_to_async(self._get)(key)

    async def get_all(self) -> List[License]:
        """
        Return every license record.

        Returns:
            List of License entities
        """
        return await sync_to_async(self._get_all)()

    async def create(self, license: License) -> Tuple[License, bool]:
        """
        Insert a license, keeping an existing record with the same key.

        Args:
            license: License entity to insert

        Returns:
            Tuple of (stored License, created)
        """
        return await sync_to_async(self._create)(license)

    async def put(self, license: License) -> License:
        """
        Insert or overwrite a license.

        Args:
            license: License entity to save

        Returns:
            Saved License entity
        """
        return await sync_to_async(self._put)(license)

    async def delete(self, key: str) -> None:
        """
        Delete a license by key.

        Args:
            key: License key
        """
        await sync_to_async(self._delete)(key)

    async def clear(self) -> None:
        """Delete every license record."""
        await sync_to_async(self._clear)()
