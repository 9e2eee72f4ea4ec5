"""
Base class for license management commands.
"""
import json
import logging
from typing import Any, Awaitable, Callable

from asgiref.sync import async_to_sync
from django.core.management.base import BaseCommand, CommandError

from core.domain.exceptions import DomainException
from licenses.domain.license import License

logger = logging.getLogger(__name__)


class LicenseCommand(BaseCommand):
    """
    Management command driving an async license handler.

    Subclasses implement ``run`` as a coroutine; domain errors are reported
    as ``CommandError`` so the command exits non-zero with the message.
    """

    async def run(self, *args, **options) -> Any:
        raise NotImplementedError("subclasses of LicenseCommand must provide a run() method")

    def handle(self, *args, **options):
        """Execute the command."""
        self.call(self.run, *args, **options)

    def call(self, coroutine_function: Callable[..., Awaitable[Any]], *args, **kwargs) -> Any:
        """Run a coroutine function to completion, translating domain errors."""
        try:
            return async_to_sync(coroutine_function)(*args, **kwargs)
        except DomainException as e:
            logger.warning("%s failed: %s - %s", self.__module__, e.code, e.message)
            raise CommandError(f"{e.code}: {e.message}") from e

    def write_license(self, license: License) -> None:
        """Write a license record as indented JSON."""
        self.stdout.write(json.dumps(license.to_dict(), indent=2))
