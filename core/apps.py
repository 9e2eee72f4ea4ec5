"""
App configuration for the core app.
"""

import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class CoreConfig(AppConfig):
    """App configuration for core."""

    name = "core"
    verbose_name = "Core"

    def ready(self):
        """Subscribe audit and metrics handlers to license events."""
        from core.infrastructure.event_handlers import register_event_handlers

        register_event_handlers()
