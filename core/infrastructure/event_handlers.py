"""
Event handlers for domain events.

These handlers process domain events for side effects
like audit logging and metrics.
"""

import logging

from core.domain.events import DomainEvent, EventHandler
from core.domain.value_objects import LicenseStatus
from core.metrics import (
    license_status_changes_total,
    license_store_clears_total,
    licenses_activated_total,
    licenses_created_total,
    licenses_deactivated_total,
    licenses_deleted_total,
    licenses_imported_total,
)
from licenses.domain.events import (
    LicenseActivated,
    LicenseCreated,
    LicenseDeactivated,
    LicenseDeleted,
    LicensesCleared,
    LicensesImported,
    LicenseStatusChanged,
)

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger("licenses.audit")

# Status strings are free-form; metric labels stay bounded.
STATUS_LABELS = frozenset(status.value for status in LicenseStatus)


def status_label(status: str) -> str:
    """Metric label for a license status."""
    return status if status in STATUS_LABELS else "other"


LICENSE_EVENTS = (
    LicenseCreated,
    LicenseActivated,
    LicenseDeactivated,
    LicenseStatusChanged,
    LicenseDeleted,
    LicensesImported,
    LicensesCleared,
)


class AuditLogEventHandler(EventHandler):
    """
    Event handler for audit logging.

    Writes every license event to the ``licenses.audit`` logger.
    """

    async def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event for audit logging.

        Args:
            event: Domain event to log
        """
        audit_logger.info(
            "Audit log: %s - %s",
            event.event_type,
            event.aggregate_id,
            extra=event.to_dict(),
        )


class LicenseMetricsEventHandler(EventHandler):
    """
    Event handler for Prometheus counters.
    """

    async def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event for metrics.

        Args:
            event: Domain event
        """
        if isinstance(event, LicenseCreated):
            licenses_created_total.inc()
        elif isinstance(event, LicenseActivated):
            licenses_activated_total.inc()
        elif isinstance(event, LicenseDeactivated):
            licenses_deactivated_total.inc()
        elif isinstance(event, LicenseStatusChanged):
            license_status_changes_total.labels(status=status_label(event.new_status)).inc()
        elif isinstance(event, LicenseDeleted):
            licenses_deleted_total.inc()
        elif isinstance(event, LicensesImported):
            licenses_imported_total.inc(event.count)
        elif isinstance(event, LicensesCleared):
            license_store_clears_total.inc()


audit_handler = AuditLogEventHandler()
metrics_handler = LicenseMetricsEventHandler()


def register_event_handlers():
    """Register all event handlers with the event bus."""
    from core.infrastructure.events import event_bus

    for event_type in LICENSE_EVENTS:
        event_bus.subscribe(event_type, audit_handler)
        event_bus.subscribe(event_type, metrics_handler)

    logger.info("Event handlers registered")
