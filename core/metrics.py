"""
Prometheus metrics for the license service.

Counters for license state transitions and store failures.
"""

from prometheus_client import Counter

# License metrics
licenses_created_total = Counter(
    "licenses_created_total",
    "Total license records created",
)

licenses_activated_total = Counter(
    "licenses_activated_total",
    "Total licenses activated on this device",
)

licenses_deactivated_total = Counter(
    "licenses_deactivated_total",
    "Total licenses deactivated on this device",
)

license_status_changes_total = Counter(
    "license_status_changes_total",
    "Total manual license status changes",
    ["status"],
)

licenses_deleted_total = Counter(
    "licenses_deleted_total",
    "Total license records deleted",
)

license_conflicts_total = Counter(
    "license_conflicts_total",
    "Total activations refused because the license is bound to another device",
)

# Bulk operation metrics
licenses_imported_total = Counter(
    "licenses_imported_total",
    "Total license records imported",
)

license_store_clears_total = Counter(
    "license_store_clears_total",
    "Total full clears of the license store",
)

# Error metrics
store_errors_total = Counter(
    "store_errors_total",
    "Total license store failures",
    ["operation"],
)
