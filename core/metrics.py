"""
Prometheus metrics for the business record service.
"""

from prometheus_client import Counter

businesses_created_total = Counter(
    "businesses_created_total",
    "Total business records created",
)

businesses_updated_total = Counter(
    "businesses_updated_total",
    "Total business records updated",
)

businesses_removed_total = Counter(
    "businesses_removed_total",
    "Total business records soft-deleted",
)

business_licenses_registered_total = Counter(
    "business_licenses_registered_total",
    "Total licenses registered to business records",
)

business_lookup_failures_total = Counter(
    "business_lookup_failures_total",
    "Business lookups that found no row",
    ["error_code"],
)
