from __future__ import annotations

from storage_planner.models.schemas import (
    BillingPeriod,
    Catalog,
    EnterprisePlan,
    EnterpriseRateSchedule,
    EnterpriseTier,
    FixedTier,
    RateBand,
    Recommendation,
    StorageEstimate,
    Tier,
)

__all__ = [
    "BillingPeriod",
    "Catalog",
    "EnterprisePlan",
    "EnterpriseRateSchedule",
    "EnterpriseTier",
    "FixedTier",
    "RateBand",
    "Recommendation",
    "StorageEstimate",
    "Tier",
]
