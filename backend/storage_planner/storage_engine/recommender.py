"""
Tier recommendation and enterprise pricing.

The recommended tier is the first one in catalog order whose capacity
covers the requirement.  Catalog order is ascending capacity, so this is
the smallest sufficient tier; between tiers of equal capacity the one
listed first wins.

When no fixed tier is large enough an Enterprise plan is synthesized on
top of the largest tier:

    cost = base.cost + (required_gb - base.storage_gb) * rate

``rate`` comes from the enterprise schedule and is selected by the TOTAL
required storage (first threshold exceeded, scanning highest to lowest),
so the price curve jumps at each threshold.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from storage_planner.models.schemas import (
    EnterprisePlan,
    EnterpriseRateSchedule,
    EnterpriseTier,
    FixedTier,
    Recommendation,
    Tier,
)
from storage_planner.storage_engine.catalog import CatalogError, get_catalog
from storage_planner.storage_engine.formatting import format_storage

logger = logging.getLogger(__name__)


def enterprise_rate_for(storage_gb: float, schedule: EnterpriseRateSchedule) -> float:
    """Per-GB rate for a total requirement of ``storage_gb``."""
    for band in schedule.bands:
        if storage_gb > band.threshold_gb:
            return band.rate
    return schedule.default_rate


def build_enterprise_plan(
    required_gb: float,
    base_tier: Tier,
    schedule: EnterpriseRateSchedule,
) -> EnterprisePlan:
    extra_gb = required_gb - base_tier.storage_gb
    rate = enterprise_rate_for(required_gb, schedule)
    additional_cost = extra_gb * rate

    features = (
        schedule.storage_feature_template.format(storage=format_storage(required_gb)),
        *schedule.features,
    )

    return EnterprisePlan(
        name=schedule.name,
        cost=base_tier.cost + additional_cost,
        storage_gb=required_gb,
        seats=schedule.seats,
        features=features,
        base_tier_name=base_tier.name,
        base_cost=base_tier.cost,
        extra_storage_gb=extra_gb,
        additional_cost=additional_cost,
        rate=rate,
    )


def recommend(
    required_gb: float,
    tiers: Sequence[Tier],
    schedule: Optional[EnterpriseRateSchedule] = None,
) -> Recommendation:
    """Pick the smallest fixed tier covering ``required_gb``, else price Enterprise.

    Args:
        required_gb: Storage requirement in GB (>= 0).
        tiers: Tiers of one billing period, ascending capacity.
        schedule: Enterprise rate schedule; defaults to the loaded catalog's.

    Raises:
        CatalogError: ``tiers`` is empty.
        ValueError: ``required_gb`` is negative or NaN.
    """
    if not tiers:
        raise CatalogError("Cannot recommend a tier from an empty tier list.")
    if not required_gb >= 0:  # also rejects NaN
        raise ValueError(f"required_gb must be >= 0, got {required_gb}")

    for tier in tiers:
        if tier.storage_gb >= required_gb:
            return FixedTier(tier=tier)

    # max() keeps the first of equal-capacity tiers
    base_tier = max(tiers, key=lambda t: t.storage_gb)
    schedule = schedule or get_catalog().enterprise
    plan = build_enterprise_plan(required_gb, base_tier, schedule)
    logger.debug(
        "No fixed tier covers %.2f GB; Enterprise on %s at %.4f/GB -> %.2f",
        required_gb, base_tier.name, plan.rate, plan.cost,
    )
    return EnterpriseTier(plan=plan)
