"""
Calculator orchestration between the HTTP layer and the storage engine.

Turns the three form inputs plus a billing period into a CalculationResult.
Incomplete input (films or duration missing/zero, or no 4K percentage) is
not an error: the result carries zero figures, no recommendation and the
full tier list so the caller can still show every plan.

Each tier comes back as a PlanOption flagged with whether it covers the
requirement and whether it is the recommended one.
"""

from __future__ import annotations

from typing import Optional, Sequence, Union

from storage_planner.config import settings
from storage_planner.models.schemas import (
    BillingPeriod,
    CalculationRequest,
    CalculationResult,
    Catalog,
    FixedTier,
    PlanCatalogResponse,
    PlanOption,
    PlanSavings,
    Recommendation,
    Tier,
)
from storage_planner.storage_engine.catalog import catalog_for, get_catalog, resolve_period
from storage_planner.storage_engine.estimator import estimate
from storage_planner.storage_engine.formatting import format_cost, format_seats, format_storage
from storage_planner.storage_engine.recommender import recommend

PRICE_SUFFIX = {
    BillingPeriod.MONTHLY: "/month",
    BillingPeriod.ANNUAL: "/month (billed annually)",
}


def has_sufficient_input(req: CalculationRequest) -> bool:
    return bool(req.films) and bool(req.duration) and req.high_res_percent is not None


def billed_annually_label(cost: float, period: BillingPeriod) -> str:
    """Yearly charge shown for annual billing, e.g. "$1,128.00"; empty otherwise."""
    if period != BillingPeriod.ANNUAL or cost <= 0:
        return ""
    return format_cost(cost * 12)


def build_plan_options(
    tiers: Sequence[Tier],
    period: BillingPeriod,
    required_gb: float = 0.0,
    recommendation: Optional[Recommendation] = None,
) -> list[PlanOption]:
    """Flag each tier against the requirement.

    Only a fixed-tier recommendation marks a catalog tier as recommended;
    with an Enterprise recommendation every tier is flagged False.
    """
    recommended = recommendation.tier if isinstance(recommendation, FixedTier) else None

    options: list[PlanOption] = []
    for tier in tiers:
        is_recommended = recommended is not None and tier == recommended
        if is_recommended:
            recommended = None  # equal duplicates: first one only
        options.append(PlanOption(
            tier=tier,
            meets_requirement=tier.storage_gb >= required_gb,
            is_recommended=is_recommended,
            billed_annually_label=billed_annually_label(tier.cost, period),
        ))
    return options


def calculate_plan(
    req: CalculationRequest,
    catalog: Optional[Catalog] = None,
) -> CalculationResult:
    """Estimate storage for the request and recommend a plan."""
    catalog = catalog or get_catalog()
    period = req.billing_period or resolve_period(settings.default_billing_period)
    tiers = catalog_for(period, catalog)

    if not has_sufficient_input(req):
        return CalculationResult(
            billing_period=period,
            price_suffix=PRICE_SUFFIX[period],
            plans=build_plan_options(tiers, period),
        )

    est = estimate(
        req.films,
        req.duration,
        req.high_res_percent,
        standard_rate=settings.standard_gb_per_minute,
        high_res_rate=settings.high_res_gb_per_minute,
    )
    recommendation = recommend(est.total_gb, tiers, catalog.enterprise)
    offer = recommendation.tier if isinstance(recommendation, FixedTier) else recommendation.plan

    return CalculationResult(
        billing_period=period,
        total_gb=est.total_gb,
        standard_gb=est.standard_gb,
        high_res_gb=est.high_res_gb,
        total_storage_label=format_storage(est.total_gb),
        standard_storage_label=format_storage(est.standard_gb),
        high_res_storage_label=format_storage(est.high_res_gb),
        recommendation=recommendation,
        cost_label=format_cost(offer.cost),
        seats_label=format_seats(offer.seats),
        billed_annually_label=billed_annually_label(offer.cost, period),
        price_suffix=PRICE_SUFFIX[period],
        plans=build_plan_options(tiers, period, est.total_gb, recommendation),
    )


def annual_savings(catalog: Optional[Catalog] = None) -> list[PlanSavings]:
    """Savings of annual over monthly billing for tiers offered in both periods.

    Tiers are matched by name; free tiers are skipped.
    """
    catalog = catalog or get_catalog()
    monthly = {t.name: t for t in catalog.periods[BillingPeriod.MONTHLY]}

    savings: list[PlanSavings] = []
    for tier in catalog.periods[BillingPeriod.ANNUAL]:
        match = monthly.get(tier.name)
        if match is None or match.cost <= 0:
            continue
        savings.append(PlanSavings(
            name=tier.name,
            monthly_cost=match.cost,
            annual_cost=tier.cost,
            savings_percent=round((match.cost - tier.cost) / match.cost * 100, 1),
        ))
    return savings


def describe_catalog(
    period: Union[BillingPeriod, str],
    catalog: Optional[Catalog] = None,
) -> PlanCatalogResponse:
    catalog = catalog or get_catalog()
    period = resolve_period(period)
    savings = annual_savings(catalog)

    return PlanCatalogResponse(
        billing_period=period,
        catalog_version=catalog.version,
        price_suffix=PRICE_SUFFIX[period],
        plans=list(catalog_for(period, catalog)),
        annual_savings=savings,
        max_annual_savings_percent=max((s.savings_percent for s in savings), default=0.0),
    )
