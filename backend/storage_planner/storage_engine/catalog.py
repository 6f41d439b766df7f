"""
Subscription tier catalog.

The catalog is plain JSON data (``storage_planner/data/catalog.json`` unless
``settings.catalog_path`` points elsewhere) holding:

  - the fixed-price tiers of each billing period, in ascending capacity order
  - the enterprise rate schedule used above the largest fixed tier

Repricing is a data change.  ``load_catalog`` validates the structure and
the ordering contracts the recommender depends on, and fails fast when they
are violated.
"""

from __future__ import annotations

import json
import logging
import os
from functools import lru_cache
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from storage_planner.config import settings
from storage_planner.models.schemas import BillingPeriod, Catalog, EnterpriseRateSchedule, Tier

logger = logging.getLogger(__name__)

DATA_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "data")
DEFAULT_CATALOG_PATH = os.path.join(DATA_DIR, "catalog.json")


class CatalogError(ValueError):
    """Catalog data is malformed or breaks an ordering contract."""


class UnknownBillingPeriodError(ValueError):
    """Billing period identifier outside {monthly, annual}."""


def _check_tier_order(period: BillingPeriod, tiers: tuple[Tier, ...]) -> None:
    if not tiers:
        raise CatalogError(f"Billing period '{period.value}' has no tiers.")
    for prev, cur in zip(tiers, tiers[1:]):
        if cur.storage_gb < prev.storage_gb:
            raise CatalogError(
                f"Tiers for '{period.value}' must be in ascending capacity order: "
                f"{cur.name} ({cur.storage_gb} GB) follows "
                f"{prev.name} ({prev.storage_gb} GB)."
            )


def _check_rate_schedule(schedule: EnterpriseRateSchedule) -> None:
    bands = schedule.bands
    for prev, cur in zip(bands, bands[1:]):
        if cur.threshold_gb >= prev.threshold_gb:
            raise CatalogError(
                "Enterprise rate thresholds must be strictly decreasing: "
                f"{cur.threshold_gb} follows {prev.threshold_gb}."
            )
    if "{storage}" not in schedule.storage_feature_template:
        raise CatalogError("storage_feature_template must contain '{storage}'.")


def load_catalog(data: Mapping[str, Any]) -> Catalog:
    """Build and validate a Catalog from plain structured data."""
    try:
        catalog = Catalog.model_validate(data)
    except ValidationError as exc:
        raise CatalogError(f"Invalid catalog data: {exc}") from exc

    for period in BillingPeriod:
        if period not in catalog.periods:
            raise CatalogError(f"Catalog is missing billing period '{period.value}'.")
        _check_tier_order(period, catalog.periods[period])
    _check_rate_schedule(catalog.enterprise)

    return catalog


def load_catalog_file(path: str) -> Catalog:
    with open(path, encoding="utf-8") as fh:
        data = json.load(fh)
    catalog = load_catalog(data)
    logger.info(
        "Loaded catalog %s from %s (%s)",
        catalog.version or "<unversioned>",
        path,
        ", ".join(f"{p.value}: {len(t)} tiers" for p, t in catalog.periods.items()),
    )
    return catalog


@lru_cache(maxsize=1)
def get_catalog() -> Catalog:
    """Process-wide catalog, loaded once."""
    return load_catalog_file(settings.catalog_path or DEFAULT_CATALOG_PATH)


def resolve_period(period: Union[BillingPeriod, str]) -> BillingPeriod:
    try:
        return BillingPeriod(period)
    except ValueError:
        raise UnknownBillingPeriodError(
            f"Unknown billing period {period!r}; expected one of "
            f"{', '.join(p.value for p in BillingPeriod)}."
        ) from None


def catalog_for(
    period: Union[BillingPeriod, str],
    catalog: Optional[Catalog] = None,
) -> tuple[Tier, ...]:
    """Return the tiers of a billing period, in ascending capacity order."""
    catalog = catalog or get_catalog()
    return catalog.periods[resolve_period(period)]
