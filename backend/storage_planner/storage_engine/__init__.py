from __future__ import annotations

from storage_planner.storage_engine.catalog import (
    CatalogError,
    UnknownBillingPeriodError,
    catalog_for,
    get_catalog,
    load_catalog,
)
from storage_planner.storage_engine.estimator import estimate
from storage_planner.storage_engine.formatting import format_storage
from storage_planner.storage_engine.recommender import enterprise_rate_for, recommend

__all__ = [
    "CatalogError",
    "UnknownBillingPeriodError",
    "catalog_for",
    "enterprise_rate_for",
    "estimate",
    "format_storage",
    "get_catalog",
    "load_catalog",
    "recommend",
]
