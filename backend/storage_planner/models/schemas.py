from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Optional, Union, get_args

from pydantic import BaseModel, ConfigDict, Field, field_validator


SeatsSentinel = Literal["5+"]
SEATS_SENTINEL: str = get_args(SeatsSentinel)[0]


class BillingPeriod(str, Enum):
    MONTHLY = "monthly"
    ANNUAL = "annual"


# ── Catalog records ──

class Tier(BaseModel):
    """A fixed-price subscription tier. `cost` is per month."""
    model_config = ConfigDict(frozen=True)

    name: str
    cost: float = Field(ge=0)
    storage_gb: float = Field(ge=0)
    seats: Union[int, SeatsSentinel]
    features: tuple[str, ...] = ()

    @field_validator("seats")
    @classmethod
    def _positive_seats(cls, v):
        if isinstance(v, int) and v < 1:
            raise ValueError(f"seat count must be a positive integer or '{SEATS_SENTINEL}'")
        return v


class RateBand(BaseModel):
    model_config = ConfigDict(frozen=True)

    threshold_gb: float = Field(ge=0)
    rate: float = Field(ge=0)


class EnterpriseRateSchedule(BaseModel):
    """Per-GB rates for storage beyond the largest fixed tier.

    `bands` are ordered by strictly decreasing threshold.  The band is
    picked by the *total* requested storage, not by the band the extra GB
    falls into.
    """
    model_config = ConfigDict(frozen=True)

    name: str = "Enterprise"
    bands: tuple[RateBand, ...]
    default_rate: float = Field(ge=0)
    seats: SeatsSentinel = SEATS_SENTINEL
    storage_feature_template: str = "{storage} custom storage"
    features: tuple[str, ...] = ()


class Catalog(BaseModel):
    model_config = ConfigDict(frozen=True)

    version: str = ""
    periods: dict[BillingPeriod, tuple[Tier, ...]]
    enterprise: EnterpriseRateSchedule


# ── Engine results ──

class StorageEstimate(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_gb: float
    standard_gb: float
    high_res_gb: float


class EnterprisePlan(Tier):
    """Synthesized tier for requirements above every fixed tier."""
    base_tier_name: str
    base_cost: float
    extra_storage_gb: float
    additional_cost: float
    rate: float


class FixedTier(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["fixed"] = "fixed"
    tier: Tier


class EnterpriseTier(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["enterprise"] = "enterprise"
    plan: EnterprisePlan


Recommendation = Annotated[Union[FixedTier, EnterpriseTier], Field(discriminator="kind")]


# ── API / service models ──

class CalculationRequest(BaseModel):
    """Calculator inputs.  Missing values mean the user has not filled them in yet."""
    films: Optional[float] = Field(default=None, ge=0)
    duration: Optional[float] = Field(default=None, ge=0)
    high_res_percent: Optional[float] = Field(default=None, ge=0, le=100)
    billing_period: Optional[BillingPeriod] = None  # settings.default_billing_period


class PlanOption(BaseModel):
    """A catalog tier as shown next to a calculation."""
    tier: Tier
    meets_requirement: bool = True
    is_recommended: bool = False
    billed_annually_label: str = ""


class CalculationResult(BaseModel):
    billing_period: BillingPeriod
    total_gb: float = 0.0
    standard_gb: float = 0.0
    high_res_gb: float = 0.0
    total_storage_label: str = ""
    standard_storage_label: str = ""
    high_res_storage_label: str = ""
    recommendation: Optional[Recommendation] = None
    cost_label: str = ""
    seats_label: str = ""
    billed_annually_label: str = ""  # annual period only
    price_suffix: str = ""
    plans: list[PlanOption] = []


class PlanSavings(BaseModel):
    name: str
    monthly_cost: float
    annual_cost: float
    savings_percent: float


class PlanCatalogResponse(BaseModel):
    billing_period: BillingPeriod
    catalog_version: str
    price_suffix: str
    plans: list[Tier]
    annual_savings: list[PlanSavings] = []
    max_annual_savings_percent: float = 0.0
