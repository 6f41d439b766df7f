from __future__ import annotations

from fastapi import APIRouter, HTTPException

from storage_planner.models.schemas import (
    BillingPeriod,
    CalculationRequest,
    CalculationResult,
    PlanCatalogResponse,
)
from storage_planner.services.calculator import calculate_plan, describe_catalog

router = APIRouter(prefix="/api/v1", tags=["calculator"])


@router.get("/plans/{billing_period}", response_model=PlanCatalogResponse)
async def list_plans(billing_period: BillingPeriod):
    """Fixed-price tiers for a billing period, with annual savings."""
    return describe_catalog(billing_period)


@router.post("/calculate", response_model=CalculationResult)
async def calculate(req: CalculationRequest):
    """Estimate yearly storage and recommend a plan.

    Missing inputs return zero figures and no recommendation.
    """
    try:
        return calculate_plan(req)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
