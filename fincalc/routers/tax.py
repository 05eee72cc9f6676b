"""Routers for income-tax endpoints:
    POST  {API_PREFIX}/tax:calculate
    POST  {API_PREFIX}/tax:compare
    GET   {API_PREFIX}/tax:age-category
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query

from fincalc.config import settings
from fincalc.models.schemas import (
    AgeCategoryResponse,
    CompareRegimesRequest,
    RegimeComparison,
    TaxCalculateRequest,
    TaxResult,
)
from fincalc.services.comparison_service import compare_regimes
from fincalc.services.tax_service import (
    InvalidInputError,
    calculate_income_tax,
    get_age_category,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix=settings.API_PREFIX,
    tags=["Income Tax"],
)


# ── 1. Single-regime calculation ─────────────────────────────────────────

@router.post(
    "/tax:calculate",
    response_model=TaxResult,
    summary="Itemised income tax for one regime",
)
async def tax_calculate(body: TaxCalculateRequest) -> TaxResult:
    try:
        return calculate_income_tax(body)
    except InvalidInputError as exc:
        raise HTTPException(status_code=422, detail=str(exc))


# ── 2. Regime comparison ─────────────────────────────────────────────────

@router.post(
    "/tax:compare",
    response_model=RegimeComparison,
    summary="Compare old and new regimes on the same income",
)
async def tax_compare(body: CompareRegimesRequest) -> RegimeComparison:
    try:
        comparison = compare_regimes(
            body.annual_gross_income, body.age_category, body.deductions
        )
    except InvalidInputError as exc:
        raise HTTPException(status_code=422, detail=str(exc))

    logger.info(
        "Regime comparison: gross=%.2f recommended=%s savings=%.2f",
        body.annual_gross_income,
        comparison.recommended_regime.value,
        comparison.savings,
    )
    return comparison


# ── 3. Age category lookup ───────────────────────────────────────────────

@router.get(
    "/tax:age-category",
    response_model=AgeCategoryResponse,
    summary="Old-regime age category for an age in years",
)
async def tax_age_category(age: int = Query(..., ge=0, le=150)) -> AgeCategoryResponse:
    return AgeCategoryResponse(age=age, age_category=get_age_category(age))
