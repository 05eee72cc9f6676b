"""Routers for salary endpoints:
    POST  {API_PREFIX}/salary:in-hand
    POST  {API_PREFIX}/salary:compare-offers
"""

from __future__ import annotations

import logging

from fastapi import APIRouter

from fincalc.config import settings
from fincalc.models.schemas import (
    CompareOffersRequest,
    OfferComparison,
    SalaryInput,
    SalaryResult,
)
from fincalc.services.salary_service import calculate_in_hand_salary, compare_offers

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix=settings.API_PREFIX,
    tags=["Salary"],
)


@router.post(
    "/salary:in-hand",
    response_model=SalaryResult,
    summary="Monthly in-hand salary under both regimes",
)
async def salary_in_hand(body: SalaryInput) -> SalaryResult:
    return calculate_in_hand_salary(body)


@router.post(
    "/salary:compare-offers",
    response_model=OfferComparison,
    summary="Side-by-side take-home comparison of two offers",
)
async def salary_compare_offers(body: CompareOffersRequest) -> OfferComparison:
    comparison = compare_offers(body.offer_a, body.offer_b)
    logger.info(
        "Offer comparison: better=%s monthlyDifference=%.2f",
        comparison.better_offer,
        comparison.monthly_difference,
    )
    return comparison
