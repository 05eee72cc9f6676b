"""Routers for retirement-benefit endpoints:
    POST  {API_PREFIX}/retirement:gratuity
    POST  {API_PREFIX}/retirement:leave-encashment
"""

from __future__ import annotations

import logging

from fastapi import APIRouter

from fincalc.config import settings
from fincalc.models.schemas import (
    GratuityRequest,
    GratuityResult,
    LeaveEncashmentRequest,
    LeaveEncashmentResult,
)
from fincalc.services.retirement_service import (
    calculate_gratuity,
    calculate_leave_encashment,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix=settings.API_PREFIX,
    tags=["Retirement"],
)


@router.post(
    "/retirement:gratuity",
    response_model=GratuityResult,
    summary="Gratuity amount and its tax-exempt portion",
)
async def retirement_gratuity(body: GratuityRequest) -> GratuityResult:
    result = calculate_gratuity(
        last_drawn_salary=body.last_drawn_salary,
        years_of_service=body.years_of_service,
        months_of_service=body.months_of_service,
        is_government_employee=body.is_government_employee,
    )
    logger.info(
        "Gratuity: eligible=%s amount=%.0f taxable=%.0f",
        result.is_eligible,
        result.gratuity_amount,
        result.taxable_amount,
    )
    return result


@router.post(
    "/retirement:leave-encashment",
    response_model=LeaveEncashmentResult,
    summary="Leave encashment exemption",
)
async def retirement_leave_encashment(body: LeaveEncashmentRequest) -> LeaveEncashmentResult:
    return calculate_leave_encashment(body.amount)
