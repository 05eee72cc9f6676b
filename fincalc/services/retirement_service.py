"""Retirement benefits and their tax exemptions.

Gratuity (Payment of Gratuity Act):
    Eligible after more than 5 years of continuous service.
    Amount = 15 × last drawn (basic + DA) × years / 26
    A final part-year of more than 6 months counts as a full year.
    Exempt up to ₹25L (government) / ₹20L (private), Section 10(10).

Leave encashment:
    Exempt up to ₹25L, Section 10(10AA).
"""

from __future__ import annotations

import math

from fincalc.constants import (
    GRATUITY_DIVISOR,
    GRATUITY_EXEMPTION_GOVT,
    GRATUITY_EXEMPTION_PRIVATE,
    GRATUITY_FORMULA_MULTIPLIER,
    GRATUITY_MIN_YEARS,
    GRATUITY_ROUNDING_MONTHS,
    LEAVE_ENCASHMENT_EXEMPTION,
)
from fincalc.models.schemas import GratuityResult, LeaveEncashmentResult
from fincalc.utils.helpers import round_rupee


def calculate_gratuity(
    last_drawn_salary: float,
    years_of_service: float,
    months_of_service: int = 0,
    is_government_employee: bool = False,
) -> GratuityResult:
    """Gratuity payable and how much of it is tax-exempt."""
    if years_of_service <= GRATUITY_MIN_YEARS:
        return GratuityResult(
            eligible_years=years_of_service,
            gratuity_amount=0.0,
            tax_exempt_amount=0.0,
            taxable_amount=0.0,
            is_eligible=False,
        )

    eligible_years = math.floor(years_of_service)
    if months_of_service > GRATUITY_ROUNDING_MONTHS:
        eligible_years += 1

    gratuity = round_rupee(
        GRATUITY_FORMULA_MULTIPLIER * last_drawn_salary * eligible_years / GRATUITY_DIVISOR
    )
    limit = GRATUITY_EXEMPTION_GOVT if is_government_employee else GRATUITY_EXEMPTION_PRIVATE

    return GratuityResult(
        eligible_years=eligible_years,
        gratuity_amount=gratuity,
        tax_exempt_amount=min(gratuity, limit),
        taxable_amount=max(0.0, gratuity - limit),
        is_eligible=True,
    )


def calculate_leave_encashment(amount: float) -> LeaveEncashmentResult:
    return LeaveEncashmentResult(
        leave_encashment_amount=amount,
        tax_exempt_amount=min(amount, LEAVE_ENCASHMENT_EXEMPTION),
        taxable_amount=max(0.0, amount - LEAVE_ENCASHMENT_EXEMPTION),
    )
