"""Indian income-tax computation for FY 2024-25, old and new regimes.

New regime (all ages):
    ₹0 – ₹3,00,000             → 0 %
    ₹3,00,001 – ₹6,00,000      → 5 %
    ₹6,00,001 – ₹9,00,000      → 10 %
    ₹9,00,001 – ₹12,00,000     → 15 %
    ₹12,00,001 – ₹15,00,000    → 20 %
    Above ₹15,00,000           → 30 %

Old regime: 0 / 5 / 20 / 30 % with the zero-rate band ending at ₹2.5L
(below 60), ₹3L (60 – 79) or ₹5L (80+, which also skips the 5 % band).

Order of operations, per regime:
    deductions → taxable income → slab tax → 87A rebate
    → marginal relief (new regime only) → surcharge → cess

The 87A rebate wipes out the whole slab tax when taxable income is at or
below ₹7L (new) / ₹5L (old).  Above ₹7L in the new regime the tax may not
exceed the income earned above ₹7L.  Surcharge is picked by *gross* income
and applied to the entire post-rebate tax; it is not smoothed at tier
boundaries.  Cess is 4 % of tax plus surcharge.

Every function here is pure; the same input always yields the same result.
"""

from __future__ import annotations

from typing import Callable

from fincalc.constants import (
    CESS_RATE,
    NEW_REGIME_SLABS,
    NEW_REGIME_SURCHARGE_CAP,
    OLD_REGIME_SLABS_BELOW60,
    OLD_REGIME_SLABS_SENIOR,
    OLD_REGIME_SLABS_SUPER_SENIOR,
    REBATE_THRESHOLD_NEW,
    REBATE_THRESHOLD_OLD,
    SECTION_80C_LIMIT,
    SENIOR_CITIZEN_AGE,
    STANDARD_DEDUCTION_NEW,
    STANDARD_DEDUCTION_OLD,
    SUPER_SENIOR_CITIZEN_AGE,
    SURCHARGE_TIERS,
    SlabBracket,
)
from fincalc.models.schemas import (
    AgeCategory,
    TaxInput,
    TaxRegime,
    TaxResult,
    TaxSlab,
)
from fincalc.utils.helpers import round_rupee


class InvalidInputError(ValueError):
    """Raised when a tax input violates the engine's one precondition."""


OLD_REGIME_SLABS_BY_AGE: dict[AgeCategory, tuple[SlabBracket, ...]] = {
    AgeCategory.BELOW_60: OLD_REGIME_SLABS_BELOW60,
    AgeCategory.SENIOR: OLD_REGIME_SLABS_SENIOR,
    AgeCategory.SUPER_SENIOR: OLD_REGIME_SLABS_SUPER_SENIOR,
}


def calculate_tax_from_slabs(
    income: float, slabs: tuple[SlabBracket, ...]
) -> tuple[float, tuple[TaxSlab, ...]]:
    """Progressive slab tax on *income*.

    Brackets are inclusive, so the amount taxed in a bracket is
    ``min(upper, income) - lower + 1``.  Returns the total (summed unrounded,
    then rounded half-up) and one breakdown entry per bracket the income
    reaches, each with its own rounded tax.
    """
    breakdown: list[TaxSlab] = []
    total = 0.0

    for bracket in slabs:
        if income <= bracket.lower:
            break

        upper = min(bracket.upper, income)
        bracket_tax = (upper - bracket.lower + 1) * bracket.rate
        breakdown.append(
            TaxSlab(
                from_=bracket.lower,
                to=upper,
                rate_percent=round(bracket.rate * 100, 2),
                tax=round_rupee(bracket_tax),
            )
        )
        total += bracket_tax

        if upper >= income:
            break

    return round_rupee(total), tuple(breakdown)


def calculate_surcharge(
    tax_after_rebate: float, gross_income: float, regime: TaxRegime
) -> float:
    """Surcharge on the whole post-rebate tax, tier chosen by gross income.

    Nil up to ₹50L; 10 % / 15 % / 25 % above ₹50L / ₹1Cr / ₹2Cr; 37 % above
    ₹5Cr in the old regime, held at 25 % in the new regime.
    """
    rate = 0.0
    for tier in SURCHARGE_TIERS:
        if gross_income > tier.threshold:
            rate = tier.rate

    if regime is TaxRegime.NEW:
        rate = min(rate, NEW_REGIME_SURCHARGE_CAP)

    return round_rupee(tax_after_rebate * rate)


def _build_result(
    tax_input: TaxInput,
    standard_deduction: float,
    total_deductions: float,
    taxable_income: float,
    slab_tax: tuple[float, tuple[TaxSlab, ...]],
    rebate_amount: float,
    tax_after_rebate: float,
    marginal_relief: float = 0.0,
) -> TaxResult:
    """Apply surcharge and cess, then assemble the itemised result."""
    tax_before_rebate, breakdown = slab_tax
    gross = tax_input.annual_gross_income

    surcharge = calculate_surcharge(tax_after_rebate, gross, tax_input.regime)
    cess_amount = round_rupee((tax_after_rebate + surcharge) * CESS_RATE)
    final_tax_payable = round_rupee(tax_after_rebate + surcharge + cess_amount)

    return TaxResult(
        gross_income=gross,
        standard_deduction=standard_deduction,
        total_deductions=total_deductions,
        taxable_income=taxable_income,
        tax_slab_breakdown=breakdown,
        tax_before_rebate=tax_before_rebate,
        rebate_amount=rebate_amount,
        tax_after_rebate=tax_after_rebate,
        surcharge=surcharge,
        cess_amount=cess_amount,
        final_tax_payable=final_tax_payable,
        marginal_relief=marginal_relief if marginal_relief > 0 else None,
    )


def _new_regime_tax(tax_input: TaxInput) -> TaxResult:
    # Only the standard deduction and employer NPS, Section 80CCD(2), count.
    standard_deduction = STANDARD_DEDUCTION_NEW
    total_deductions = standard_deduction + tax_input.deductions.employer_nps
    taxable_income = max(0.0, tax_input.annual_gross_income - total_deductions)

    slab_tax = calculate_tax_from_slabs(taxable_income, NEW_REGIME_SLABS)
    tax_before_rebate = slab_tax[0]

    rebate_amount = tax_before_rebate if taxable_income <= REBATE_THRESHOLD_NEW else 0.0
    tax_after_rebate = max(0.0, tax_before_rebate - rebate_amount)

    # Marginal relief: tax may not exceed the income earned above ₹7L.
    marginal_relief = 0.0
    if taxable_income > REBATE_THRESHOLD_NEW and tax_after_rebate > 0:
        max_tax_allowed = taxable_income - REBATE_THRESHOLD_NEW
        if tax_after_rebate > max_tax_allowed:
            marginal_relief = tax_after_rebate - max_tax_allowed
            tax_after_rebate = max_tax_allowed

    return _build_result(
        tax_input,
        standard_deduction,
        total_deductions,
        taxable_income,
        slab_tax,
        rebate_amount,
        tax_after_rebate,
        marginal_relief,
    )


def _old_regime_tax(tax_input: TaxInput) -> TaxResult:
    deductions = tax_input.deductions
    standard_deduction = STANDARD_DEDUCTION_OLD
    total_deductions = (
        standard_deduction
        + min(deductions.section_80c, SECTION_80C_LIMIT)
        + deductions.section_80d
        + deductions.hra
        + deductions.lta
        + deductions.other_deductions
    )
    taxable_income = max(0.0, tax_input.annual_gross_income - total_deductions)

    slabs = OLD_REGIME_SLABS_BY_AGE[tax_input.age_category]
    slab_tax = calculate_tax_from_slabs(taxable_income, slabs)
    tax_before_rebate = slab_tax[0]

    # No marginal relief in the old regime: ₹5L is a hard cliff.
    rebate_amount = tax_before_rebate if taxable_income <= REBATE_THRESHOLD_OLD else 0.0
    tax_after_rebate = max(0.0, tax_before_rebate - rebate_amount)

    return _build_result(
        tax_input,
        standard_deduction,
        total_deductions,
        taxable_income,
        slab_tax,
        rebate_amount,
        tax_after_rebate,
    )


REGIME_CALCULATORS: dict[TaxRegime, Callable[[TaxInput], TaxResult]] = {
    TaxRegime.NEW: _new_regime_tax,
    TaxRegime.OLD: _old_regime_tax,
}


# ── Public API ────────────────────────────────────────────────────────────

def calculate_income_tax(tax_input: TaxInput) -> TaxResult:
    """Compute the itemised income tax for one regime.

    Raises ``InvalidInputError`` if ``annual_gross_income`` is negative.
    Deduction amounts are assumed to be non-negative and already capped by
    the caller (age-dependent 80D, HRA formula); only 80C is clamped here.
    """
    if tax_input.annual_gross_income < 0:
        raise InvalidInputError("Annual gross income cannot be negative")

    return REGIME_CALCULATORS[tax_input.regime](tax_input)


def get_age_category(age: float) -> AgeCategory:
    """Map an age in years to the old-regime slab category."""
    if age >= SUPER_SENIOR_CITIZEN_AGE:
        return AgeCategory.SUPER_SENIOR
    if age >= SENIOR_CITIZEN_AGE:
        return AgeCategory.SENIOR
    return AgeCategory.BELOW_60
