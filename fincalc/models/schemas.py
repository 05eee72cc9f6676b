"""Pydantic models for the tax engine and the HTTP surface.

Python attributes are snake_case; JSON uses camelCase through aliases, so
``TaxResult.final_tax_payable`` serialises as ``finalTaxPayable``.

The engine models (``TaxDeductions``, ``TaxInput``, ``TaxSlab``,
``TaxResult``) are frozen and carry no range constraints: the engine accepts
whatever numbers it is given.  Range checks belong to the request models
further down, which are what FastAPI validates.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase JSON."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FrozenCamelModel(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )


class TaxRegime(str, Enum):
    OLD = "OLD"
    NEW = "NEW"


class AgeCategory(str, Enum):
    """Old-regime slab table selector."""
    BELOW_60 = "below60"
    SENIOR = "senior"               # 60 – 79
    SUPER_SENIOR = "superSenior"    # 80 and above


class CityType(str, Enum):
    METRO = "metro"
    NON_METRO = "non-metro"


# ── 1. Tax engine ────────────────────────────────────────────────────────

class TaxDeductions(FrozenCamelModel):
    """Deduction amounts claimed by the taxpayer (annual, INR).

    Preconditions the engine does not check: amounts are non-negative and
    the age-dependent 80D cap and the HRA formula have already been
    applied.  Only ``section_80c`` is clamped inside the engine.
    """
    section_80c: float = Field(0.0, alias="section80C")
    section_80d: float = Field(0.0, alias="section80D")
    hra: float = 0.0
    lta: float = 0.0
    other_deductions: float = 0.0
    employer_nps: float = Field(0.0, alias="employerNPS", description="Section 80CCD(2)")


class TaxInput(FrozenCamelModel):
    annual_gross_income: float = Field(..., description="Annual gross income in INR")
    regime: TaxRegime
    age_category: AgeCategory = AgeCategory.BELOW_60
    deductions: TaxDeductions = Field(default_factory=TaxDeductions)


class TaxSlab(FrozenCamelModel):
    """Portion of taxable income falling in one bracket."""
    from_: float = Field(..., alias="from")
    to: float
    rate_percent: float = Field(..., description="Bracket rate as a percentage (5, not 0.05)")
    tax: float = Field(..., description="Tax contributed by this bracket, rounded to the rupee")


class TaxResult(FrozenCamelModel):
    """Itemised tax computation for one regime."""
    gross_income: float
    standard_deduction: float
    total_deductions: float
    taxable_income: float
    tax_slab_breakdown: tuple[TaxSlab, ...]
    tax_before_rebate: float
    rebate_amount: float
    tax_after_rebate: float
    surcharge: float
    cess_amount: float
    final_tax_payable: float
    marginal_relief: Optional[float] = Field(
        None, description="New regime only; set when tax was capped at income above ₹7L"
    )


# ── 2. Request-side validation  (the calling layer) ──────────────────────

class DeductionsPayload(TaxDeductions):
    """Deductions as received over HTTP; negative amounts are rejected here."""

    @field_validator("*")
    @classmethod
    def _non_negative(cls, value: float) -> float:
        if value < 0:
            raise ValueError("Deduction amounts cannot be negative")
        return value


class TaxCalculateRequest(TaxInput):
    """``TaxInput`` with validated deductions.

    Gross income is left unconstrained so that the engine's own
    ``InvalidInputError`` is what reports a negative value.
    """
    deductions: DeductionsPayload = Field(default_factory=DeductionsPayload)


class AgeCategoryResponse(CamelModel):
    age: int
    age_category: AgeCategory


# ── 3. Regime comparison  (/tax:compare) ─────────────────────────────────

class CompareRegimesRequest(CamelModel):
    annual_gross_income: float = Field(..., description="Annual gross income in INR")
    age_category: AgeCategory = AgeCategory.BELOW_60
    deductions: DeductionsPayload = Field(default_factory=DeductionsPayload)


class RegimeComparison(CamelModel):
    old_regime: TaxResult
    new_regime: TaxResult
    recommended_regime: TaxRegime
    savings: float = Field(..., description="Tax saved by choosing the recommended regime")
    take_home_old: float
    take_home_new: float


# ── 4. Salary breakdown  (/salary:in-hand, /salary:compare-offers) ───────

class SalaryInput(CamelModel):
    ctc: float = Field(..., ge=0, description="Annual cost to company")
    basic_percentage: float = Field(..., ge=0, le=100, description="Basic as % of CTC")
    hra_percentage: float = Field(..., ge=0, le=100, description="HRA as % of basic")
    special_allowance: Optional[float] = Field(
        None, ge=0, description="Annual special allowance (derived from CTC when omitted)"
    )
    variable_pay: float = Field(0.0, ge=0)
    variable_pay_realization: Optional[float] = Field(
        None, ge=0, le=100, description="Expected % of variable pay paid out (default 100)"
    )
    professional_tax: Optional[float] = Field(None, ge=0, description="Monthly, default ₹200")
    voluntary_pf: bool = Field(False, alias="voluntaryPF", description="PF on full basic, no ₹15,000 ceiling")
    ctc_includes_employer_pf: bool = Field(False, alias="ctcIncludesEmployerPF")
    age_category: AgeCategory = AgeCategory.BELOW_60
    tax_regime: TaxRegime = TaxRegime.NEW
    section_80c: float = Field(0.0, ge=0, alias="section80C")
    section_80d: float = Field(0.0, ge=0, alias="section80D")
    hra_exemption: float = Field(0.0, ge=0, description="Manual HRA exemption (annual)")
    other_deductions: float = Field(0.0, ge=0, description="Annual")
    city_type: Optional[CityType] = None
    rent_paid: Optional[float] = Field(None, ge=0, description="Monthly rent")


class SalaryResult(CamelModel):
    monthly_basic: float
    monthly_hra: float
    monthly_special_allowance: float
    monthly_gross: float
    annual_gross: float
    variable_pay_realized: float

    monthly_employee_pf: float = Field(..., alias="monthlyEmployeePF")
    monthly_employer_pf: float = Field(..., alias="monthlyEmployerPF")
    monthly_professional_tax: float
    monthly_total_deductions: float
    annual_total_deductions: float

    income_for_tax: float = Field(..., description="Amount handed to the tax engine as gross income")
    hra_exemption: float
    tax_result_new: TaxResult
    tax_result_old: TaxResult

    monthly_in_hand_new: float
    monthly_in_hand_old: float
    annual_in_hand_new: float
    annual_in_hand_old: float

    tax_saved_by_switching: float
    recommended_regime: TaxRegime


class CompareOffersRequest(CamelModel):
    offer_a: SalaryInput
    offer_b: SalaryInput


class OfferSnapshot(CamelModel):
    ctc: float
    variable_pay_realized: float
    monthly_gross: float
    monthly_deductions: float
    monthly_tax: float
    monthly_in_hand: float
    annual_in_hand: float


class OfferComparison(CamelModel):
    offer_a: SalaryResult
    offer_b: SalaryResult
    better_offer: Literal["A", "B"]
    monthly_difference: float
    annual_difference: float
    monthly_in_hand_a: float
    monthly_in_hand_b: float
    recommendation: str
    side_by_side: dict[str, OfferSnapshot] = Field(
        ..., description="Keys 'offerA' and 'offerB'"
    )


# ── 5. Retirement benefits  (/retirement:*) ──────────────────────────────

class GratuityRequest(CamelModel):
    last_drawn_salary: float = Field(..., ge=0, description="Monthly basic + DA")
    years_of_service: float = Field(..., ge=0)
    months_of_service: int = Field(0, ge=0, le=11, description="Months served beyond the last full year")
    is_government_employee: bool = False


class GratuityResult(CamelModel):
    eligible_years: float
    gratuity_amount: float
    tax_exempt_amount: float
    taxable_amount: float
    is_eligible: bool = Field(..., description="More than 5 years of continuous service")


class LeaveEncashmentRequest(CamelModel):
    amount: float = Field(..., ge=0)


class LeaveEncashmentResult(CamelModel):
    leave_encashment_amount: float
    tax_exempt_amount: float
    taxable_amount: float
