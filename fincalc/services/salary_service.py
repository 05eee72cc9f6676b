"""Salary breakdown: CTC → monthly in-hand under both regimes, and offer comparison.

Payroll deductions (employee PF, professional tax, other deductions) come
off the CTC before the tax engine sees it; the engine then applies its own
standard deduction and regime rules. Payroll deductions larger than the CTC
leave a negative taxable income, which the engine rejects.

PF is 12 % of monthly basic, with basic capped at the ₹15,000 wage ceiling
unless the employee has opted for voluntary PF on full basic.
"""

from __future__ import annotations

from fincalc.constants import (
    DEFAULT_PROFESSIONAL_TAX,
    EPF_EMPLOYEE_PERCENT,
    EPF_EMPLOYER_PERCENT,
    HRA_BASIC_PERCENT,
    HRA_METRO_PERCENT,
    HRA_NON_METRO_PERCENT,
    PF_WAGE_CEILING,
)
from fincalc.models.schemas import (
    CityType,
    OfferComparison,
    OfferSnapshot,
    SalaryInput,
    SalaryResult,
    TaxDeductions,
    TaxInput,
    TaxRegime,
)
from fincalc.services.tax_service import calculate_income_tax
from fincalc.utils.helpers import format_inr, round_currency, round_rupee


def calculate_hra_exemption(
    basic_salary: float,
    hra_received: float,
    rent_paid: float,
    city_type: CityType = CityType.METRO,
) -> float:
    """HRA exemption under Section 10(13A); all amounts annual.

    Least of: HRA received, rent paid minus 10 % of basic, and 50 % (metro)
    or 40 % (non-metro) of basic.
    """
    if basic_salary <= 0 or hra_received <= 0 or rent_paid <= 0:
        return 0.0

    excess_rent = max(0.0, rent_paid - basic_salary * HRA_BASIC_PERCENT)
    basic_share = basic_salary * (
        HRA_METRO_PERCENT if city_type is CityType.METRO else HRA_NON_METRO_PERCENT
    )
    return min(hra_received, excess_rent, basic_share)


def _provident_fund(monthly_basic: float, percent: float, voluntary: bool) -> float:
    base = monthly_basic if voluntary else min(monthly_basic, PF_WAGE_CEILING)
    return round_rupee(base * percent)


def calculate_in_hand_salary(salary: SalaryInput) -> SalaryResult:
    """Monthly and annual take-home under both regimes for one CTC."""
    realization = (
        100.0 if salary.variable_pay_realization is None else salary.variable_pay_realization
    )
    variable_pay_realized = salary.variable_pay * realization / 100

    annual_basic = salary.ctc * salary.basic_percentage / 100
    annual_hra = annual_basic * salary.hra_percentage / 100
    if salary.special_allowance is not None:
        annual_special = salary.special_allowance
    else:
        annual_special = max(0.0, salary.ctc - annual_basic - annual_hra - salary.variable_pay)

    monthly_basic = annual_basic / 12
    monthly_gross = (annual_basic + annual_hra + annual_special + variable_pay_realized) / 12

    monthly_employee_pf = _provident_fund(monthly_basic, EPF_EMPLOYEE_PERCENT, salary.voluntary_pf)
    monthly_employer_pf = _provident_fund(monthly_basic, EPF_EMPLOYER_PERCENT, salary.voluntary_pf)

    # Employer PF bundled into the CTC never reaches the employee.
    annual_gross = salary.ctc
    if salary.ctc_includes_employer_pf:
        annual_gross -= monthly_employer_pf * 12

    monthly_professional_tax = (
        DEFAULT_PROFESSIONAL_TAX if salary.professional_tax is None else salary.professional_tax
    )
    monthly_total_deductions = (
        monthly_employee_pf + monthly_professional_tax + salary.other_deductions / 12
    )
    annual_total_deductions = monthly_total_deductions * 12
    income_for_tax = annual_gross - annual_total_deductions

    if salary.tax_regime is TaxRegime.OLD and salary.city_type and salary.rent_paid:
        hra_exemption = calculate_hra_exemption(
            annual_basic, annual_hra, salary.rent_paid * 12, salary.city_type
        )
    else:
        hra_exemption = salary.hra_exemption

    tax_new = calculate_income_tax(
        TaxInput(
            annual_gross_income=income_for_tax,
            regime=TaxRegime.NEW,
            age_category=salary.age_category,
        )
    )
    tax_old = calculate_income_tax(
        TaxInput(
            annual_gross_income=income_for_tax,
            regime=TaxRegime.OLD,
            age_category=salary.age_category,
            deductions=TaxDeductions(
                section_80c=salary.section_80c,
                section_80d=salary.section_80d,
                hra=hra_exemption,
                other_deductions=salary.other_deductions,
            ),
        )
    )

    monthly_in_hand_new = monthly_gross - monthly_total_deductions - tax_new.final_tax_payable / 12
    monthly_in_hand_old = monthly_gross - monthly_total_deductions - tax_old.final_tax_payable / 12

    recommended = (
        TaxRegime.NEW
        if tax_new.final_tax_payable < tax_old.final_tax_payable
        else TaxRegime.OLD
    )

    return SalaryResult(
        monthly_basic=round_currency(monthly_basic),
        monthly_hra=round_currency(annual_hra / 12),
        monthly_special_allowance=round_currency(annual_special / 12),
        monthly_gross=round_currency(monthly_gross),
        annual_gross=round_currency(annual_gross),
        variable_pay_realized=round_currency(variable_pay_realized),
        monthly_employee_pf=monthly_employee_pf,
        monthly_employer_pf=monthly_employer_pf,
        monthly_professional_tax=monthly_professional_tax,
        monthly_total_deductions=round_currency(monthly_total_deductions),
        annual_total_deductions=round_currency(annual_total_deductions),
        income_for_tax=round_currency(income_for_tax),
        hra_exemption=round_currency(hra_exemption),
        tax_result_new=tax_new,
        tax_result_old=tax_old,
        monthly_in_hand_new=round_currency(monthly_in_hand_new),
        monthly_in_hand_old=round_currency(monthly_in_hand_old),
        annual_in_hand_new=round_currency(monthly_in_hand_new * 12),
        annual_in_hand_old=round_currency(monthly_in_hand_old * 12),
        tax_saved_by_switching=abs(tax_new.final_tax_payable - tax_old.final_tax_payable),
        recommended_regime=recommended,
    )


def _snapshot(offer: SalaryInput, result: SalaryResult) -> OfferSnapshot:
    return OfferSnapshot(
        ctc=offer.ctc,
        variable_pay_realized=result.variable_pay_realized,
        monthly_gross=result.monthly_gross,
        monthly_deductions=result.monthly_total_deductions,
        monthly_tax=round_currency(result.tax_result_new.final_tax_payable / 12),
        monthly_in_hand=result.monthly_in_hand_new,
        annual_in_hand=result.annual_in_hand_new,
    )


def compare_offers(offer_a: SalaryInput, offer_b: SalaryInput) -> OfferComparison:
    """Compare two offers by monthly in-hand pay under the new regime.

    Offer B wins ties.
    """
    result_a = calculate_in_hand_salary(offer_a.model_copy(update={"tax_regime": TaxRegime.NEW}))
    result_b = calculate_in_hand_salary(offer_b.model_copy(update={"tax_regime": TaxRegime.NEW}))

    in_hand_a = result_a.monthly_in_hand_new
    in_hand_b = result_b.monthly_in_hand_new
    better = "A" if in_hand_a > in_hand_b else "B"

    monthly_difference = round_currency(abs(in_hand_a - in_hand_b))
    annual_difference = round_currency(abs(result_a.annual_in_hand_new - result_b.annual_in_hand_new))

    return OfferComparison(
        offer_a=result_a,
        offer_b=result_b,
        better_offer=better,
        monthly_difference=monthly_difference,
        annual_difference=annual_difference,
        monthly_in_hand_a=in_hand_a,
        monthly_in_hand_b=in_hand_b,
        recommendation=(
            f"Offer {better} pays {format_inr(monthly_difference)} more monthly "
            f"in-hand ({format_inr(annual_difference)} annually)"
        ),
        side_by_side={
            "offerA": _snapshot(offer_a, result_a),
            "offerB": _snapshot(offer_b, result_b),
        },
    )
