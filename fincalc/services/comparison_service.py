"""Old-vs-new regime comparison on the same income and deductions."""

from __future__ import annotations

from typing import Optional

from fincalc.models.schemas import (
    AgeCategory,
    RegimeComparison,
    TaxDeductions,
    TaxInput,
    TaxRegime,
)
from fincalc.services.tax_service import calculate_income_tax


def compare_regimes(
    annual_gross_income: float,
    age_category: AgeCategory = AgeCategory.BELOW_60,
    deductions: Optional[TaxDeductions] = None,
) -> RegimeComparison:
    """Run the engine once per regime and recommend the cheaper one.

    The same deductions go to both runs; the new regime simply ignores the
    ones it does not allow.  On a tie the old regime is recommended.
    """
    deductions = deductions or TaxDeductions()

    old = calculate_income_tax(
        TaxInput(
            annual_gross_income=annual_gross_income,
            regime=TaxRegime.OLD,
            age_category=age_category,
            deductions=deductions,
        )
    )
    new = calculate_income_tax(
        TaxInput(
            annual_gross_income=annual_gross_income,
            regime=TaxRegime.NEW,
            age_category=age_category,
            deductions=deductions,
        )
    )

    recommended = (
        TaxRegime.NEW if new.final_tax_payable < old.final_tax_payable else TaxRegime.OLD
    )

    return RegimeComparison(
        old_regime=old,
        new_regime=new,
        recommended_regime=recommended,
        savings=abs(old.final_tax_payable - new.final_tax_payable),
        take_home_old=annual_gross_income - old.final_tax_payable,
        take_home_new=annual_gross_income - new.final_tax_payable,
    )
