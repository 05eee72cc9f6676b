# Test type: Unit Test
# Validation to be executed: Validates the old-vs-new regime comparison:
#   recommendation, savings, take-home, and tie handling.
# Command: pytest test/test_unit_comparison.py -v

"""Unit tests for fincalc.services.comparison_service module."""

import pytest

from fincalc.models.schemas import AgeCategory, TaxDeductions, TaxRegime
from fincalc.services.comparison_service import compare_regimes
from fincalc.services.tax_service import InvalidInputError


class TestCompareRegimes:

    def test_new_regime_cheaper_without_deductions(self):
        """₹10L, no deductions: old ₹1,06,600 vs new ₹50,700."""
        result = compare_regimes(1_000_000)
        assert result.old_regime.final_tax_payable == 106_600
        assert result.new_regime.final_tax_payable == 50_700
        assert result.recommended_regime is TaxRegime.NEW
        assert result.savings == 55_900
        assert result.take_home_new == 949_300

    def test_old_regime_cheaper_with_heavy_deductions(self):
        """₹10L with 80C + 80D + HRA: old taxable ₹5.75L → ₹28,600."""
        deductions = TaxDeductions(section_80c=150_000, section_80d=25_000, hra=200_000)
        result = compare_regimes(1_000_000, deductions=deductions)
        assert result.old_regime.taxable_income == 575_000
        assert result.old_regime.final_tax_payable == 28_600
        assert result.recommended_regime is TaxRegime.OLD
        assert result.savings == 22_100

    def test_new_regime_ignores_old_only_deductions(self):
        deductions = TaxDeductions(section_80c=150_000, hra=200_000)
        with_deductions = compare_regimes(1_000_000, deductions=deductions)
        without = compare_regimes(1_000_000)
        assert with_deductions.new_regime == without.new_regime

    def test_tie_recommends_old(self):
        result = compare_regimes(500_000)
        assert result.old_regime.final_tax_payable == 0
        assert result.new_regime.final_tax_payable == 0
        assert result.recommended_regime is TaxRegime.OLD
        assert result.savings == 0

    def test_age_category_only_affects_old_regime(self):
        below = compare_regimes(1_050_000, AgeCategory.BELOW_60)
        super_senior = compare_regimes(1_050_000, AgeCategory.SUPER_SENIOR)
        assert below.new_regime == super_senior.new_regime
        assert super_senior.old_regime.final_tax_payable < below.old_regime.final_tax_payable

    def test_negative_income_propagates(self):
        with pytest.raises(InvalidInputError):
            compare_regimes(-10)
