# Test type: Unit Test
# Validation to be executed: Validates FY 2024-25 income-tax computation —
#   slab accumulation, 87A rebate, new-regime marginal relief, tiered
#   surcharge with regime caps, cess, and the age-category mapping.
# Command: pytest test/test_unit_tax.py -v

"""Unit tests for fincalc.services.tax_service module."""

import pytest

from fincalc.constants import (
    NEW_REGIME_SLABS,
    OLD_REGIME_SLABS_BELOW60,
    OLD_REGIME_SLABS_SUPER_SENIOR,
    STANDARD_DEDUCTION_NEW,
    STANDARD_DEDUCTION_OLD,
)
from fincalc.models.schemas import AgeCategory, TaxRegime
from fincalc.services.tax_service import (
    OLD_REGIME_SLABS_BY_AGE,
    REGIME_CALCULATORS,
    InvalidInputError,
    calculate_income_tax,
    calculate_surcharge,
    calculate_tax_from_slabs,
    get_age_category,
)

NEW = TaxRegime.NEW
OLD = TaxRegime.OLD


class TestReferenceScenarios:
    """Literal scenarios that must reproduce exactly."""

    def test_new_7L_gross_fully_rebated(self, make_tax_input):
        """₹7L gross → taxable ₹6.25L → rebate wipes the ₹17,500 slab tax."""
        result = calculate_income_tax(make_tax_input(700_000, NEW))
        assert result.taxable_income == 625_000
        assert result.tax_before_rebate == 17_500
        assert result.rebate_amount == 17_500
        assert result.final_tax_payable == 0

    def test_new_taxable_exactly_7L(self, make_tax_input):
        """₹7.75L gross → taxable ₹7L, still inside the rebate."""
        result = calculate_income_tax(make_tax_input(775_000, NEW))
        assert result.taxable_income == 700_000
        assert result.rebate_amount > 0
        assert result.final_tax_payable == 0

    def test_new_taxable_just_above_7L_marginal_relief(self, make_tax_input):
        """Taxable ₹7,00,100: slab tax ₹25,010 capped at the ₹100 above ₹7L."""
        result = calculate_income_tax(make_tax_input(775_100, NEW))
        assert result.taxable_income == 700_100
        assert result.tax_before_rebate == 25_010
        assert result.rebate_amount == 0
        assert result.tax_after_rebate == 100
        assert result.marginal_relief == 24_910
        assert result.tax_after_rebate + result.surcharge <= 150
        assert result.cess_amount == 4
        assert result.final_tax_payable == 104

    def test_old_taxable_exactly_5L(self, make_tax_input):
        result = calculate_income_tax(make_tax_input(550_000, OLD))
        assert result.taxable_income == 500_000
        assert result.rebate_amount == 12_500
        assert result.final_tax_payable == 0

    def test_old_51L_ten_percent_surcharge(self, make_tax_input):
        """Taxable ₹50.5L: 12,500 + 1,00,000 + 30 % of ₹40.5L = ₹13,27,500."""
        result = calculate_income_tax(make_tax_input(5_100_000, OLD))
        assert result.taxable_income == 5_050_000
        assert result.tax_after_rebate == 1_327_500
        assert result.surcharge == pytest.approx(132_750, abs=1_000)
        assert result.surcharge == 132_750
        assert result.cess_amount == 58_410
        assert result.final_tax_payable == 1_518_660

    def test_old_standard_deduction(self, make_tax_input):
        result = calculate_income_tax(make_tax_input(1_000_000, OLD))
        assert result.standard_deduction == 50_000
        assert result.taxable_income == 950_000
        assert result.tax_before_rebate == 102_500
        assert result.final_tax_payable == 106_600

    def test_new_standard_deduction(self, make_tax_input):
        result = calculate_income_tax(make_tax_input(1_000_000, NEW))
        assert result.standard_deduction == 75_000
        assert result.taxable_income == 925_000
        assert result.tax_before_rebate == 48_750
        assert result.marginal_relief is None
        assert result.final_tax_payable == 50_700


class TestSlabAccumulator:
    """Inclusive brackets, ascending breakdown, half-up rounding."""

    def test_zero_income_empty_breakdown(self):
        assert calculate_tax_from_slabs(0, NEW_REGIME_SLABS) == (0, ())

    def test_breakdown_stops_at_income(self):
        total, breakdown = calculate_tax_from_slabs(925_000, NEW_REGIME_SLABS)
        assert total == 48_750
        assert [(s.from_, s.to, s.rate_percent, s.tax) for s in breakdown] == [
            (0, 300_000, 0, 0),
            (300_001, 600_000, 5, 15_000),
            (600_001, 900_000, 10, 30_000),
            (900_001, 925_000, 15, 3_750),
        ]

    def test_income_on_bracket_boundary_emits_no_next_bracket(self):
        _, breakdown = calculate_tax_from_slabs(500_000, OLD_REGIME_SLABS_BELOW60)
        assert len(breakdown) == 2
        assert breakdown[-1].to == 500_000
        assert breakdown[-1].tax == 12_500

    def test_income_equal_to_lower_bound_does_not_reach_bracket(self):
        total, breakdown = calculate_tax_from_slabs(500_001, OLD_REGIME_SLABS_BELOW60)
        assert len(breakdown) == 2
        assert total == 12_500

    def test_second_rupee_of_next_bracket(self):
        total, breakdown = calculate_tax_from_slabs(500_002, OLD_REGIME_SLABS_BELOW60)
        assert len(breakdown) == 3
        assert breakdown[-1].from_ == 500_001
        assert breakdown[-1].to == 500_002
        assert total == 12_500  # 12,500 + 0.40 rounds back down

    def test_top_bracket_is_open_ended(self):
        _, breakdown = calculate_tax_from_slabs(2_000_000, NEW_REGIME_SLABS)
        assert breakdown[-1].from_ == 1_500_001
        assert breakdown[-1].to == 2_000_000
        assert breakdown[-1].rate_percent == 30

    def test_half_rupee_rounds_up(self):
        """Ten rupees at 5 % is ₹0.50; rounds to ₹1, not to the even ₹0."""
        total, breakdown = calculate_tax_from_slabs(300_010, NEW_REGIME_SLABS)
        assert breakdown[-1].tax == 1
        assert total == 1

    def test_fractional_income_below_next_bracket(self):
        total, breakdown = calculate_tax_from_slabs(300_000.5, NEW_REGIME_SLABS)
        assert total == 0
        assert len(breakdown) == 1
        assert breakdown[0].to == 300_000

    def test_super_senior_has_no_five_percent_band(self):
        _, breakdown = calculate_tax_from_slabs(1_200_000, OLD_REGIME_SLABS_SUPER_SENIOR)
        assert [s.rate_percent for s in breakdown] == [0, 20, 30]

    def test_breakdown_sums_to_total(self):
        total, breakdown = calculate_tax_from_slabs(1_876_543, NEW_REGIME_SLABS)
        assert abs(sum(s.tax for s in breakdown) - total) <= len(breakdown) * 0.5


class TestRebateAndMarginalRelief:

    def test_old_regime_cliff_is_not_smoothed(self, make_tax_input):
        """Taxable ₹5,00,100 pays the full ₹12,520 slab tax plus cess."""
        result = calculate_income_tax(make_tax_input(550_100, OLD))
        assert result.taxable_income == 500_100
        assert result.rebate_amount == 0
        assert result.tax_after_rebate == 12_520
        assert result.marginal_relief is None

    def test_marginal_relief_last_rupee(self, make_tax_input):
        """Relief stops where slab tax meets income above ₹7L (≈ ₹7,27,778)."""
        capped = calculate_income_tax(make_tax_input(STANDARD_DEDUCTION_NEW + 727_777, NEW))
        assert capped.tax_after_rebate == 27_777
        assert capped.marginal_relief == 1

        uncapped = calculate_income_tax(make_tax_input(STANDARD_DEDUCTION_NEW + 727_778, NEW))
        assert uncapped.tax_after_rebate == 27_778
        assert uncapped.marginal_relief is None

    @pytest.mark.parametrize("taxable", range(700_001, 730_001, 997))
    def test_tax_never_exceeds_income_above_threshold(self, make_tax_input, taxable):
        result = calculate_income_tax(make_tax_input(STANDARD_DEDUCTION_NEW + taxable, NEW))
        assert result.tax_after_rebate <= taxable - 700_000
        assert result.final_tax_payable >= 0

    def test_senior_rebate(self, make_tax_input):
        result = calculate_income_tax(make_tax_input(400_000, OLD, AgeCategory.SENIOR))
        assert result.tax_before_rebate == 2_500
        assert result.final_tax_payable == 0


class TestAgeCategorySlabs:
    """Same ₹10L taxable income across the three old-regime tables."""

    @pytest.mark.parametrize(
        "category, slab_tax, final",
        [
            (AgeCategory.BELOW_60, 112_500, 117_000),
            (AgeCategory.SENIOR, 110_000, 114_400),
            (AgeCategory.SUPER_SENIOR, 100_000, 104_000),
        ],
    )
    def test_old_regime_by_age(self, make_tax_input, category, slab_tax, final):
        result = calculate_income_tax(make_tax_input(1_050_000, OLD, category))
        assert result.taxable_income == 1_000_000
        assert result.tax_before_rebate == slab_tax
        assert result.final_tax_payable == final

    def test_new_regime_ignores_age(self, make_tax_input):
        results = {
            calculate_income_tax(make_tax_input(1_500_000, NEW, category)).final_tax_payable
            for category in AgeCategory
        }
        assert len(results) == 1

    def test_every_category_has_a_table(self):
        assert set(OLD_REGIME_SLABS_BY_AGE) == set(AgeCategory)

    def test_every_regime_has_a_calculator(self):
        assert set(REGIME_CALCULATORS) == set(TaxRegime)


class TestDeductions:

    def test_80c_clamped_to_limit(self, make_tax_input):
        result = calculate_income_tax(make_tax_input(1_000_000, OLD, section_80c=200_000))
        assert result.total_deductions == STANDARD_DEDUCTION_OLD + 150_000
        assert result.taxable_income == 800_000

    def test_old_regime_sums_all_fields(self, make_tax_input):
        result = calculate_income_tax(
            make_tax_input(
                1_500_000, OLD,
                section_80c=100_000, section_80d=25_000, hra=120_000,
                lta=30_000, other_deductions=10_000, employer_nps=40_000,
            )
        )
        assert result.total_deductions == 50_000 + 100_000 + 25_000 + 120_000 + 30_000 + 10_000

    def test_new_regime_only_honours_employer_nps(self, make_tax_input):
        result = calculate_income_tax(
            make_tax_input(
                1_500_000, NEW,
                section_80c=150_000, section_80d=25_000, hra=120_000, employer_nps=50_000,
            )
        )
        assert result.total_deductions == STANDARD_DEDUCTION_NEW + 50_000
        assert result.taxable_income == 1_375_000

    def test_deductions_above_income_floor_at_zero(self, make_tax_input):
        result = calculate_income_tax(make_tax_input(40_000, OLD, section_80d=25_000))
        assert result.taxable_income == 0
        assert result.tax_slab_breakdown == ()
        assert result.final_tax_payable == 0

    def test_zero_income(self, make_tax_input):
        for regime in TaxRegime:
            result = calculate_income_tax(make_tax_input(0, regime))
            assert result.taxable_income == 0
            assert result.final_tax_payable == 0


class TestSurcharge:
    """Tier picked by gross income, applied to the whole tax."""

    @pytest.mark.parametrize(
        "gross, regime, expected",
        [
            (5_000_000, OLD, 0),
            (5_000_001, OLD, 10_000),
            (10_000_000, OLD, 10_000),
            (10_000_001, NEW, 15_000),
            (20_000_000, OLD, 15_000),
            (30_000_000, NEW, 25_000),
            (50_000_000, OLD, 25_000),
            (50_000_001, OLD, 37_000),
            (50_000_001, NEW, 25_000),
        ],
    )
    def test_tiers(self, gross, regime, expected):
        assert calculate_surcharge(100_000, gross, regime) == expected

    def test_no_surcharge_at_or_below_50L(self, make_tax_input):
        for regime in TaxRegime:
            assert calculate_income_tax(make_tax_input(5_000_000, regime)).surcharge == 0

    def test_new_regime_capped_at_25_percent_above_5Cr(self, make_tax_input):
        result = calculate_income_tax(make_tax_input(60_000_000, NEW))
        assert result.tax_after_rebate == 17_677_500
        assert result.surcharge == 4_419_375

    def test_old_regime_reaches_37_percent_above_5Cr(self, make_tax_input):
        result = calculate_income_tax(make_tax_input(60_000_000, OLD))
        assert result.tax_after_rebate == 17_797_500
        assert result.surcharge == 6_585_075

    def test_cess_on_tax_plus_surcharge(self, make_tax_input):
        result = calculate_income_tax(make_tax_input(60_000_000, OLD))
        assert result.cess_amount == round((17_797_500 + 6_585_075) * 0.04)
        assert result.final_tax_payable == (
            result.tax_after_rebate + result.surcharge + result.cess_amount
        )


class TestValidationAndPurity:

    def test_negative_income_raises(self, make_tax_input):
        with pytest.raises(InvalidInputError, match="cannot be negative"):
            calculate_income_tax(make_tax_input(-1, NEW))

    def test_invalid_input_is_a_value_error(self):
        assert issubclass(InvalidInputError, ValueError)

    def test_same_input_same_output(self, make_tax_input):
        tax_input = make_tax_input(2_345_678, OLD, section_80c=90_000)
        assert calculate_income_tax(tax_input) == calculate_income_tax(tax_input)

    def test_input_left_untouched(self, make_tax_input):
        tax_input = make_tax_input(1_000_000, OLD, section_80c=500_000)
        before = tax_input.model_dump()
        calculate_income_tax(tax_input)
        assert tax_input.model_dump() == before


class TestGetAgeCategory:

    @pytest.mark.parametrize(
        "age, expected",
        [
            (0, AgeCategory.BELOW_60),
            (59, AgeCategory.BELOW_60),
            (60, AgeCategory.SENIOR),
            (79, AgeCategory.SENIOR),
            (80, AgeCategory.SUPER_SENIOR),
            (101, AgeCategory.SUPER_SENIOR),
        ],
    )
    def test_boundaries(self, age, expected):
        assert get_age_category(age) is expected
