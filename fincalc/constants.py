"""Statutory figures for FY 2024-25 (AY 2025-26), as announced in the July 2024 Budget.

Every table here is an immutable tuple of named tuples.  Nothing in the
package mutates these values and nothing reads them from the environment;
when the Budget changes, this file changes.

Slab tables are inclusive at both ends and written the way the Income Tax
Act states them: the second bracket of the below-60 old regime table starts
at ₹2,50,001, not ₹2,50,000.  Rates are decimals (0.05, not 5).
"""

from __future__ import annotations

from typing import NamedTuple


class SlabBracket(NamedTuple):
    """One income bracket: ``lower`` to ``upper`` (inclusive) taxed at ``rate``."""
    lower: float
    upper: float
    rate: float


class SurchargeTier(NamedTuple):
    """Surcharge ``rate`` applies once gross income exceeds ``threshold``."""
    threshold: float
    rate: float


# ── Standard deduction ───────────────────────────────────────────────────
STANDARD_DEDUCTION_OLD: int = 50_000
STANDARD_DEDUCTION_NEW: int = 75_000     # raised from ₹50,000 in July 2024

# ── Chapter VI-A ─────────────────────────────────────────────────────────
SECTION_80C_LIMIT: int = 150_000
SECTION_80D_LIMIT_BELOW60: int = 25_000
SECTION_80D_LIMIT_SENIOR: int = 50_000

# ── Health & education cess ──────────────────────────────────────────────
CESS_RATE: float = 0.04

# ── Section 87A rebate (taxable income ceilings) ─────────────────────────
REBATE_THRESHOLD_OLD: int = 500_000
REBATE_THRESHOLD_NEW: int = 700_000

# ── Slab tables ──────────────────────────────────────────────────────────
INFINITY = float("inf")

NEW_REGIME_SLABS: tuple[SlabBracket, ...] = (
    SlabBracket(0,         300_000,   0.00),
    SlabBracket(300_001,   600_000,   0.05),
    SlabBracket(600_001,   900_000,   0.10),
    SlabBracket(900_001,   1_200_000, 0.15),
    SlabBracket(1_200_001, 1_500_000, 0.20),
    SlabBracket(1_500_001, INFINITY,  0.30),
)

OLD_REGIME_SLABS_BELOW60: tuple[SlabBracket, ...] = (
    SlabBracket(0,         250_000,   0.00),
    SlabBracket(250_001,   500_000,   0.05),
    SlabBracket(500_001,   1_000_000, 0.20),
    SlabBracket(1_000_001, INFINITY,  0.30),
)

OLD_REGIME_SLABS_SENIOR: tuple[SlabBracket, ...] = (
    SlabBracket(0,         300_000,   0.00),
    SlabBracket(300_001,   500_000,   0.05),
    SlabBracket(500_001,   1_000_000, 0.20),
    SlabBracket(1_000_001, INFINITY,  0.30),
)

OLD_REGIME_SLABS_SUPER_SENIOR: tuple[SlabBracket, ...] = (
    SlabBracket(0,         500_000,   0.00),
    SlabBracket(500_001,   1_000_000, 0.20),
    SlabBracket(1_000_001, INFINITY,  0.30),
)

# ── Surcharge (tiered on gross income, applied to the whole tax) ─────────
SURCHARGE_TIERS: tuple[SurchargeTier, ...] = (
    SurchargeTier(5_000_000,  0.10),   # ₹50L – ₹1Cr
    SurchargeTier(10_000_000, 0.15),   # ₹1Cr – ₹2Cr
    SurchargeTier(20_000_000, 0.25),   # ₹2Cr – ₹5Cr
    SurchargeTier(50_000_000, 0.37),   # above ₹5Cr, old regime only
)
NEW_REGIME_SURCHARGE_CAP: float = 0.25

# ── Age thresholds ───────────────────────────────────────────────────────
SENIOR_CITIZEN_AGE: int = 60
SUPER_SENIOR_CITIZEN_AGE: int = 80

# ── Provident fund ───────────────────────────────────────────────────────
EPF_EMPLOYEE_PERCENT: float = 0.12
EPF_EMPLOYER_PERCENT: float = 0.12
PF_WAGE_CEILING: int = 15_000            # monthly basic

# ── Professional tax ─────────────────────────────────────────────────────
DEFAULT_PROFESSIONAL_TAX: int = 200      # per month, varies by state

# ── HRA exemption, Section 10(13A) ───────────────────────────────────────
HRA_METRO_PERCENT: float = 0.50
HRA_NON_METRO_PERCENT: float = 0.40
HRA_BASIC_PERCENT: float = 0.10

# ── Gratuity, Section 10(10) ─────────────────────────────────────────────
GRATUITY_FORMULA_MULTIPLIER: int = 15
GRATUITY_DIVISOR: int = 26
GRATUITY_MIN_YEARS: int = 5
GRATUITY_ROUNDING_MONTHS: int = 6
GRATUITY_EXEMPTION_GOVT: int = 2_500_000
GRATUITY_EXEMPTION_PRIVATE: int = 2_000_000

# ── Leave encashment, Section 10(10AA) ───────────────────────────────────
LEAVE_ENCASHMENT_EXEMPTION: int = 2_500_000
