# Test type: Configuration
# Validation to be executed: Shared fixtures for all test modules
# Command: pytest test/ -v (this file is auto-loaded by pytest)

"""Shared pytest fixtures for the finance calculators test suite."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from fincalc.main import app
from fincalc.models.schemas import AgeCategory, SalaryInput, TaxDeductions, TaxInput


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def client():
    """Async HTTP client bound to the FastAPI app (no real server needed)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


# ── Sample data fixtures ─────────────────────────────────────────────────

@pytest.fixture
def make_tax_input():
    """Factory for engine inputs with below-60 / no-deduction defaults."""

    def _make(gross, regime, age_category=AgeCategory.BELOW_60, **deductions):
        return TaxInput(
            annual_gross_income=gross,
            regime=regime,
            age_category=age_category,
            deductions=TaxDeductions(**deductions),
        )

    return _make


@pytest.fixture
def twelve_lakh_offer():
    """₹12L CTC, basic 50 % of CTC, HRA 40 % of basic, everything else defaulted."""
    return SalaryInput(ctc=1_200_000, basic_percentage=50, hra_percentage=40)


@pytest.fixture
def ten_lakh_offer():
    return SalaryInput(ctc=1_000_000, basic_percentage=50, hra_percentage=40)

