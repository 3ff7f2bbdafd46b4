"""
Personal Income Tax (PIT) Calculator
Based on Nigeria Tax Act 2025, Fourth Schedule — Individuals' Income Tax Rates

Tax Bands (applied to chargeable income, each band absorbs up to its own width):
  (a) First ₦800,000 at 0%
  (b) Next ₦2,200,000 at 15%
  (c) Next ₦9,000,000 at 18%
  (d) Next ₦13,000,000 at 21%
  (e) Next ₦25,000,000 at 23%
  (f) Above ₦50,000,000 at 25%

Deductions:
  - Rent relief: 20% of annual rent paid (max ₦500,000)
  - Pension Reform Act contribution: 8% of gross annual income
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TaxBand:
    threshold: float
    rate: float
    label: str


TAX_BANDS: tuple[TaxBand, ...] = (
    TaxBand(800_000.0, 0.00, "First ₦800,000"),
    TaxBand(2_200_000.0, 0.15, "Next ₦2,200,000"),
    TaxBand(9_000_000.0, 0.18, "Next ₦9,000,000"),
    TaxBand(13_000_000.0, 0.21, "Next ₦13,000,000"),
    TaxBand(25_000_000.0, 0.23, "Next ₦25,000,000"),
    TaxBand(float("inf"), 0.25, "Above ₦50,000,000"),
)

TAX_FREE_THRESHOLD = TAX_BANDS[0].threshold
RENT_RELIEF_RATE = 0.20
RENT_RELIEF_MAX = 500_000.0
PENSION_RATE = 0.08
MONTHS_PER_YEAR = 12


@dataclass(frozen=True)
class TaxInput:
    gross_income: float
    annual_rent: float = 0.0
    is_monthly: bool = False
    has_pension: bool = False


@dataclass(frozen=True)
class TaxBandResult:
    band: str
    rate: float
    taxable_amount: float
    tax_amount: float


@dataclass(frozen=True)
class TaxResult:
    gross_annual_income: float
    rent_relief: float
    pension_deduction: float
    chargeable_income: float
    total_annual_tax: float
    monthly_tax: float
    effective_tax_rate: float
    tax_band_breakdown: tuple[TaxBandResult, ...] = ()


def apportion(
    chargeable_income: float,
    bands: tuple[TaxBand, ...] = TAX_BANDS,
) -> tuple[float, tuple[TaxBandResult, ...]]:
    """
    Spread chargeable income across the bands, lowest first.

    A band's threshold is its width, so each band takes at most that much of
    what is left. The unbounded last band takes everything remaining.
    """
    remaining = chargeable_income
    total_tax = 0.0
    breakdown: list[TaxBandResult] = []

    for band in bands:
        if remaining <= 0:
            break

        capacity = remaining if band.threshold == float("inf") else band.threshold
        taxable_in_band = min(remaining, capacity)
        tax_in_band = taxable_in_band * band.rate

        if taxable_in_band > 0:
            breakdown.append(
                TaxBandResult(
                    band=band.label,
                    rate=band.rate * 100,
                    taxable_amount=taxable_in_band,
                    tax_amount=tax_in_band,
                )
            )

        total_tax += tax_in_band
        remaining -= taxable_in_band

    return total_tax, tuple(breakdown)


class PITCalculator:
    """
    Deterministic Personal Income Tax calculator for Nigerian individuals.
    All calculations follow the Nigeria Tax Act 2025. No rounding is applied;
    amounts are rounded only when displayed.
    """

    def __init__(self, bands: tuple[TaxBand, ...] = TAX_BANDS):
        self.bands = bands

    def calculate(self, tax_input: TaxInput) -> TaxResult:
        if tax_input.is_monthly:
            gross_annual_income = tax_input.gross_income * MONTHS_PER_YEAR
            annual_rent = tax_input.annual_rent * MONTHS_PER_YEAR
        else:
            gross_annual_income = tax_input.gross_income
            annual_rent = tax_input.annual_rent

        rent_relief = min(annual_rent * RENT_RELIEF_RATE, RENT_RELIEF_MAX)
        pension_deduction = gross_annual_income * PENSION_RATE if tax_input.has_pension else 0.0
        chargeable_income = max(gross_annual_income - rent_relief - pension_deduction, 0.0)

        total_tax, breakdown = apportion(chargeable_income, self.bands)
        effective_rate = (
            total_tax / gross_annual_income * 100 if gross_annual_income > 0 else 0.0
        )

        return TaxResult(
            gross_annual_income=gross_annual_income,
            rent_relief=rent_relief,
            pension_deduction=pension_deduction,
            chargeable_income=chargeable_income,
            total_annual_tax=total_tax,
            monthly_tax=total_tax / MONTHS_PER_YEAR,
            effective_tax_rate=effective_rate,
            tax_band_breakdown=breakdown,
        )

    def estimate_monthly_paye(
        self,
        monthly_gross: float,
        monthly_rent: float = 0.0,
        has_pension: bool = True,
    ) -> dict:
        result = self.calculate(
            TaxInput(
                gross_income=monthly_gross,
                annual_rent=monthly_rent,
                is_monthly=True,
                has_pension=has_pension,
            )
        )

        return {
            "monthly_gross": monthly_gross,
            "annual_gross": result.gross_annual_income,
            "annual_tax": round(result.total_annual_tax, 2),
            "monthly_paye": round(result.monthly_tax, 2),
            "effective_rate": round(result.effective_tax_rate, 2),
        }


_default_calculator = PITCalculator()


def calculate_tax(tax_input: TaxInput) -> TaxResult:
    """Compute the 2025 PIT liability for a single set of inputs."""
    return _default_calculator.calculate(tax_input)
