"""
Pydantic schemas for API request/response validation.
"""

from pydantic import BaseModel, Field, field_validator

from naijatax.core.formatting import parse_amount


# ── Tax Schemas ──

class PITCalculateRequest(BaseModel):
    gross_income: float = Field(..., ge=0, allow_inf_nan=False, description="Gross income for the period")
    annual_rent: float = Field(default=0, ge=0, allow_inf_nan=False, description="Rent paid for the same period")
    is_monthly: bool = True
    has_pension: bool = True

    @field_validator("gross_income", "annual_rent", mode="before")
    @classmethod
    def parse_typed_amount(cls, value):
        if isinstance(value, str):
            return parse_amount(value)
        return value


class TaxBandResponse(BaseModel):
    band: str
    rate: float
    taxable_amount: float
    tax_amount: float


class PITCalculateResponse(BaseModel):
    gross_annual_income: float
    rent_relief: float
    pension_deduction: float
    chargeable_income: float
    total_annual_tax: float
    monthly_tax: float
    effective_tax_rate: float
    tax_band_breakdown: list[TaxBandResponse] = []
    explanation: str


class PAYEEstimateResponse(BaseModel):
    monthly_gross: float
    annual_gross: float
    annual_tax: float
    monthly_paye: float
    effective_rate: float


class TaxBandInfo(BaseModel):
    label: str
    width: float | None = Field(None, description="Band width in naira; null for the unbounded top band")
    rate: float
