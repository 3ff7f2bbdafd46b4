"""
Tax calculation API routes.
Exposes the 2025 PIT calculator via REST endpoints.
"""

import logging
import math
from dataclasses import asdict

from fastapi import APIRouter, Query

from naijatax.schemas.schemas import (
    PAYEEstimateResponse,
    PITCalculateRequest,
    PITCalculateResponse,
    TaxBandInfo,
)
from naijatax.core.explanation import generate_explanation
from naijatax.core.tax_rules.pit import PITCalculator, TaxInput

router = APIRouter()

# prepare logging handler for this file
logger = logging.getLogger(__name__)

pit_calc = PITCalculator()


@router.post("/pit/calculate", response_model=PITCalculateResponse)
async def calculate_pit(data: PITCalculateRequest):
    """Calculate Personal Income Tax based on Nigeria Tax Act 2025."""
    tax_input = TaxInput(
        gross_income=data.gross_income,
        annual_rent=data.annual_rent,
        is_monthly=data.is_monthly,
        has_pension=data.has_pension,
    )
    result = pit_calc.calculate(tax_input)
    logger.info(
        f"PIT calculated ({'monthly' if data.is_monthly else 'annual'} input): "
        f"gross annual {result.gross_annual_income:,.2f}, tax {result.total_annual_tax:,.2f}"
    )

    return {
        **asdict(result),
        "explanation": generate_explanation(tax_input, result),
    }


@router.get("/paye/estimate", response_model=PAYEEstimateResponse)
async def estimate_paye(
    monthly_gross: float = Query(..., ge=0, allow_inf_nan=False),
    monthly_rent: float = Query(0, ge=0, allow_inf_nan=False),
    has_pension: bool = True,
):
    """Estimate monthly PAYE deduction from salary."""
    result = pit_calc.estimate_monthly_paye(monthly_gross, monthly_rent, has_pension)
    logger.info(f"PAYE estimated: monthly gross {monthly_gross:,.2f}, PAYE {result['monthly_paye']:,.2f}")
    return result


@router.get("/bands", response_model=list[TaxBandInfo])
async def list_tax_bands():
    """List the 2025 PIT bands in the order they are applied."""
    return [
        TaxBandInfo(
            label=band.label,
            width=None if math.isinf(band.threshold) else band.threshold,
            rate=round(band.rate * 100, 2),
        )
        for band in pit_calc.bands
    ]
