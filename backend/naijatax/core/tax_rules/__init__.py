from naijatax.core.tax_rules.pit import (
    PITCalculator,
    TaxBand,
    TaxBandResult,
    TaxInput,
    TaxResult,
    TAX_BANDS,
    apportion,
    calculate_tax,
)

__all__ = [
    "PITCalculator",
    "TaxBand",
    "TaxBandResult",
    "TaxInput",
    "TaxResult",
    "TAX_BANDS",
    "apportion",
    "calculate_tax",
]
