"""
Plain-language summary of a PIT calculation, shown alongside the numbers.
"""

from naijatax.core.formatting import format_naira, format_percent
from naijatax.core.tax_rules.pit import TAX_FREE_THRESHOLD, TaxInput, TaxResult


def generate_explanation(tax_input: TaxInput, result: TaxResult) -> str:
    income_type = "monthly" if tax_input.is_monthly else "annual"

    if result.total_annual_tax == 0:
        return (
            f"Based on your {income_type} gross income of {format_naira(tax_input.gross_income)}, "
            f"your entire income falls within the tax-free threshold of {format_naira(TAX_FREE_THRESHOLD)}. "
            "You don't owe any taxes under the 2025 reform!"
        )

    explanation = f"Based on your gross income of {format_naira(result.gross_annual_income)} annually"

    deductions = []
    if result.rent_relief > 0:
        deductions.append(f"{format_naira(result.rent_relief)} for rent relief")
    if result.pension_deduction > 0:
        deductions.append(f"{format_naira(result.pension_deduction)} for pension contribution")

    if deductions:
        explanation += f", we deducted {' and '.join(deductions)}"

    taxed_remainder = max(result.chargeable_income - TAX_FREE_THRESHOLD, 0.0)
    explanation += (
        f". Your first {format_naira(TAX_FREE_THRESHOLD)} is completely tax-free. "
        f"The remaining {format_naira(taxed_remainder)} was taxed progressively across the "
        f"2025 tax bands, resulting in an effective tax rate of {format_percent(result.effective_tax_rate)}."
    )

    return explanation
