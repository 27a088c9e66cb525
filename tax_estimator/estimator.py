import logging
from typing import Optional

from .config import Settings, settings as default_settings
from .deductions import compute_taxable_income
from .parsing import parse_lenient_number
from .schemas import CalculatorInputs, TaxEstimate
from .tax_config import TaxTable, build_tax_table
from .tax_engine import compute_tax

logger = logging.getLogger(__name__)

def resolve_tax_table(inputs: CalculatorInputs, settings: Settings) -> TaxTable:
    """
    Pick the bracket table for a calculation.
    Custom brackets are only used when the default-table checkbox is off and a list
    was supplied; they are validated here and raise InvalidBracketTable if unusable,
    including an empty list.
    """
    if not inputs.use_default_brackets and inputs.brackets is not None:
        return build_tax_table(inputs.brackets)
    return settings.tax_table

def estimate(inputs: CalculatorInputs, settings: Optional[Settings] = None) -> TaxEstimate:
    """
    Recompute the full read-out from the current form state.

    Nothing is kept between calls: the presentation layer calls this again whenever
    any input changes and renders whatever comes back.
    """
    settings = settings or default_settings

    gross_income = parse_lenient_number(inputs.income)
    dependents = parse_lenient_number(inputs.dependents)
    other_deductions = parse_lenient_number(inputs.other_deductions)

    deductions = compute_taxable_income(
        gross_income=gross_income,
        is_monthly=inputs.is_monthly,
        dependent_count=dependents,
        per_dependent_monthly_deduction=settings.per_dependent_monthly_deduction,
        payroll_withholding_rate=settings.payroll_withholding_rate,
        other_annual_deductions=other_deductions,
    )

    table = resolve_tax_table(inputs, settings)
    result = compute_tax(deductions.taxable_income, table)

    annual = deductions.annual_gross_income
    effective_rate = result.total_tax / annual if annual > 0 else 0.0

    logger.debug(
        "Estimate: annual=%.2f deductions=%.2f taxable=%.2f tax=%.2f",
        annual, deductions.total_deductions, deductions.taxable_income, result.total_tax,
    )

    return TaxEstimate(
        annual_gross_income=annual,
        dependent_deduction=deductions.dependent_deduction,
        withholding_deduction=deductions.withholding_deduction,
        other_deductions=deductions.other_deductions,
        total_deductions=deductions.total_deductions,
        taxable_income=deductions.taxable_income,
        total_tax=result.total_tax,
        effective_rate=effective_rate,
        allocations=result.allocations,
    )
