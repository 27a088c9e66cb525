from pydantic import BaseModel
from .tax_config import DEFAULT_PER_DEPENDENT_MONTHLY_DEDUCTION, DEFAULT_PAYROLL_WITHHOLDING_RATE

MONTHS_PER_YEAR = 12

class DeductionSummary(BaseModel):
    annual_gross_income: float = 0.0
    dependent_deduction: float = 0.0     # dependents * monthly allowance * 12
    withholding_deduction: float = 0.0   # annual gross * payroll withholding rate
    other_deductions: float = 0.0        # already annual
    total_deductions: float = 0.0
    taxable_income: float = 0.0          # never negative

def compute_taxable_income(
    gross_income: float,
    is_monthly: bool,
    dependent_count: float,
    per_dependent_monthly_deduction: float = DEFAULT_PER_DEPENDENT_MONTHLY_DEDUCTION,
    payroll_withholding_rate: float = DEFAULT_PAYROLL_WITHHOLDING_RATE,
    other_annual_deductions: float = 0.0,
) -> DeductionSummary:
    """
    Reduce gross income to the annual taxable base.

    Monthly income is annualized first. Deductions are the dependent allowance,
    the flat payroll withholding on annual gross income, and any other annual
    deductions. Taxable income is clamped at zero.
    """
    annual_gross_income = gross_income * MONTHS_PER_YEAR if is_monthly else gross_income

    dependent_deduction = dependent_count * per_dependent_monthly_deduction * MONTHS_PER_YEAR
    withholding_deduction = annual_gross_income * payroll_withholding_rate
    total_deductions = dependent_deduction + withholding_deduction + other_annual_deductions

    taxable_income = max(0.0, annual_gross_income - total_deductions)

    return DeductionSummary(
        annual_gross_income=annual_gross_income,
        dependent_deduction=dependent_deduction,
        withholding_deduction=withholding_deduction,
        other_deductions=other_annual_deductions,
        total_deductions=total_deductions,
        taxable_income=taxable_income,
    )
