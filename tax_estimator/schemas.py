from typing import Optional, List, Union
from pydantic import BaseModel, StrictBool, StrictFloat, StrictInt

from .tax_config import TaxBracket
from .tax_engine import BracketAllocation

# Raw form values: text fields arrive as strings, the dependents spinner as a number.
# Strict types keep pydantic from coercing them; parse_lenient_number does that.
FormNumber = Union[StrictFloat, StrictInt, StrictBool, str, None]

class CalculatorInputs(BaseModel):
    """
    Current state of the calculator form, exactly as the user typed it.

    With use_default_brackets off, `brackets` replaces the configured table and is
    validated as given (an empty list is rejected). Leaving it unset keeps the
    configured table.
    """
    income: FormNumber = "5000"
    is_monthly: bool = True
    dependents: FormNumber = 0
    other_deductions: FormNumber = "0"      # annual
    use_default_brackets: bool = True
    brackets: Optional[List[TaxBracket]] = None  # used when use_default_brackets is False

class TaxEstimate(BaseModel):
    annual_gross_income: float = 0.0
    dependent_deduction: float = 0.0
    withholding_deduction: float = 0.0
    other_deductions: float = 0.0
    total_deductions: float = 0.0
    taxable_income: float = 0.0
    total_tax: float = 0.0
    effective_rate: float = 0.0             # total_tax / annual_gross_income
    allocations: List[BracketAllocation] = []

class TaxTableRead(BaseModel):
    brackets: List[TaxBracket]
    per_dependent_monthly_deduction: float
    payroll_withholding_rate: float
