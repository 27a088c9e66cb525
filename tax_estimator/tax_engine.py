import logging
from typing import List, Sequence, Union
from pydantic import BaseModel
from .tax_config import TaxBracket, TaxTable

logger = logging.getLogger(__name__)

class BracketAllocation(BaseModel):
    amount: float = 0.0   # income falling inside this bracket
    rate: float = 0.0
    tax: float = 0.0      # amount * rate

class TaxCalculationResult(BaseModel):
    total_tax: float = 0.0
    allocations: List[BracketAllocation] = []

def compute_tax(
    taxable_income: float,
    brackets: Union[TaxTable, Sequence[TaxBracket]],
) -> TaxCalculationResult:
    """
    Allocate taxable income across progressive brackets.

    Every bracket gets exactly one allocation, in table order, so the breakdown
    lines up with the table on every recalculation. Brackets above the income
    carry a zero amount and zero tax.

    Income is expected to be clamped to >= 0 by the caller; anything <= 0 simply
    leaves every bracket empty. If the last bracket is bounded, income above
    that bound is not taxed (build_tax_table() rejects such tables).
    """
    if isinstance(brackets, TaxTable):
        brackets = brackets.brackets

    remaining = taxable_income
    lower_bound = 0.0
    total_tax = 0.0
    allocations: List[BracketAllocation] = []

    for bracket in brackets:
        upper_bound = bracket.upper_bound

        if remaining > 0:
            # inf - lower_bound stays inf, so the open bracket takes exactly `remaining`
            amount = max(0.0, min(upper_bound - lower_bound, remaining))
        else:
            amount = 0.0

        tax = amount * bracket.rate
        allocations.append(BracketAllocation(amount=amount, rate=bracket.rate, tax=tax))

        total_tax += tax
        remaining -= amount
        lower_bound = upper_bound

    logger.debug(
        "Progressive tax on %.2f across %d brackets: %.4f", taxable_income, len(allocations), total_tax
    )
    return TaxCalculationResult(total_tax=total_tax, allocations=allocations)
