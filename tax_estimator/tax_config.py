import math
from typing import Optional, Sequence, Tuple, Union
from pydantic import BaseModel, ConfigDict

class InvalidBracketTable(ValueError):
    """Raised when a bracket table cannot be used for progressive allocation."""


class TaxBracket(BaseModel):
    model_config = ConfigDict(frozen=True)

    up_to: Optional[float] = None  # None means “no upper limit”
    rate: float

    @property
    def upper_bound(self) -> float:
        """Upper bound as a float, with float('inf') for the open-ended bracket."""
        if self.up_to is None:
            return float("inf")
        return self.up_to

    @property
    def is_unbounded(self) -> bool:
        return self.up_to is None or self.up_to == float("inf")


class TaxTable(BaseModel):
    """
    Ordered set of annual tax brackets, ascending by upper bound.
    Build it with build_tax_table() so the ordering rules are checked.
    Frozen once built: the default table is shared process-wide.
    """
    model_config = ConfigDict(frozen=True)

    brackets: Tuple[TaxBracket, ...]

# -----------------------------------------------------------------------------
# 1. Default annual schedule
# -----------------------------------------------------------------------------
# Five progressive brackets: 0%, 7.5%, 15%, 22.5%, 27.5%
DEFAULT_BRACKETS: Tuple[TaxBracket, ...] = (
    TaxBracket(up_to=22847.76, rate=0.0),
    TaxBracket(up_to=33919.80, rate=0.075),
    TaxBracket(up_to=45012.60, rate=0.15),
    TaxBracket(up_to=55976.16, rate=0.225),
    TaxBracket(up_to=None, rate=0.275),
)

# -----------------------------------------------------------------------------
# 2. Deduction constants
# -----------------------------------------------------------------------------
DEFAULT_PER_DEPENDENT_MONTHLY_DEDUCTION = 189.59
DEFAULT_PAYROLL_WITHHOLDING_RATE = 0.11

BracketInput = Union[TaxBracket, dict]


def validate_brackets(brackets: Sequence[TaxBracket]) -> None:
    """
    Check that a bracket sequence covers income from 0 upward.

    Rules:
    1. At least one bracket.
    2. Every rate is in [0, 1].
    3. Finite upper bounds are non-negative and strictly ascending.
    4. Only the last bracket is unbounded, and the last bracket must be unbounded,
       otherwise income above the highest bound would go untaxed.
    """
    if not brackets:
        raise InvalidBracketTable("Bracket table must contain at least one bracket")

    previous_up_to = None
    last_index = len(brackets) - 1

    for index, bracket in enumerate(brackets):
        if math.isnan(bracket.rate) or not 0.0 <= bracket.rate <= 1.0:
            raise InvalidBracketTable(
                f"Bracket {index} has rate {bracket.rate}; rates must be between 0 and 1"
            )

        if bracket.is_unbounded:
            if index != last_index:
                raise InvalidBracketTable(
                    f"Bracket {index} has no upper limit but is not the last bracket"
                )
            continue

        if math.isnan(bracket.up_to) or bracket.up_to < 0:
            raise InvalidBracketTable(
                f"Bracket {index} has upper bound {bracket.up_to}; bounds must be non-negative"
            )
        if previous_up_to is not None and bracket.up_to <= previous_up_to:
            raise InvalidBracketTable(
                f"Bracket {index} upper bound {bracket.up_to} is not above previous bound {previous_up_to}"
            )
        previous_up_to = bracket.up_to

    if not brackets[last_index].is_unbounded:
        raise InvalidBracketTable(
            f"Last bracket must have no upper limit (got up_to={brackets[last_index].up_to})"
        )


def build_tax_table(brackets: Sequence[BracketInput]) -> TaxTable:
    """
    Build a validated TaxTable from TaxBracket objects or plain
    {"up_to": ..., "rate": ...} mappings.
    """
    parsed = [
        bracket if isinstance(bracket, TaxBracket) else TaxBracket(**bracket)
        for bracket in brackets
    ]
    validate_brackets(parsed)
    return TaxTable(brackets=parsed)


DEFAULT_TAX_TABLE: TaxTable = build_tax_table(DEFAULT_BRACKETS)

def get_default_tax_table() -> TaxTable:
    """
    Get the built-in annual tax table.
    """
    return DEFAULT_TAX_TABLE
