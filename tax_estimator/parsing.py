"""
Lenient numeric coercion for free-form form input.

Text such as "R$ 5.000" or "1,200" reaches the calculator straight from text
fields. Everything except digits, "." and "-" is stripped before parsing, and
anything that still does not parse to a finite number counts as 0.
"""
import math
import re
from typing import Any

_NON_NUMERIC = re.compile(r"[^0-9.\-]+")

def parse_lenient_number(value: Any) -> float:
    """
    Coerce a form value to a float, falling back to 0.0.

    Examples:
        "5000"        -> 5000.0
        "R$ 1,234.50" -> 1234.5
        "abc"         -> 0.0
        "1.2.3"       -> 0.0
        ""            -> 0.0
    """
    if value is None:
        return 0.0

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            number = float(value)
        except OverflowError:
            return 0.0
        return number if math.isfinite(number) else 0.0

    cleaned = _NON_NUMERIC.sub("", str(value))
    if not cleaned:
        return 0.0

    try:
        number = float(cleaned)
    except ValueError:
        return 0.0

    return number if math.isfinite(number) else 0.0
