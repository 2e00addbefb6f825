"""
Coerce size magnitudes from Python stdlib and third-party numeric types.

Magnitudes may arrive as int, float, numeric strings, Decimal, Fraction or
array scalars. They are normalized into a plain Python int or float before
any unit classification happens.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import operator
from typing import Protocol, runtime_checkable

# Local ----------------------------------------------------------------------------------------------------------------
from .exceptions import InvalidNumberError


@runtime_checkable
class SupportsFloat(Protocol):
    """Protocol for duck-typed numeric conversion."""

    def __float__(self) -> float: ...


def std_magnitude(value) -> int | float:
    """
    Convert a size magnitude to a standard Python int or float.

    Parameters
    ----------
    value : various
        Magnitude to convert. Supports Python int/float, numeric strings,
        Decimal, Fraction, and third-party types via __index__, .item()
        or __float__.

    Returns
    -------
    int
        For Python int (arbitrary precision, never overflows), types
        implementing __index__ (NumPy integers), integer strings, and
        integer-valued Decimal/Fraction (e.g., Decimal('42.0') → 42).

    float
        For float values and strings, fractional Decimal/Fraction, and
        float-like types. inf and -inf are valid magnitudes.

    Raises
    ------
    InvalidNumberError
        For bool, None, empty or unparsable strings, unsupported types,
        and anything that coerces to NaN.

    Behavior Notes
    --------------
    **Strings:**
    Surrounding whitespace is ignored. Parsing tries int first, then float
    (so '1e3' and '1536.5' work), then prefixed integer literals ('0x400').

    **Detection Priority:**
    1. str parsing
    2. __index__() → int (NumPy integers, strictest)
    3. .item() → int or float (array scalars)
    4. Integer-valued check (Decimal/Fraction)
    5. __float__() → float (general fallback)

    Examples
    --------
    >>> std_magnitude(1024)
    1024
    >>> std_magnitude(" 1.5e3 ")
    1500.0
    >>> std_magnitude("0x400")
    1024
    >>> from decimal import Decimal
    >>> std_magnitude(Decimal('42.0'))
    42
    >>> std_magnitude("abc")
    Traceback (most recent call last):
        ...
    filesize.exceptions.InvalidNumberError: Invalid number
    """
    result = _std_magnitude(value)

    if isinstance(result, float) and math.isnan(result):
        raise InvalidNumberError()

    return result


def _std_magnitude(value) -> int | float:
    # bool is an int subclass, but True bytes is almost always a bug
    if value is None or isinstance(value, bool):
        raise InvalidNumberError()

    # Standard Python numeric types - fast path
    if isinstance(value, (int, float)):
        return value

    if isinstance(value, str):
        return _parse_str(value)

    # Priority 2: __index__ marks exact integers (NumPy integer types)
    if hasattr(value, '__index__'):
        try:
            return operator.index(value)
        except (TypeError, ValueError) as e:
            raise InvalidNumberError() from e

    # Priority 3: array/tensor scalars with .item() method
    if hasattr(value, 'item') and callable(value.item):
        try:
            result = value.item()
        except (TypeError, ValueError, AttributeError):
            result = None
        if isinstance(result, (int, float)) and not isinstance(result, bool):
            return result

    # Priority 4: integer-valued Decimal/Fraction keep arbitrary precision
    type_name = type(value).__name__
    if type_name in ('Decimal', 'Fraction') and hasattr(value, '__int__'):
        try:
            as_int = int(value)
            if value == type(value)(as_int):
                return as_int
        except (TypeError, ValueError, OverflowError):
            # NaN and infinite Decimals, fall through to __float__
            pass

    # Priority 5: duck typing via __float__
    if isinstance(value, SupportsFloat):
        try:
            return float(value)
        except (TypeError, ValueError, OverflowError) as e:
            raise InvalidNumberError() from e

    raise InvalidNumberError()


def _parse_str(text: str) -> int | float:
    text = text.strip()
    if not text:
        raise InvalidNumberError()

    for parse in (int, float, _parse_prefixed_int):
        try:
            return parse(text)
        except ValueError:
            continue

    raise InvalidNumberError()


def _parse_prefixed_int(text: str) -> int:
    # '0x400', '0o2000', '0b1'; plain decimals were handled by int()
    return int(text, 0)
