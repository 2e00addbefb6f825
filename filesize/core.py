"""
Human-readable file sizes.

filesize() turns a byte count into a string such as '1.5 kB', or into a
tuple, a FileSize record or a bare exponent. partial() binds a set of
options into a one-argument formatter.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

# Third-party ----------------------------------------------------------------------------------------------------------
from babel.numbers import get_decimal_symbol

# Local ----------------------------------------------------------------------------------------------------------------
from .exceptions import InvalidRoundingMethodError
from .formatters import PERIOD, fmt_locale, fmt_number, fmt_precision, fmt_separator, pad_fraction, resolve_locale
from .numeric import std_magnitude
from .options import FormatOptions
from .units import (
    BITS, BYTES, MAX_EXPONENT, SYMBOLS, BaseConfig, Output, RoundingMethod,
    base_config, fullform_symbol, unit_symbol,
)


def _round_half_up(x: float) -> int:
    # Math.round semantics, not banker's rounding
    return math.floor(x + 0.5)


ROUNDING_METHODS = {
    RoundingMethod.ROUND: _round_half_up,
    RoundingMethod.FLOOR: math.floor,
    RoundingMethod.CEIL: math.ceil,
}


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class FileSize:
    """
    Structured filesize() result.

    Attributes:
        value: Scaled value, a str once precision, locale, separator or padding rendered it.
        symbol: Displayed unit, after custom symbols and full form.
        exponent: Unit index 0..8.
        unit: Table unit before custom symbols, e.g. 'kB'.
    """

    value: int | float | str
    symbol: str
    exponent: int
    unit: str


# Methods --------------------------------------------------------------------------------------------------------------

def filesize(
        arg,
        options: FormatOptions | Mapping[str, Any] | None = None,
        **overrides,
) -> str | tuple[int | float | str, str] | FileSize | int:
    """
    Format a byte count as a human-readable size.

    Args:
        arg: Magnitude in bytes; int, float, numeric str, Decimal, Fraction or
             an array scalar. Negative values keep their sign.
        options: FormatOptions, or a mapping with snake_case or camelCase keys.
        **overrides: FormatOptions fields applied on top of options.

    Returns:
        Depending on the output option: the joined string (default), a
        (value, symbol) tuple, a FileSize record, or the int exponent.

    Raises:
        InvalidNumberError: arg is not numeric, or is NaN.
        InvalidRoundingMethodError: rounding_method is not round, floor or ceil.

    Examples:
        >>> filesize(1536)
        '1.54 kB'
        >>> filesize(1024, standard="iec")
        '1 KiB'
        >>> filesize(1000, bits=True, output="array")
        (8, 'kbit')
        >>> filesize(1536, {"roundingMethod": "floor", "round": 1})
        '1.5 kB'
    """
    opts = FormatOptions.coerce(options, **overrides)

    num = std_magnitude(arg)
    rounding = ROUNDING_METHODS.get(opts.rounding_method) if isinstance(opts.rounding_method, str) else None
    if rounding is None:
        raise InvalidRoundingMethodError()

    config = base_config(opts.standard, opts.base)
    neg = num < 0
    if neg:
        num = -num

    if num == 0:
        return _zero_result(opts, config)

    forced = _forced_exponent(opts.exponent)
    e = _auto_exponent(num, config) if forced is None else forced
    precision = opts.precision

    # Beyond yotta, saturate and shift precision by the lost magnitude
    if e > MAX_EXPONENT:
        if precision > 0:
            precision += MAX_EXPONENT - e
        e = MAX_EXPONENT

    if opts.output == Output.EXPONENT:
        return e

    value, e = _scaled_value(num, e, config, opts.bits)
    value = _rounded(value, e, opts.round, rounding)

    if value == config.ceil and e < MAX_EXPONENT and forced is None:
        value = 1
        e += 1

    numeric = -value if neg else value

    if precision > 0:
        value, e = _precision_value(value, e, num, precision, config, opts, rounding)
        if neg and numeric != 0:
            value = f"-{value}"
    else:
        value = numeric

    unit = unit_symbol(config, e, opts.bits)
    symbol = opts.symbols.get(unit) or unit

    value = _rendered_value(value, opts)

    if opts.fullform:
        symbol = fullform_symbol(config, e, opts.bits, plural=numeric != 1, fullforms=opts.fullforms)

    return _shaped(value, symbol, e, unit, opts)


def partial(
        options: FormatOptions | Mapping[str, Any] | None = None,
        **overrides,
) -> Callable[[Any], str | tuple[int | float | str, str] | FileSize | int]:
    """
    Bind options into a one-argument formatter.

    The options are captured once; the returned callable forwards every
    magnitude to filesize() with them. Invalid options surface on first call.

    Examples:
        >>> fmt_iec = partial(standard="iec")
        >>> fmt_iec(1024)
        '1 KiB'
    """
    opts = FormatOptions.coerce(options, **overrides)

    def fmt_size(arg):
        return filesize(arg, opts)

    return fmt_size


# Steps ----------------------------------------------------------------------------------------------------------------

def _zero_result(opts: FormatOptions, config: BaseConfig):
    """Zero short-circuits scaling and rendering."""
    if opts.output == Output.EXPONENT:
        return 0

    value = fmt_precision(0, opts.precision) if opts.precision > 0 else 0
    unit = SYMBOLS[config.standard][BITS if opts.bits else BYTES][0]
    symbol = opts.symbols.get(unit) or unit

    if opts.fullform:
        symbol = fullform_symbol(config, 0, opts.bits, fullforms=opts.fullforms)

    return _shaped(value, symbol, 0, unit, opts)


def _forced_exponent(exponent) -> int | None:
    """Caller exponent, or None when it should be detected."""
    if isinstance(exponent, bool) or not isinstance(exponent, (int, float)):
        return None
    if math.isnan(exponent) or exponent < 0:
        return None
    if math.isinf(exponent):
        return MAX_EXPONENT
    return int(exponent)


def _auto_exponent(num: int | float, config: BaseConfig) -> int:
    """
    Largest e with ceil**e <= num, never negative.

    The log estimate is corrected against exact powers, so 1000**k always
    classifies as k despite floating-point log error.
    """
    # math.log() takes ints past the float range; only float inf short-circuits
    if isinstance(num, float) and math.isinf(num):
        return MAX_EXPONENT

    e = max(math.floor(math.log(num) / config.log_ceil), 0)
    while e > 0 and num < config.ceil ** e:
        e -= 1
    while num >= config.ceil ** (e + 1):
        e += 1
    return e


def _scaled_value(num: int | float, e: int, config: BaseConfig, bits: bool) -> tuple[float, int]:
    """Value in units of exponent e; bits may roll into the next unit."""
    try:
        value = num / config.powers[e]
    except OverflowError:
        # int magnitudes past the float range
        value = math.inf

    if bits:
        value *= 8
        if value >= config.ceil and e < MAX_EXPONENT:
            value /= config.ceil
            e += 1

    return value, e


def _rounded(value: float, e: int, places: int, rounding: Callable) -> int | float:
    """Round to decimal places; whole units (e == 0) round to integers."""
    # negative places round to tens, hundreds and so on
    p = 10 ** places if e > 0 else 1
    if not math.isfinite(value * p):
        return value

    value = rounding(value) if p == 1 else rounding(value * p) / p

    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _precision_value(
        value: int | float,
        e: int,
        num: int | float,
        precision: int,
        config: BaseConfig,
        opts: FormatOptions,
        rounding: Callable,
) -> tuple[str, int]:
    """
    Render value with significant digits, moving up units instead of using exponent notation.

    When the digits only fit in exponent notation ('1.5e+3'), the magnitude is
    rescaled to the next unit and rendered again. A value that still does not
    fit at yotta, or a tiny value under a forced exponent, is rendered
    positionally with the same digits.
    """
    text = fmt_precision(value, precision)

    while "e+" in text and e < MAX_EXPONENT:
        value, e = _scaled_value(num, e + 1, config, opts.bits)
        value = _rounded(value, e, opts.round, rounding)
        text = fmt_precision(value, precision)

    if "e" in text:
        text = fmt_precision(value, precision, scientific=False)

    return text, e


def _rendered_value(value: int | float | str, opts: FormatOptions) -> int | float | str:
    """Apply locale, separator and padding; plain numbers stay numeric."""
    locale = resolve_locale(opts.locale)
    mark = PERIOD

    if locale is not None:
        value = fmt_locale(value, locale, opts.locale_options)
        mark = get_decimal_symbol(locale)
    elif opts.separator:
        value = fmt_separator(value, opts.separator)
        mark = opts.separator

    if opts.pad and opts.round > 0:
        value = pad_fraction(fmt_number(value), opts.round, mark)

    return value


def _shaped(value, symbol: str, e: int, unit: str, opts: FormatOptions):
    if opts.output == Output.ARRAY:
        return value, symbol

    if opts.output == Output.OBJECT:
        return FileSize(value=value, symbol=symbol, exponent=e, unit=unit)

    return f"{fmt_number(value)}{opts.spacer}{symbol}"
