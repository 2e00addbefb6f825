"""
Number rendering for size values: plain, significant digits, locale, separator and padding.

None of the renderers emit exponent notation, except fmt_precision() in its
default scientific mode, which mirrors JavaScript's Number.toPrecision().
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import math
from collections.abc import Mapping
from decimal import Decimal, ROUND_HALF_UP, localcontext

# Third-party ----------------------------------------------------------------------------------------------------------
from babel import Locale, default_locale
from babel.numbers import format_decimal, get_decimal_symbol

logger = logging.getLogger(__name__)

FALLBACK_LOCALE = "en_US"
PERIOD = "."
ZERO = "0"


# Methods --------------------------------------------------------------------------------------------------------------

def fmt_number(value: int | float | str) -> str:
    """
    Render a number like JavaScript's Number.toString(), without exponent notation.

    Integral floats drop their fraction, other floats keep the shortest
    round-trip digits. Strings are returned unchanged.

    Examples:
        >>> fmt_number(1.0)
        '1'
        >>> fmt_number(1.02)
        '1.02'
        >>> fmt_number(1e21)
        '1000000000000000000000'
        >>> fmt_number(1e-7)
        '0.0000001'
    """
    if isinstance(value, str):
        return value

    if isinstance(value, int):
        return str(value)

    if not math.isfinite(value):
        return str(value)

    if value.is_integer():
        return str(int(value))

    text = repr(value)
    if "e" in text:
        text = format(Decimal(text), "f")
    return text


def fmt_precision(value: int | float, precision: int, *, scientific: bool = True) -> str:
    """
    Render a number with a fixed count of significant digits.

    With scientific=True the result matches JavaScript's Number.toPrecision():
    exponent notation ('1.5e+3') is used when the decimal exponent is below -6
    or not below the precision. With scientific=False the same digits are
    always rendered positionally ('1500').

    Ties round half away from zero on the exact binary value of the float.

    Examples:
        >>> fmt_precision(1.536, 3)
        '1.54'
        >>> fmt_precision(1.5, 3)
        '1.50'
        >>> fmt_precision(1536, 2)
        '1.5e+3'
        >>> fmt_precision(1536, 2, scientific=False)
        '1500'
        >>> fmt_precision(0, 2)
        '0.0'
    """
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)

    number = Decimal(value)
    exponent = 0 if number.is_zero() else number.adjusted()

    with localcontext() as ctx:
        ctx.prec = precision + 2
        ctx.rounding = ROUND_HALF_UP
        rounded = number.quantize(Decimal(f"1e{exponent - precision + 1}"))
        # 9.99 at two digits rounds up into the next decade
        if not rounded.is_zero() and rounded.adjusted() > exponent:
            exponent = rounded.adjusted()
            rounded = number.quantize(Decimal(f"1e{exponent - precision + 1}"))

    if scientific and (exponent < -6 or exponent >= precision):
        sign, digits, _ = rounded.as_tuple()
        mantissa = "".join(str(d) for d in digits)[:precision].ljust(precision, ZERO)
        if len(mantissa) > 1:
            mantissa = f"{mantissa[0]}.{mantissa[1:]}"
        return f"{'-' if sign else ''}{mantissa}e{'+' if exponent >= 0 else '-'}{abs(exponent)}"

    return format(rounded, "f")


def resolve_locale(locale: str | bool) -> Locale | None:
    """
    Babel Locale for a locale option; None when locale formatting is off.

    True selects the host default numeric locale. Tags may use either
    BCP 47 ('de-DE') or POSIX ('de_DE') separators.
    """
    if locale is True:
        tag = default_locale("LC_NUMERIC")
        if not tag:
            logger.debug("Host locale is not set, formatting with %s", FALLBACK_LOCALE)
            tag = FALLBACK_LOCALE
        return Locale.parse(tag)

    if isinstance(locale, str) and locale:
        return Locale.parse(locale.replace("-", "_"))

    return None


def fmt_locale(value: int | float | str, locale: Locale, options: Mapping | None = None) -> str:
    """
    Render a number for a locale through babel.numbers.format_decimal().

    Options are passed through as format_decimal() keywords, e.g. format,
    decimal_quantization or group_separator. Strings, such as significant-digit
    renderings, keep their digits and only swap the decimal point.

    Examples:
        >>> fmt_locale(1536.25, Locale.parse("de_DE"))
        '1.536,25'
        >>> fmt_locale("1.50", Locale.parse("de_DE"))
        '1,50'
    """
    if isinstance(value, str):
        return value.replace(PERIOD, get_decimal_symbol(locale), 1)

    return format_decimal(value, locale=locale, **(options or {}))


def fmt_separator(value: int | float | str, separator: str) -> str:
    """
    Replace the decimal point with a custom separator.

    Examples:
        >>> fmt_separator(1.54, ",")
        '1,54'
    """
    return fmt_number(value).replace(PERIOD, separator, 1)


def pad_fraction(text: str, digits: int, mark: str = PERIOD) -> str:
    """
    Right-pad the fractional part of a rendered number with zeros.

    The mark is added when the number has no fraction. Fractions already
    longer than digits are kept.

    Examples:
        >>> pad_fraction("1", 2)
        '1.00'
        >>> pad_fraction("1,5", 3, mark=",")
        '1,500'
        >>> pad_fraction("1.536", 2)
        '1.536'
    """
    whole, _, fraction = text.partition(mark)
    return f"{whole}{mark}{fraction.ljust(digits, ZERO)}"
