#
# Filesize Units of Measurement
#

# Standard library -----------------------------------------------------------------------------------------------------
import math
from dataclasses import dataclass
from enum import StrEnum, unique
from types import MappingProxyType


# Enums ----------------------------------------------------------------------------------------------------------------

@unique
class Standard(StrEnum):
    """
    Unit standards.

    Attributes:
        SI (str)    : Decimal scaling with JEDEC-style symbols and a lowercase kilo - 1 kB = 1000 B
        IEC (str)   : Binary scaling with binary prefixes - 1 KiB = 1024 B
        JEDEC (str) : Binary scaling with decimal-looking prefixes - 1 KB = 1024 B
    """
    SI = "si"
    IEC = "iec"
    JEDEC = "jedec"


@unique
class Output(StrEnum):
    """
    Result shapes of filesize().

    Attributes:
        STRING (str)   : Value and symbol joined by the spacer - "1.5 kB"
        ARRAY (str)    : Tuple of value and symbol - (1.5, "kB")
        OBJECT (str)   : FileSize record with value, symbol, exponent and unit
        EXPONENT (str) : Bare int exponent - 1
    """
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"
    EXPONENT = "exponent"


@unique
class RoundingMethod(StrEnum):
    ROUND = "round"
    FLOOR = "floor"
    CEIL = "ceil"


# @formatter:off

BIT = "bit"
BITS = "bits"
BYTE = "byte"
BYTES = "bytes"
SI_KBIT = "kbit"
SI_KBYTE = "kB"

MAX_EXPONENT = 8

SYMBOLS = MappingProxyType({
    Standard.IEC: MappingProxyType({
        BITS:  ("bit", "Kibit", "Mibit", "Gibit", "Tibit", "Pibit", "Eibit", "Zibit", "Yibit"),
        BYTES: ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB", "YiB"),
    }),
    Standard.JEDEC: MappingProxyType({
        BITS:  ("bit", "Kbit", "Mbit", "Gbit", "Tbit", "Pbit", "Ebit", "Zbit", "Ybit"),
        BYTES: ("B", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB"),
    }),
})

FULLFORMS = MappingProxyType({
    Standard.IEC:   ("", "kibi", "mebi", "gibi", "tebi", "pebi", "exbi", "zebi", "yobi"),
    Standard.JEDEC: ("", "kilo", "mega", "giga", "tera", "peta", "exa", "zetta", "yotta"),
})

BINARY_POWERS = tuple(2 ** (10 * e) for e in range(MAX_EXPONENT + 1))
DECIMAL_POWERS = tuple(1000 ** e for e in range(MAX_EXPONENT + 1))

LOG_1024 = math.log(1024)
LOG_1000 = math.log(1000)

# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class BaseConfig:
    """Scaling resolved from a standard and base pair."""

    is_decimal: bool
    ceil: int
    standard: Standard

    @property
    def powers(self) -> tuple[int, ...]:
        return DECIMAL_POWERS if self.is_decimal else BINARY_POWERS

    @property
    def log_ceil(self) -> float:
        return LOG_1000 if self.is_decimal else LOG_1024


_SI_CONFIG = BaseConfig(is_decimal=True, ceil=1000, standard=Standard.JEDEC)
_IEC_CONFIG = BaseConfig(is_decimal=False, ceil=1024, standard=Standard.IEC)
_JEDEC_CONFIG = BaseConfig(is_decimal=False, ceil=1024, standard=Standard.JEDEC)

_STANDARD_CONFIGS = MappingProxyType({
    Standard.SI: _SI_CONFIG,
    Standard.IEC: _IEC_CONFIG,
    Standard.JEDEC: _JEDEC_CONFIG,
})


# Methods --------------------------------------------------------------------------------------------------------------

def base_config(standard: str = "", base: int = -1) -> BaseConfig:
    """
    Resolve scaling and symbol table from a standard and a base.

    The standard wins over the base. Unknown standards fall through to the
    base, and anything but base 2 resolves to decimal scaling with JEDEC symbols.

    Examples:
        >>> base_config("si")
        BaseConfig(is_decimal=True, ceil=1000, standard=<Standard.JEDEC: 'jedec'>)
        >>> base_config("", 2).standard
        <Standard.IEC: 'iec'>
        >>> base_config("jedec", 10).ceil
        1024
    """
    config = _STANDARD_CONFIGS.get(standard) if isinstance(standard, str) else None
    if config is not None:
        return config

    if base == 2:
        return _IEC_CONFIG

    return _SI_CONFIG


def unit_symbol(config: BaseConfig, exponent: int, bits: bool = False) -> str:
    """
    Table symbol for an exponent, with the lowercase SI kilo at decimal exponent 1.

    Examples:
        >>> unit_symbol(base_config(), 1)
        'kB'
        >>> unit_symbol(base_config("iec"), 2, bits=True)
        'Mibit'
    """
    if config.is_decimal and exponent == 1:
        return SI_KBIT if bits else SI_KBYTE
    return SYMBOLS[config.standard][BITS if bits else BYTES][exponent]


def fullform_symbol(
        config: BaseConfig,
        exponent: int,
        bits: bool = False,
        plural: bool = False,
        fullforms=(),
) -> str:
    """
    Long unit name for an exponent, e.g. 'kilobytes' or 'kibibit'.

    A non-empty caller override at the same exponent wins and is used verbatim.
    """
    if exponent < len(fullforms) and fullforms[exponent]:
        return fullforms[exponent]

    name = FULLFORMS[config.standard][exponent] + (BIT if bits else BYTE)
    return name + "s" if plural else name


# Module Sanity Checks -------------------------------------------------------------------------------------------------

# Every standard and mode must cover all exponents.
for _standard, _modes in SYMBOLS.items():
    for _mode, _symbols in _modes.items():
        if len(_symbols) != MAX_EXPONENT + 1:
            raise AssertionError(
                f"Configuration Error: symbols[{_standard}][{_mode}] must hold {MAX_EXPONENT + 1} entries."
            )
    if len(FULLFORMS[_standard]) != MAX_EXPONENT + 1:
        raise AssertionError(
            f"Configuration Error: fullforms[{_standard}] must hold {MAX_EXPONENT + 1} entries."
        )
