#
# Filesize Format Options
#

# Standard library -----------------------------------------------------------------------------------------------------
import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Self, Sequence

# Local ----------------------------------------------------------------------------------------------------------------
from .units import Output, RoundingMethod

# camelCase spellings accepted by FormatOptions.from_mapping()
ALIASES = MappingProxyType({
    "localeOptions": "locale_options",
    "roundingMethod": "rounding_method",
})


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class FormatOptions:
    """
    Immutable snapshot of the options of a filesize() call.

    Fields are orthogonal and all optional. Mapping and sequence fields are
    frozen on construction, so a snapshot captured by partial() cannot be
    changed behind its back.

    Attributes:
        bits: Compute in bits (x8) instead of bytes.
        pad: Right-pad fractional digits to `round` width.
        base: 2 forces binary scaling, 10 decimal; -1 lets the standard decide.
        round: Decimal places kept for non-zero exponents.
        locale: "" disables locale formatting, True uses the host locale, a tag selects one.
        locale_options: Keywords for babel.numbers.format_decimal().
        separator: Decimal mark replacing ".", ignored when a locale is active.
        spacer: Joins value and symbol in string output.
        symbols: Overrides of table symbols by exact match, e.g. {"kB": "kilobyte"}.
        standard: "si", "iec", "jedec" or "" for the base default.
        output: "string", "array", "object" or "exponent".
        fullform: Use long unit names.
        fullforms: Long-name overrides indexed by exponent.
        exponent: Forced exponent; negative selects it automatically.
        rounding_method: "round", "floor" or "ceil".
        precision: Significant digits; 0 disables.
    """

    bits: bool = False
    pad: bool = False
    base: int = -1
    round: int = 2
    locale: str | bool = ""
    locale_options: Mapping[str, Any] = field(default_factory=dict)
    separator: str = ""
    spacer: str = " "
    symbols: Mapping[str, str] = field(default_factory=dict)
    standard: str = ""
    output: str = Output.STRING
    fullform: bool = False
    fullforms: Sequence[str] = ()
    exponent: int = -1
    rounding_method: str = RoundingMethod.ROUND
    precision: int = 0

    def __post_init__(self):
        object.__setattr__(self, 'locale_options', MappingProxyType(dict(self.locale_options or {})))
        object.__setattr__(self, 'symbols', MappingProxyType(dict(self.symbols or {})))
        object.__setattr__(self, 'fullforms', tuple(self.fullforms or ()))

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None = None, **overrides) -> Self:
        """
        Build options from a mapping with snake_case or camelCase keys.

        Keyword overrides win over the mapping. Unknown keys raise TypeError.

        Examples:
            >>> FormatOptions.from_mapping({"roundingMethod": "floor"}, round=1)
            FormatOptions(..., round=1, ..., rounding_method='floor', precision=0)
        """
        merged = {ALIASES.get(key, key): value for key, value in dict(options or {}).items()}
        merged.update({ALIASES.get(key, key): value for key, value in overrides.items()})
        return cls(**merged)

    @classmethod
    def coerce(cls, options: "FormatOptions | Mapping[str, Any] | None" = None, **overrides) -> Self:
        """Options snapshot from a snapshot, a mapping or nothing, with keyword overrides on top."""
        if isinstance(options, FormatOptions):
            return options.replace(**overrides) if overrides else options
        return cls.from_mapping(options, **overrides)

    def replace(self, **changes) -> Self:
        """Copy with some fields changed; camelCase names are accepted."""
        return dataclasses.replace(self, **{ALIASES.get(key, key): value for key, value in changes.items()})


DEFAULTS = FormatOptions()
