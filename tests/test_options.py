#
# Filesize - Format Options Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import dataclasses

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from filesize.options import DEFAULTS, FormatOptions


# Tests ----------------------------------------------------------------------------------------------------------------

class TestFormatOptions:
    """Immutable option snapshots."""

    def test_defaults(self):
        assert DEFAULTS.bits is False
        assert DEFAULTS.base == -1
        assert DEFAULTS.round == 2
        assert DEFAULTS.locale == ""
        assert DEFAULTS.spacer == " "
        assert DEFAULTS.standard == ""
        assert DEFAULTS.output == "string"
        assert DEFAULTS.exponent == -1
        assert DEFAULTS.rounding_method == "round"
        assert DEFAULTS.precision == 0
        assert dict(DEFAULTS.symbols) == {}
        assert DEFAULTS.fullforms == ()

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULTS.round = 1

    def test_containers_are_frozen(self):
        symbols = {"kB": "kilobyte"}
        fullforms = ["", "thousand-byte"]
        opts = FormatOptions(symbols=symbols, fullforms=fullforms)

        symbols["kB"] = "changed"
        fullforms.append("more")

        assert opts.symbols["kB"] == "kilobyte"
        assert opts.fullforms == ("", "thousand-byte")
        with pytest.raises(TypeError):
            opts.symbols["MB"] = "megabyte"

    def test_none_containers(self):
        opts = FormatOptions(symbols=None, locale_options=None, fullforms=None)
        assert dict(opts.symbols) == {}
        assert dict(opts.locale_options) == {}
        assert opts.fullforms == ()


class TestFromMapping:
    """Mappings with snake_case or camelCase keys."""

    def test_camel_case(self):
        opts = FormatOptions.from_mapping({"roundingMethod": "floor", "localeOptions": {"format": "#"}})
        assert opts.rounding_method == "floor"
        assert dict(opts.locale_options) == {"format": "#"}

    def test_snake_case(self):
        opts = FormatOptions.from_mapping({"rounding_method": "ceil", "bits": True})
        assert opts.rounding_method == "ceil"
        assert opts.bits is True

    def test_overrides_win(self):
        opts = FormatOptions.from_mapping({"round": 1}, round=3)
        assert opts.round == 3

    def test_empty(self):
        assert FormatOptions.from_mapping(None) == DEFAULTS

    def test_unknown_key(self):
        with pytest.raises(TypeError):
            FormatOptions.from_mapping({"unix": True})


class TestCoerce:
    """Snapshot, mapping or nothing, with overrides on top."""

    def test_snapshot_passthrough(self):
        opts = FormatOptions(round=1)
        assert FormatOptions.coerce(opts) is opts

    def test_snapshot_with_overrides(self):
        opts = FormatOptions(round=1, standard="iec")
        changed = FormatOptions.coerce(opts, roundingMethod="floor")
        assert changed.rounding_method == "floor"
        assert changed.standard == "iec"
        assert opts.rounding_method == "round"

    def test_mapping(self):
        assert FormatOptions.coerce({"bits": True}).bits is True

    def test_nothing(self):
        assert FormatOptions.coerce() == DEFAULTS

    def test_replace(self):
        assert DEFAULTS.replace(localeOptions={"format": "#"}).locale_options == {"format": "#"}
