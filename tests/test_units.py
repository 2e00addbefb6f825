#
# Filesize - Units Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from filesize.units import (
    BINARY_POWERS, DECIMAL_POWERS, FULLFORMS, MAX_EXPONENT, SYMBOLS,
    BaseConfig, Output, RoundingMethod, Standard,
    base_config, fullform_symbol, unit_symbol,
)


# Tests ----------------------------------------------------------------------------------------------------------------

class TestTables:
    """Static symbol and power tables."""

    @pytest.mark.parametrize("standard", [Standard.IEC, Standard.JEDEC], ids=["iec", "jedec"])
    @pytest.mark.parametrize("mode", ["bits", "bytes"])
    def test_symbols_cover_all_exponents(self, standard, mode):
        assert len(SYMBOLS[standard][mode]) == MAX_EXPONENT + 1

    def test_fullforms_cover_all_exponents(self):
        assert all(len(stems) == MAX_EXPONENT + 1 for stems in FULLFORMS.values())

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            SYMBOLS[Standard.IEC] = {}

    def test_powers(self):
        assert BINARY_POWERS[1] == 1024
        assert BINARY_POWERS[8] == 2 ** 80
        assert DECIMAL_POWERS[3] == 10 ** 9
        assert DECIMAL_POWERS[8] == 10 ** 24

    def test_enums_compare_as_strings(self):
        assert Standard.SI == "si"
        assert Output.EXPONENT == "exponent"
        assert RoundingMethod.CEIL == "ceil"


class TestBaseConfig:
    """Standard wins over base; unknown standards fall through."""

    @pytest.mark.parametrize(
        "standard, base, expected",
        [
            pytest.param("si", -1, BaseConfig(True, 1000, Standard.JEDEC), id="si"),
            pytest.param("si", 2, BaseConfig(True, 1000, Standard.JEDEC), id="si-beats-base"),
            pytest.param("iec", -1, BaseConfig(False, 1024, Standard.IEC), id="iec"),
            pytest.param("iec", 10, BaseConfig(False, 1024, Standard.IEC), id="iec-beats-base"),
            pytest.param("jedec", -1, BaseConfig(False, 1024, Standard.JEDEC), id="jedec"),
            pytest.param("", 2, BaseConfig(False, 1024, Standard.IEC), id="base-2"),
            pytest.param("", 10, BaseConfig(True, 1000, Standard.JEDEC), id="base-10"),
            pytest.param("", -1, BaseConfig(True, 1000, Standard.JEDEC), id="default"),
            pytest.param("nonsense", 2, BaseConfig(False, 1024, Standard.IEC), id="unknown-standard-base-2"),
            pytest.param("nonsense", -1, BaseConfig(True, 1000, Standard.JEDEC), id="unknown-standard"),
            pytest.param(None, -1, BaseConfig(True, 1000, Standard.JEDEC), id="none-standard"),
        ],
    )
    def test_resolution(self, standard, base, expected):
        assert base_config(standard, base) == expected

    def test_log_ceil_follows_base(self):
        assert base_config("si").log_ceil < base_config("iec").log_ceil


class TestSymbols:
    """Short and long unit names."""

    @pytest.mark.parametrize(
        "standard, exponent, bits, expected",
        [
            pytest.param("", 0, False, "B", id="byte"),
            pytest.param("", 1, False, "kB", id="si-kilobyte"),
            pytest.param("", 1, True, "kbit", id="si-kilobit"),
            pytest.param("", 2, False, "MB", id="si-megabyte"),
            pytest.param("jedec", 1, False, "KB", id="jedec-kilobyte"),
            pytest.param("iec", 1, False, "KiB", id="iec-kibibyte"),
            pytest.param("iec", 8, True, "Yibit", id="iec-yobibit"),
        ],
    )
    def test_unit_symbol(self, standard, exponent, bits, expected):
        assert unit_symbol(base_config(standard), exponent, bits) == expected

    @pytest.mark.parametrize(
        "standard, exponent, bits, plural, expected",
        [
            pytest.param("", 0, False, False, "byte", id="byte"),
            pytest.param("", 1, False, True, "kilobytes", id="kilobytes"),
            pytest.param("iec", 1, True, True, "kibibits", id="kibibits"),
            pytest.param("jedec", 8, False, False, "yottabyte", id="yottabyte"),
        ],
    )
    def test_fullform_symbol(self, standard, exponent, bits, plural, expected):
        assert fullform_symbol(base_config(standard), exponent, bits, plural=plural) == expected

    def test_fullform_override_is_verbatim(self):
        config = base_config()
        assert fullform_symbol(config, 1, plural=True, fullforms=("", "thousand-byte")) == "thousand-byte"

    def test_fullform_override_falls_back_when_missing(self):
        config = base_config()
        assert fullform_symbol(config, 2, fullforms=("", "thousand-byte")) == "megabyte"
        assert fullform_symbol(config, 1, fullforms=("", "")) == "kilobyte"
