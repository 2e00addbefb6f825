#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

LOCALE_VARS = ("LANGUAGE", "LC_ALL", "LC_NUMERIC", "LC_CTYPE", "LANG")


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def host_locale(monkeypatch):
    """Fixture to pin the host locale seen by Babel; None clears it."""

    def _set_locale(tag: str | None = None) -> None:
        for name in LOCALE_VARS:
            monkeypatch.delenv(name, raising=False)
        if tag:
            monkeypatch.setenv("LC_NUMERIC", tag)

    return _set_locale
