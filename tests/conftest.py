#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from inspectkit import deprecation


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def fresh_deprecations(monkeypatch):
    """Start every test with an empty deprecation cache and no debug tags."""
    monkeypatch.setattr(deprecation, "_deprecation_warnings", set())
    monkeypatch.delenv(deprecation.DEBUG_ENV, raising=False)
