#
# Inspectkit - Sentinels Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import pickle

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from inspectkit.sentinels import HOLE, UNDEFINED, HoleType, UndefinedType


# Tests ----------------------------------------------------------------------------------------------------------------

class TestSentinels:
    def test_singleton_identity(self):
        """Ensure each sentinel is a singleton object."""
        assert UNDEFINED is UndefinedType()
        assert HOLE is HoleType()

    @pytest.mark.parametrize(
        ("sentinel", "expected"),
        [
            pytest.param(UNDEFINED, "<UNDEFINED>", id="undefined"),
            pytest.param(HOLE, "<HOLE>", id="hole"),
        ],
    )
    def test_repr_clean(self, sentinel, expected):
        """Assert repr shows clean angle-bracketed name."""
        assert repr(sentinel) == expected

    def test_identity_and_eq(self):
        """Compare by identity only."""
        assert UNDEFINED == UNDEFINED
        assert (UNDEFINED == HOLE) is False
        assert (UNDEFINED == None) is False  # noqa: E711

    @pytest.mark.parametrize(
        ("sentinel",),
        [
            pytest.param(UNDEFINED, id="undefined"),
            pytest.param(HOLE, id="hole"),
        ],
    )
    def test_falsy_and_hashable(self, sentinel):
        """Sentinels are falsy and hash by identity."""
        assert not sentinel
        assert hash(sentinel) == id(sentinel)

    @pytest.mark.parametrize(
        ("sentinel",),
        [
            pytest.param(UNDEFINED, id="undefined"),
            pytest.param(HOLE, id="hole"),
        ],
    )
    def test_pickle_roundtrip(self, sentinel):
        """Ensure pickling preserves singleton identity."""
        data = pickle.dumps(sentinel, protocol=pickle.HIGHEST_PROTOCOL)
        assert pickle.loads(data) is sentinel
