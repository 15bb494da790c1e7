#
# Inspectkit - Utils Tests
#

# Third party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from inspectkit.utils import class_name, safe_repr, safe_str


# Local Classes & Methods ----------------------------------------------------------------------------------------------

class Broken:
    def __repr__(self):
        raise RuntimeError("no repr")

    def __str__(self):
        raise ValueError("no str")


# Tests ----------------------------------------------------------------------------------------------------------------

class TestClassName:
    @pytest.mark.parametrize(
        "obj, fully_qualified, expected",
        [
            pytest.param(int, False, "int", id="builtin-class"),
            pytest.param(10, False, "int", id="builtin-instance"),
            pytest.param(10, True, "int", id="builtin-fq"),
            pytest.param(Broken, False, "Broken", id="user-class"),
            pytest.param(Broken(), True, f"{__name__}.Broken", id="user-fq"),
        ],
    )
    def test_names(self, obj, fully_qualified, expected):
        """Return the class name of instances and classes alike."""
        assert class_name(obj, fully_qualified=fully_qualified) == expected


class TestSafeCalls:
    def test_safe_repr(self):
        assert safe_repr([1]) == "[1]"
        assert safe_repr(Broken()) == "<Broken object (repr failed: RuntimeError)>"

    def test_safe_str(self):
        assert safe_str(1.5) == "1.5"
        assert safe_str(Broken()) == "<Broken object (str failed: ValueError)>"
