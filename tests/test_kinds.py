#
# Inspectkit - Kinds Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import collections
import datetime as dt
import re

from decimal import Decimal
from fractions import Fraction

# Third party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from inspectkit.kinds import (
    LEAF_FORMATTERS,
    Kind,
    classify,
    error_text,
    format_leaf,
    function_label,
    is_array,
    is_function,
    is_kind,
    is_null,
    is_object,
    is_primitive,
    is_undefined,
    quotes,
)
from inspectkit.sentinels import HOLE, UNDEFINED


# Local Classes & Methods ----------------------------------------------------------------------------------------------

class Plain:
    pass


class Rich:
    limit = 3


# Tests ----------------------------------------------------------------------------------------------------------------

class TestClassify:
    @pytest.mark.parametrize(
        "value, kind",
        [
            pytest.param(True, Kind.BOOLEAN, id="bool-before-int"),
            pytest.param(3, Kind.NUMBER, id="int"),
            pytest.param(2.5, Kind.NUMBER, id="float"),
            pytest.param(1j, Kind.NUMBER, id="complex"),
            pytest.param(Decimal("1.1"), Kind.NUMBER, id="decimal"),
            pytest.param(Fraction(1, 3), Kind.NUMBER, id="fraction"),
            pytest.param("s", Kind.STRING, id="str"),
            pytest.param(bytearray(b"x"), Kind.STRING, id="bytearray"),
            pytest.param(dt.time(1, 2), Kind.DATE, id="time"),
            pytest.param(re.compile("x"), Kind.REGEXP, id="regexp"),
            pytest.param(KeyError("k"), Kind.ERROR, id="error"),
            pytest.param(None, Kind.NULL, id="none"),
            pytest.param(UNDEFINED, Kind.UNDEFINED, id="undefined"),
            pytest.param(HOLE, Kind.UNDEFINED, id="hole"),
            pytest.param(print, Kind.FUNCTION, id="builtin"),
            pytest.param(Plain, Kind.FUNCTION, id="class-no-members"),
            pytest.param(Rich, Kind.CONSTRUCTOR, id="class-members"),
            pytest.param([1], Kind.ARRAY, id="list"),
            pytest.param(frozenset(), Kind.ARRAY, id="frozenset"),
            pytest.param({}, Kind.OBJECT, id="dict"),
            pytest.param(collections.namedtuple("P", "x")(1), Kind.OBJECT, id="namedtuple"),
            pytest.param(Plain(), Kind.OBJECT, id="instance"),
        ],
    )
    def test_kind(self, value, kind):
        """Classify values into their kind."""
        assert classify(value) is kind

    def test_every_leaf_kind_has_formatter(self):
        """Cover every kind but the composites with a leaf formatter."""
        assert set(LEAF_FORMATTERS) == set(Kind) - {Kind.ARRAY, Kind.OBJECT}


class TestQuotes:
    @pytest.mark.parametrize(
        "text, expected",
        [
            pytest.param("hello", "'hello'", id="plain"),
            pytest.param("", "''", id="empty"),
            pytest.param("it's", "\"it's\"", id="single-inside"),
            pytest.param('say "hi"', "'say \"hi\"'", id="double-inside"),
            pytest.param("it's \"x\"", "'it\\'s \\\"x\\\"'", id="both-inside"),
            pytest.param("a\\b", "'a\\\\b'", id="backslash"),
            pytest.param("a\nb\tc", "'a\\nb\\tc'", id="control"),
        ],
    )
    def test_quotes(self, text, expected):
        """Pick the absent quote and escape what is needed."""
        assert quotes(text) == expected


class TestLabels:
    @pytest.mark.parametrize(
        "fn, is_ctor, expected",
        [
            pytest.param(len, False, "[Function: len]", id="named"),
            pytest.param(lambda: None, False, "[Function]", id="lambda"),
            pytest.param(Rich, True, "[Constructor: Rich]", id="constructor"),
        ],
    )
    def test_function_label(self, fn, is_ctor, expected):
        assert function_label(fn, is_ctor) == expected

    @pytest.mark.parametrize(
        "exc, expected",
        [
            pytest.param(ValueError("bad"), "ValueError: bad", id="message"),
            pytest.param(StopIteration(), "StopIteration", id="no-message"),
        ],
    )
    def test_error_text(self, exc, expected):
        assert error_text(exc) == expected

    def test_format_leaf_composite(self):
        """Return None for composites."""
        assert format_leaf([1]) is None
        assert format_leaf(dt.date(2020, 5, 1)) == "2020-05-01"


class TestPredicates:
    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(None, True, id="none"),
            pytest.param(UNDEFINED, True, id="undefined"),
            pytest.param(0, True, id="int"),
            pytest.param("x", True, id="str"),
            pytest.param(ValueError(), False, id="error"),
            pytest.param([], False, id="list"),
            pytest.param(len, False, id="function"),
        ],
    )
    def test_is_primitive(self, value, expected):
        assert is_primitive(value) is expected

    def test_named_predicates(self):
        """Expose one predicate per kind."""
        assert is_function(Rich) and is_function(len)
        assert is_array((1,)) and not is_array({})
        assert is_object({}) and not is_object([])
        assert is_null(None) and not is_null(UNDEFINED)
        assert is_undefined(UNDEFINED)

    def test_is_kind(self):
        """Build predicates accepting several kinds."""
        is_scalar = is_kind(Kind.NUMBER, Kind.STRING)
        assert is_scalar(1) and is_scalar("a")
        assert not is_scalar(None)
