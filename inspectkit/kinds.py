"""
Value kinds: classification of arbitrary values and their one-line renderings.

Every value inspected by inspectkit is classified once into a closed set of kinds.
Leaf kinds have a single-line rendering; Array and Object are composites traversed by inspect().
"""

# Standard library -----------------------------------------------------------------------------------------------------
import collections.abc as abc
import datetime as dt
import inspect
import numbers
import re

from enum import StrEnum, unique
from typing import Any, Callable

# Local ----------------------------------------------------------------------------------------------------------------
from .sentinels import UNDEFINED, HOLE
from .utils import class_name, safe_repr, safe_str

# Constants ------------------------------------------------------------------------------------------------------------

# Implicit members every class namespace carries
CLASS_NOISE = frozenset({
    "__module__",
    "__qualname__",
    "__doc__",
    "__dict__",
    "__weakref__",
    "__annotations__",
    "__annotate__",
    "__annotate_func__",
    "__annotations_cache__",
    "__firstlineno__",
    "__static_attributes__",
    "__type_params__",
    "__orig_bases__",
    "__parameters__",
})

# Implicit members of function objects
CALLABLE_NOISE = frozenset({
    "__name__",
    "__qualname__",
    "__module__",
    "__doc__",
    "__dict__",
    "__weakref__",
    "__annotations__",
    "__defaults__",
    "__kwdefaults__",
    "__code__",
    "__globals__",
    "__closure__",
    "__type_params__",
})


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class Kind(StrEnum):
    """Semantic kind of a value; values double as style names."""
    BOOLEAN = "Boolean"
    NUMBER = "Number"
    STRING = "String"
    DATE = "Date"
    REGEXP = "RegExp"
    ERROR = "Error"
    FUNCTION = "Function"
    CONSTRUCTOR = "Constructor"
    NULL = "Null"
    UNDEFINED = "Undefined"
    ARRAY = "Array"
    OBJECT = "Object"


# Methods --------------------------------------------------------------------------------------------------------------

def classify(value: Any) -> Kind:
    """
    Classify a value into its Kind.

    Priority: Constructor before Function, then Null, Undefined, Boolean, Number, String,
    Date, RegExp, Error; anything else is a composite (Array or Object).

    Examples:
        >>> classify(True)
        <Kind.BOOLEAN: 'Boolean'>
        >>> classify(len)
        <Kind.FUNCTION: 'Function'>
        >>> classify({"a": 1})
        <Kind.OBJECT: 'Object'>
    """
    if isinstance(value, type):
        return Kind.CONSTRUCTOR if _has_own_members(value) else Kind.FUNCTION
    if inspect.isroutine(value):
        return Kind.FUNCTION
    if value is None:
        return Kind.NULL
    if value is UNDEFINED or value is HOLE:
        return Kind.UNDEFINED
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if isinstance(value, numbers.Number):
        return Kind.NUMBER
    if isinstance(value, (str, bytes, bytearray)):
        return Kind.STRING
    if isinstance(value, (dt.date, dt.time)):
        return Kind.DATE
    if isinstance(value, re.Pattern):
        return Kind.REGEXP
    if isinstance(value, BaseException):
        return Kind.ERROR
    if is_namedtuple(value) or isinstance(value, abc.Mapping):
        return Kind.OBJECT
    if isinstance(value, (abc.Sequence, abc.Set)):
        return Kind.ARRAY
    return Kind.OBJECT


def is_namedtuple(value: Any) -> bool:
    return isinstance(value, tuple) and isinstance(getattr(type(value), "_fields", None), tuple)


def quotes(text: str) -> str:
    """
    Quote a string, choosing the quote character not already present in it.

    Backslashes and the chosen quote are escaped; when both quote characters occur,
    single quotes are used and both are escaped. Line breaks and tabs are escaped
    to keep the result on one line.

    Examples:
        >>> quotes("hello")
        "'hello'"
        >>> print(quotes("it's"))
        "it's"
        >>> print(quotes('it\\'s "so"'))
        'it\\'s \\"so\\"'
    """
    has_single, has_double = "'" in text, '"' in text
    quote = '"' if has_single and not has_double else "'"

    text = text.replace("\\", "\\\\")
    text = text.replace(quote, "\\" + quote)
    if has_single and has_double:
        text = text.replace('"', '\\"')
    text = text.replace("\n", "\\n").replace("\r", "\\r").replace("\t", "\\t")
    return f"{quote}{text}{quote}"


def function_label(fn: Any, is_ctor: bool = False) -> str:
    """Label shared by functions and constructors, e.g. '[Function: main]'."""
    kind = "Constructor" if is_ctor else "Function"
    name = getattr(fn, "__name__", "")
    if not isinstance(name, str) or name == "<lambda>":
        name = ""
    return f"[{kind}: {name}]" if name else f"[{kind}]"


def error_text(exc: BaseException) -> str:
    """Error name and message as 'ValueError: bad input', or the bare name."""
    message = safe_str(exc)
    name = class_name(exc)
    return f"{name}: {message}" if message else name


def _fmt_string(value: str | bytes | bytearray) -> str:
    if isinstance(value, str):
        return quotes(value)
    return safe_repr(value)


# Kind -> one-line rendering; Array and Object have none
LEAF_FORMATTERS: dict[Kind, Callable[[Any], str]] = {
    Kind.BOOLEAN: str,
    Kind.CONSTRUCTOR: lambda v: function_label(v, True),
    Kind.DATE: lambda v: v.isoformat(),
    Kind.ERROR: lambda v: f"[{error_text(v)}]",
    Kind.FUNCTION: lambda v: function_label(v, False),
    Kind.NULL: str,
    Kind.NUMBER: safe_str,
    Kind.REGEXP: safe_repr,
    Kind.STRING: _fmt_string,
    Kind.UNDEFINED: lambda v: "undefined",
}

# Kinds never traversed, whatever the depth
ATOMIC_KINDS = frozenset({
    Kind.BOOLEAN,
    Kind.NUMBER,
    Kind.STRING,
    Kind.NULL,
    Kind.UNDEFINED,
    Kind.ERROR,
})


def format_leaf(value: Any, kind: Kind | None = None) -> str | None:
    """
    Render a value of a leaf kind on one line; None for composites.

    Rendering failures fall back to a safe repr.
    """
    kind = classify(value) if kind is None else kind
    formatter = LEAF_FORMATTERS.get(kind)
    if formatter is None:
        return None
    try:
        return formatter(value)
    except Exception:
        return safe_repr(value)


# Predicates -----------------------------------------------------------------------------------------------------------

def is_kind(*kinds: Kind) -> Callable[[Any], bool]:
    """
    Return a predicate testing whether a value is classified as one of kinds.

    Examples:
        >>> is_date = is_kind(Kind.DATE)
        >>> is_date(dt.date(2020, 1, 1))
        True
    """
    wanted = frozenset(kinds)

    def predicate(value: Any) -> bool:
        return classify(value) in wanted

    return predicate


def is_primitive(value: Any) -> bool:
    """True for None, UNDEFINED, booleans, numbers and strings (text or bytes)."""
    return classify(value) in ATOMIC_KINDS - {Kind.ERROR}


is_undefined = is_kind(Kind.UNDEFINED)
is_function = is_kind(Kind.FUNCTION, Kind.CONSTRUCTOR)
is_boolean = is_kind(Kind.BOOLEAN)
is_string = is_kind(Kind.STRING)
is_number = is_kind(Kind.NUMBER)
is_regexp = is_kind(Kind.REGEXP)
is_object = is_kind(Kind.OBJECT)
is_array = is_kind(Kind.ARRAY)
is_error = is_kind(Kind.ERROR)
is_date = is_kind(Kind.DATE)
is_null = is_kind(Kind.NULL)


# Private Methods ------------------------------------------------------------------------------------------------------

def _has_own_members(cls: type) -> bool:
    """Check whether a class namespace holds anything beyond the implicit members."""
    try:
        return any(name not in CLASS_NOISE for name in vars(cls))
    except TypeError:
        return False
