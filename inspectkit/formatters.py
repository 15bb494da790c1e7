"""
Printf-like string formatting with %s, %d, %j and %% placeholders.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import json
import math
import numbers
import re

from functools import partial
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .inspector import inspect
from .kinds import is_primitive
from .utils import safe_str

# Constants ------------------------------------------------------------------------------------------------------------

FORMAT_PATTERN = re.compile(r"%[sdj%]")


# Methods --------------------------------------------------------------------------------------------------------------

def format(*args: Any) -> str:
    """
    Build a string from a printf-like template and arguments.

    If the first argument is not a str, every argument is rendered with inspect() and the
    renderings are joined with single spaces.

    Otherwise the first argument is a template scanned for placeholders:
        %s: str() of the next argument
        %d: the next argument coerced to a number
        %j: JSON of the next argument
        %%: a literal percent sign, consumes no argument

    Placeholders left without an argument are kept literally. Arguments left without a
    placeholder are appended, separated by spaces: primitives as str(), anything else
    rendered with inspect().

    Examples:
        >>> format("%s has %d items", "cart", 3)
        'cart has 3 items'
        >>> format("%s: %j", "payload", {"id": 7})
        'payload: {"id": 7}'
        >>> format("100%% done, %s", "now", [1, 2])
        '100% done, now [ 1, 2 ]'
        >>> format("%s and %s", "one")
        'one and %s'
        >>> format({"a": 1}, 2)
        '{ a: 1 } 2'
    """
    if not args or not isinstance(args[0], str):
        return " ".join(inspect(arg) for arg in args)

    template, rest = args[0], list(args[1:])
    position = 0

    def replace(match: re.Match) -> str:
        nonlocal position
        token = match.group(0)
        if token == "%%":
            return "%"
        if position >= len(rest):
            return token
        arg = rest[position]
        position += 1
        if token == "%s":
            return safe_str(arg)
        if token == "%d":
            return _fmt_number(arg)
        return _fmt_json(arg)

    text = FORMAT_PATTERN.sub(replace, template)
    for arg in rest[position:]:
        text += " " + (safe_str(arg) if is_primitive(arg) else inspect(arg))
    return text


# Private Methods ------------------------------------------------------------------------------------------------------

def _fmt_number(arg: Any) -> str:
    """Coerce to a number the way %d expects; non-numeric input gives 'NaN'."""
    if isinstance(arg, bool):
        return str(int(arg))
    if isinstance(arg, numbers.Integral):
        return str(int(arg))
    if isinstance(arg, float):
        if math.isnan(arg):
            return "NaN"
        if math.isinf(arg):
            return "Infinity" if arg > 0 else "-Infinity"
        return str(arg)
    if isinstance(arg, (str, bytes)):
        text = arg.strip()
        if not text:
            return "0"
        # plain decimals, then 0x/0o/0b prefixed literals, then floats
        for convert in (int, partial(int, base=0), float):
            try:
                return _fmt_number(convert(text))
            except ValueError:
                continue
        return "NaN"
    if arg is None:
        return "0"
    try:
        return _fmt_number(float(arg))
    except (TypeError, ValueError):
        return "NaN"


def _fmt_json(arg: Any) -> str:
    try:
        return json.dumps(arg, default=safe_str)
    except ValueError:
        # Circular reference detected
        return "[Circular]"
    except TypeError:
        # Mapping keys json cannot encode
        return safe_str(arg)
