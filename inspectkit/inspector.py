"""
Recursive value inspector.

Renders any value into a deterministic, human-readable, optionally colorized string.
Handles cyclic graphs, depth limits, accessors, broken members and values overriding
their own rendering through __inspect__().
"""

# Standard library -----------------------------------------------------------------------------------------------------
import collections.abc as abc

from dataclasses import dataclass, field
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .deprecation import _deprecation_warning
from .descriptors import (
    CONSTRUCTOR_KEY,
    PropertyDescriptor,
    PropertyKey,
    Slot,
    get_descriptor,
    own_keys,
    read_value,
)
from .kinds import ATOMIC_KINDS, Kind, classify, format_leaf, quotes
from .sentinels import HOLE
from .styles import reflect, stylize
from .utils import class_name, safe_repr, safe_str

# Constants ------------------------------------------------------------------------------------------------------------

DEFAULT_DEPTH = 2

# Single-line budget of a composite before it wraps one member per line
LINE_WIDTH = 60


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass
class FormatSession:
    """
    State of one top-level inspect() call.

    Attributes:
        show_hidden: Include non-enumerable members.
        colorize: Wrap tokens in ANSI color escapes.
        seen: Composites entered so far, keyed by identity; never shrinks during the session.
    """
    show_hidden: bool = False
    colorize: bool = False
    seen: dict[int, Any] = field(default_factory=dict)

    def __post_init__(self):
        self.square = (self.style("[", "Square"), self.style("]", "Square"))
        self.curly = (self.style("{", "Curly"), self.style("}", "Curly"))

    def style(self, text: str, style: str) -> str:
        return stylize(text, style) if self.colorize else reflect(text, style)

    def remember(self, value: Any) -> None:
        self.seen[id(value)] = value

    def has_seen(self, value: Any) -> bool:
        return id(value) in self.seen


# Methods --------------------------------------------------------------------------------------------------------------

def inspect(value: Any,
            show_hidden: bool = False,
            depth: int | None = DEFAULT_DEPTH,
            colorize: bool = False,
            *,
            resolve_getters: bool | None = None) -> str:
    """
    Render a value as a human-readable string.

    Never raises for any value: circular references, callables, dates, regular expressions,
    exceptions and objects with failing members are all rendered.

    Args:
        value: Any Python object.
        show_hidden: Show non-enumerable members (underscore attributes, methods, properties,
            implicit back-references).
        depth: How many levels to descend into nested composites. None never cuts off.
        colorize: Color the output with ANSI escape codes.
        resolve_getters: Removed. Accessors are never invoked; passing it only warns.

    Returns:
        str: The rendering.

    Raises:
        TypeError: If depth is not an int or None.

    Examples:
        >>> inspect({"a": 1, "b": 2})
        '{ a: 1, b: 2 }'
        >>> inspect([1, [2, [3, [4]]]])
        '[ 1, [ 2, [ 3, «More» ] ] ]'
        >>> d = {}; d["self"] = d
        >>> inspect(d)
        '{ self: «Circular» }'
    """
    if resolve_getters is not None:
        _deprecation_warning(
            "inspect",
            "inspect(resolve_getters=...) is deprecated and ignored, accessors are never invoked.",
        )

    if depth is not None and (not isinstance(depth, int) or isinstance(depth, bool)):
        raise TypeError(f"depth must be an int or None, got {class_name(depth)}")

    session = FormatSession(show_hidden=bool(show_hidden), colorize=bool(colorize))
    return _format_value(value, depth, session)


# Private Methods ------------------------------------------------------------------------------------------------------

def _custom_inspect(value: Any) -> abc.Callable | None:
    """Return the value's own __inspect__ hook, if it has a usable one."""
    # Classes expose the hook of their instances, unbound
    if isinstance(value, type):
        return None
    try:
        hook = getattr(value, "__inspect__", None)
    except Exception:
        return None
    if not callable(hook) or getattr(hook, "__func__", hook) is inspect:
        return None
    return hook


def _format_value(value: Any, depth: int | None, session: FormatSession) -> str:
    hook = _custom_inspect(value)
    if hook is not None:
        try:
            return safe_str(hook(depth))
        except Exception as exc:
            value = exc

    try:
        kind = classify(value)
    except Exception as exc:
        value, kind = exc, Kind.ERROR

    base = format_leaf(value, kind) or ""
    if base:
        base = session.style(base, kind)

    if kind in ATOMIC_KINDS or (kind is Kind.REGEXP and not session.show_hidden):
        return base

    # Out of depth: labelled kinds keep their label, bare composites collapse to More
    if depth is not None and depth < 0:
        return base or session.style("«More»", "More")

    array = kind is Kind.ARRAY
    braces = session.square if array else session.curly

    try:
        keys = own_keys(value, kind, session.show_hidden)
        items = tuple(value) if isinstance(value, abc.Set) else None
    except Exception as exc:
        return _format_value(exc, depth, session)

    if not keys:
        return base or braces[0] + braces[1]

    session.remember(value)

    output = []
    for key in keys:
        try:
            desc = get_descriptor(value, key, items)
        except Exception as exc:
            desc = PropertyDescriptor(value=exc, enumerable=key.enumerable)
        if desc is None:
            desc = PropertyDescriptor(value=read_value(value, key, items), enumerable=True, writable=True)

        text = _format_property(key, desc, depth, session, array)
        if text is not None:
            output.append(text)

    if not output:
        return base or braces[0] + braces[1]

    return _combine(output, base, braces)


def _format_property(key: PropertyKey,
                     desc: PropertyDescriptor,
                     depth: int | None,
                     session: FormatSession,
                     array: bool) -> str | None:
    """Render one member as 'key: value'; None drops the member."""
    if desc.is_accessor:
        tags = [tag for tag, on in (("Getter", desc.getter), ("Setter", desc.setter)) if on]
        text = session.style(f"«{'/'.join(tags)}»", "Accessor")

    elif array and key.slot is Slot.INDEX and desc.value is HOLE:
        text = ""

    elif session.has_seen(desc.value):
        if session.show_hidden and key.slot is Slot.ATTR and key.name == CONSTRUCTOR_KEY:
            return None
        text = session.style("«Circular»", "Circular")

    else:
        text = _format_value(desc.value, None if depth is None else depth - 1, session)
        if "\n" in text:
            text = "\n".join("  " + line for line in text.split("\n"))
            text = text[2:] if array else "\n" + text

    # Array indices don't display their name
    if array and key.slot is Slot.INDEX:
        return text

    return f"{_format_key(key, desc, session)}: {text}"


def _format_key(key: PropertyKey, desc: PropertyDescriptor, session: FormatSession) -> str:
    name = key.name
    if isinstance(name, str) and name.isidentifier():
        style = "Constant" if not desc.writable and not desc.is_accessor else "Name"
    elif isinstance(name, str):
        style = "String"
        name = quotes(name)
    else:
        style = "Name"
        name = format_leaf(name) or safe_repr(name)

    if desc.enumerable:
        return session.style(name, style)
    if session.colorize:
        return session.style(name, "H" + style)
    return f"[{name}]"


def _combine(output: list[str], base: str, braces: tuple[str, str]) -> str:
    """Lay out rendered members on one line, or one member per line when too long."""
    lines = sum(1 + ("\n" in piece) for piece in output)
    length = sum(len(piece) + 1 for piece in output)
    wrap = length > LINE_WIDTH or lines > len(output)

    if base and wrap and lines > 1:
        # label on a line of its own
        base = " " + base
        output = ["", *output]
    elif base:
        base = " " + base + " "
    else:
        base = " "

    separator = ",\n  " if wrap else ", "
    return braces[0] + base + separator.join(output) + " " + braces[1]
