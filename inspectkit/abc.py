"""
Class composition helpers.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import functools
import types

from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import class_name

# Constants ------------------------------------------------------------------------------------------------------------

# Namespace entries owned by the class object itself, rebuilt by type()
_IMPLICIT = ("__dict__", "__weakref__")


# Methods --------------------------------------------------------------------------------------------------------------

def inherits(subtype: type, supertype: type) -> type:
    """
    Make subtype delegate attribute lookup to supertype.

    Python fixes the bases of a class at creation, so the result is a new class with the
    name and namespace of subtype and supertype as its base. The supertype is also stored
    as the `super_` class attribute.

    Methods using zero-argument super() are copied and bound to the new class; subtype
    itself is left untouched.

    Args:
        subtype: Class whose members are kept.
        supertype: Class to fall back to for members subtype lacks.

    Returns:
        type: The rebuilt subtype.

    Raises:
        TypeError: If either argument is not a class, or the two metaclasses conflict.

    Examples:
        >>> class Stream:
        ...     def pipe(self): return "piped"
        >>> class Reader:
        ...     def read(self): return "read"
        >>> Reader = inherits(Reader, Stream)
        >>> Reader().pipe(), Reader.super_ is Stream
        ('piped', True)
    """
    for name, arg in (("subtype", subtype), ("supertype", supertype)):
        if not isinstance(arg, type):
            raise TypeError(f"{name} must be a class, got {class_name(arg)}")

    namespace: dict[str, Any] = {k: v for k, v in vars(subtype).items() if k not in _IMPLICIT}
    namespace["super_"] = supertype

    # slot descriptors are recreated from __slots__
    slots = namespace.get("__slots__", ())
    for slot in (slots,) if isinstance(slots, str) else slots:
        namespace.pop(slot, None)
        namespace.pop(f"_{subtype.__name__.lstrip('_')}{slot}", None)

    # type() fills __classcell__ with the new class, which zero-argument super() reads
    cell = types.CellType()
    rebound = {name: _rebind_class_cell(member, cell) for name, member in namespace.items()}
    if any(rebound[name] is not namespace[name] for name in namespace):
        rebound["__classcell__"] = cell

    metaclass = type(supertype) if issubclass(type(supertype), type(subtype)) else type(subtype)
    derived = metaclass(subtype.__name__, (supertype,), rebound)
    derived.__qualname__ = subtype.__qualname__
    return derived


# Private Methods ------------------------------------------------------------------------------------------------------

def _rebind_class_cell(member: Any, cell: types.CellType) -> Any:
    """Copy of member whose __class__ closure cell is cell; member itself if it has none."""
    if isinstance(member, (staticmethod, classmethod)):
        func = _rebind_class_cell(member.__func__, cell)
        return member if func is member.__func__ else type(member)(func)

    if isinstance(member, property):
        accessors = (member.fget, member.fset, member.fdel)
        rebound = tuple(_rebind_class_cell(f, cell) for f in accessors)
        if all(new is old for new, old in zip(rebound, accessors)):
            return member
        return type(member)(*rebound, member.__doc__)

    if not isinstance(member, types.FunctionType) or "__class__" not in member.__code__.co_freevars:
        return member

    closure = list(member.__closure__)
    closure[member.__code__.co_freevars.index("__class__")] = cell
    clone = types.FunctionType(
        member.__code__, member.__globals__, member.__name__, member.__defaults__, tuple(closure)
    )
    clone.__kwdefaults__ = member.__kwdefaults__
    functools.update_wrapper(clone, member)
    del clone.__wrapped__
    return clone
