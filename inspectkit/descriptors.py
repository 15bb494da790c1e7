"""
Property introspection for composite values.

Lists the own members of a value as PropertyKey entries and describes each one with a
PropertyDescriptor snapshot: value, enumerable/writable/configurable flags and accessor flags.
Accessors are described, never invoked.

Enumerable members are what inspect() shows by default: sequence elements, mapping entries,
public instance attributes and public data attributes of classes. Hidden members are
underscore names, methods and descriptors of classes, properties of an instance's class
and the implicit back-references (__class__ of instances, __base__ of classes).
"""

# Standard library -----------------------------------------------------------------------------------------------------
import collections.abc as abc
import inspect

from dataclasses import dataclass
from enum import StrEnum, unique
from typing import Any, Iterator, NamedTuple

# Local ----------------------------------------------------------------------------------------------------------------
from .kinds import CALLABLE_NOISE, CLASS_NOISE, Kind, classify, is_namedtuple

# Constants ------------------------------------------------------------------------------------------------------------

# Implicit back-reference from an instance to its class
CONSTRUCTOR_KEY = "__class__"

# Delegate a class falls back to for attribute lookup
PROTOTYPE_KEY = "__base__"

PATTERN_MEMBERS = ("pattern", "flags", "groups", "groupindex")


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class Slot(StrEnum):
    """Where a member lives on its owner."""
    INDEX = "index"  # sequence element
    ITEM = "item"  # mapping entry
    ATTR = "attr"  # attribute
    FIELD = "field"  # schema-declared field, e.g. namedtuple


class PropertyKey(NamedTuple):
    name: Any
    slot: Slot
    enumerable: bool = True


@dataclass(frozen=True)
class PropertyDescriptor:
    """
    Read-only snapshot of a single member.

    Attributes:
        value: The member value; None for accessors.
        enumerable: Shown without show_hidden.
        writable: Can be reassigned.
        configurable: Can be removed.
        getter: Member is computed on read.
        setter: Member runs code on write.
    """
    value: Any = None
    enumerable: bool = True
    writable: bool = True
    configurable: bool = True
    getter: bool = False
    setter: bool = False

    @property
    def is_accessor(self) -> bool:
        return self.getter or self.setter


# Methods --------------------------------------------------------------------------------------------------------------

def own_keys(obj: Any, kind: Kind | None = None, show_hidden: bool = False) -> list[PropertyKey]:
    """
    List the own members of a value in display order.

    Sequence indices come first in ascending order, then mapping keys or namedtuple fields
    in their natural order, then attributes in insertion order. With show_hidden, hidden
    members are included; class properties and the implicit back-reference come last.

    Args:
        obj: The value to introspect.
        kind: Precomputed classification of obj; classified here if None.
        show_hidden: Include non-enumerable members.

    Returns:
        list[PropertyKey]: Keys with their slot and enumerable flag.

    Examples:
        >>> own_keys({"a": 1})
        [PropertyKey(name='a', slot=<Slot.ITEM: 'item'>, enumerable=True)]
        >>> [k.name for k in own_keys([10, 20])]
        [0, 1]
    """
    kind = classify(obj) if kind is None else kind

    if isinstance(obj, type):
        return _class_keys(obj, kind, show_hidden)

    if kind is Kind.REGEXP:
        if not show_hidden:
            return []
        return [PropertyKey(name, Slot.ATTR, False) for name in PATTERN_MEMBERS]

    keys: list[PropertyKey] = []
    if kind is Kind.ARRAY:
        keys.extend(PropertyKey(i, Slot.INDEX) for i in range(len(obj)))
    elif is_namedtuple(obj):
        keys.extend(PropertyKey(name, Slot.FIELD) for name in type(obj)._fields)
    elif isinstance(obj, abc.Mapping):
        keys.extend(PropertyKey(k, Slot.ITEM) for k in obj.keys())

    keys.extend(_attr_keys(obj, kind, show_hidden))
    return keys


def get_descriptor(obj: Any, key: PropertyKey, items: abc.Sequence | None = None) -> PropertyDescriptor | None:
    """
    Describe a member without invoking accessors.

    Args:
        obj: Owner of the member.
        key: Key as returned by own_keys().
        items: Indexable snapshot of obj elements, for unordered collections such as sets.

    Returns:
        PropertyDescriptor | None: None when the member has no native descriptor
        (schema-declared fields, members missing from the owner namespace).
    """
    if key.slot is Slot.FIELD:
        return None

    if key.slot is Slot.INDEX:
        return PropertyDescriptor(
            value=read_value(obj, key, items),
            enumerable=key.enumerable,
            writable=isinstance(obj, abc.MutableSequence),
        )

    if key.slot is Slot.ITEM:
        return PropertyDescriptor(
            value=read_value(obj, key),
            enumerable=key.enumerable,
            writable=isinstance(obj, abc.MutableMapping),
        )

    if isinstance(obj, type):
        return _class_member_descriptor(obj, key)
    return _instance_attr_descriptor(obj, key)


def read_value(obj: Any, key: PropertyKey, items: abc.Sequence | None = None) -> Any:
    """
    Read a raw member value; a failing read returns the raised exception instead.
    """
    try:
        if key.slot is Slot.INDEX:
            return (obj if items is None else items)[key.name]
        if key.slot is Slot.ITEM:
            return obj[key.name]
        return getattr(obj, key.name)
    except Exception as exc:
        return exc


# Private Methods ------------------------------------------------------------------------------------------------------

def _attr_keys(obj: Any, kind: Kind, show_hidden: bool) -> list[PropertyKey]:
    names = []
    namespace = getattr(obj, "__dict__", None)
    if isinstance(namespace, abc.Mapping):
        names.extend(name for name in namespace if isinstance(name, str))

    for name in _slot_names(type(obj)):
        if name not in names and _has_slot_value(obj, name):
            names.append(name)

    if kind is Kind.FUNCTION:
        names = [name for name in names if name not in CALLABLE_NOISE]

    keys = [PropertyKey(name, Slot.ATTR, _is_public(name)) for name in names]
    if not show_hidden:
        return [k for k in keys if k.enumerable]

    for name in _class_properties(type(obj)):
        if name not in names:
            keys.append(PropertyKey(name, Slot.ATTR, False))

    if kind in (Kind.OBJECT, Kind.ARRAY) and type(obj).__module__ != "builtins":
        keys.append(PropertyKey(CONSTRUCTOR_KEY, Slot.ATTR, False))

    return keys


def _class_keys(cls: type, kind: Kind, show_hidden: bool) -> list[PropertyKey]:
    keys = []
    for name, raw in vars(cls).items():
        if not isinstance(name, str) or name in CLASS_NOISE:
            continue
        enumerable = _is_public(name) and not _is_member_like(raw)
        if enumerable or show_hidden:
            keys.append(PropertyKey(name, Slot.ATTR, enumerable))

    if show_hidden and kind is Kind.CONSTRUCTOR and cls.__base__ not in (None, object):
        keys.append(PropertyKey(PROTOTYPE_KEY, Slot.ATTR, False))

    return keys


def _class_member_descriptor(cls: type, key: PropertyKey) -> PropertyDescriptor | None:
    name = key.name
    if name == PROTOTYPE_KEY:
        return PropertyDescriptor(value=cls.__base__, enumerable=False)

    try:
        raw = vars(cls)[name]
    except KeyError:
        return None

    if isinstance(raw, property):
        return _property_descriptor(raw, key)

    if isinstance(raw, (staticmethod, classmethod)):
        return PropertyDescriptor(value=raw.__func__, enumerable=key.enumerable)

    if inspect.isdatadescriptor(raw):
        # slots, C-level getters and the like
        return PropertyDescriptor(
            enumerable=key.enumerable,
            writable=hasattr(type(raw), "__set__"),
            getter=hasattr(type(raw), "__get__"),
            setter=hasattr(type(raw), "__set__"),
        )

    # ALL_CAPS class attributes are constants by convention
    return PropertyDescriptor(value=raw, enumerable=key.enumerable, writable=not name.isupper())


def _instance_attr_descriptor(obj: Any, key: PropertyKey) -> PropertyDescriptor | None:
    name = key.name
    if name == CONSTRUCTOR_KEY:
        return PropertyDescriptor(value=type(obj), enumerable=False)

    writable = not _is_frozen(obj)
    namespace = getattr(obj, "__dict__", None)
    if isinstance(namespace, abc.Mapping) and name in namespace:
        return PropertyDescriptor(value=namespace[name], enumerable=key.enumerable, writable=writable)

    attr = _class_lookup(type(obj), name)
    if isinstance(attr, property):
        return _property_descriptor(attr, key)
    if inspect.isdatadescriptor(attr):
        return PropertyDescriptor(value=read_value(obj, key), enumerable=key.enumerable, writable=writable)

    return None


def _property_descriptor(prop: property, key: PropertyKey) -> PropertyDescriptor:
    return PropertyDescriptor(
        enumerable=key.enumerable,
        writable=prop.fset is not None,
        getter=prop.fget is not None,
        setter=prop.fset is not None,
    )


def _class_lookup(cls: type, name: str) -> Any:
    """Find name in the class hierarchy namespaces without triggering descriptors."""
    for klass in cls.__mro__:
        namespace = vars(klass)
        if name in namespace:
            return namespace[name]
    return None


def _class_properties(cls: type) -> list[str]:
    names = []
    for klass in cls.__mro__[:-1]:
        for name, attr in vars(klass).items():
            if isinstance(attr, property) and name not in names:
                names.append(name)
    return names


def _slot_names(cls: type) -> Iterator[str]:
    for klass in cls.__mro__:
        slots = vars(klass).get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__"):
                continue
            if name.startswith("__") and not name.endswith("__"):
                name = f"_{klass.__name__.lstrip('_')}{name}"
            yield name


def _has_slot_value(obj: Any, name: str) -> bool:
    try:
        getattr(obj, name)
    except AttributeError:
        return False
    except Exception:
        # listed anyway, the read failure is rendered in place
        return True
    return True


def _is_frozen(obj: Any) -> bool:
    params = getattr(type(obj), "__dataclass_params__", None)
    return bool(getattr(params, "frozen", False))


def _is_member_like(raw: Any) -> bool:
    """Methods and descriptors of a class, as opposed to its plain data attributes."""
    return (
        inspect.isroutine(raw)
        or isinstance(raw, (staticmethod, classmethod, property))
        or inspect.isdatadescriptor(raw)
    )


def _is_public(name: Any) -> bool:
    return isinstance(name, str) and not name.startswith("_")
