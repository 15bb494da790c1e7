"""
Sentinel objects for values that have no Python counterpart.

All sentinels use identity checks (using 'is') rather than equality checks.

Sentinels:
    UNDEFINED: A value that was never assigned (distinguishes from None)
    HOLE: An absent element of a sparse array; rendered as an empty slot by inspect()

Example:
    >>> from inspectkit.inspector import inspect
    >>> inspect([1, HOLE, 3])
    '[ 1, , 3 ]'
    >>> inspect(UNDEFINED)
    'undefined'
"""

from typing import Any, Final

__all__ = [
    'UNDEFINED',
    'HOLE',
    'UndefinedType',
    'HoleType',
]


# Base Sentinel --------------------------------------------------------------------------------------------------------

class _SentinelBase:
    """
    Base class for all sentinel objects.

    Sentinels are singleton objects optimized for identity checks.
    """
    __slots__ = ('_name',)

    _instance = None

    def __new__(cls) -> '_SentinelBase':
        """Ensures singleton behavior per sentinel type."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        self._name = self._sentinel_name

    def __repr__(self) -> str:
        """Returns a clean string representation for debugging."""
        return f'<{self._name}>'

    def __eq__(self, other: Any) -> bool:
        """Ensures identity-based comparison."""
        return self is other

    def __hash__(self) -> int:
        return id(self)

    def __bool__(self) -> bool:
        """Sentinels are falsy."""
        return False

    def __reduce__(self) -> tuple:
        """Ensure pickling returns the singleton instance."""
        return (self.__class__, ())


# Sentinel Types -------------------------------------------------------------------------------------------------------

class UndefinedType(_SentinelBase):
    """
    Sentinel type for UNDEFINED.

    Marks a slot that exists but was never given a value.
    """
    __slots__ = ()
    _instance: 'UndefinedType | None' = None
    _sentinel_name = "UNDEFINED"


class HoleType(_SentinelBase):
    """
    Sentinel type for HOLE.

    Marks an absent index of a sparse sequence.
    """
    __slots__ = ()
    _instance: 'HoleType | None' = None
    _sentinel_name = "HOLE"


# Sentinel Instances ---------------------------------------------------------------------------------------------------

UNDEFINED: Final[UndefinedType] = UndefinedType()
HOLE: Final[HoleType] = HoleType()
