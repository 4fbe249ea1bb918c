"""Read-only containers for request payloads.

``FrozenDict`` and ``FrozenList`` stay plain ``dict`` and ``tuple`` instances,
so they compare equal to the ``dict`` and ``list`` values they were built from
and serialise with ``json`` unchanged, but reject in-place changes and hash.
"""

import copy
from collections.abc import Mapping, Set
from typing import Any, Dict, NoReturn


def _readonly(self: Any, *args: Any, **kwargs: Any) -> NoReturn:
    raise TypeError(f"'{type(self).__name__}' object is immutable")


class FrozenDict(dict):
    __setitem__ = _readonly
    __delitem__ = _readonly
    __ior__ = _readonly
    clear = _readonly
    pop = _readonly
    popitem = _readonly
    setdefault = _readonly
    update = _readonly

    def __hash__(self) -> int:  # type: ignore[override]
        return hash(frozenset(self.items()))

    def __copy__(self) -> "FrozenDict":
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> "FrozenDict":
        return self

    def __reduce__(self) -> Any:
        return (type(self), (dict(self),))


class FrozenList(tuple):
    """A tuple that also compares equal to a list with the same items."""

    def __eq__(self, other: object) -> bool:
        if isinstance(other, list):
            other = tuple(other)
        return tuple.__eq__(self, other)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    __hash__ = tuple.__hash__

    def __copy__(self) -> "FrozenList":
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> "FrozenList":
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


def freeze(value: Any) -> Any:
    """Return a deep, read-only copy of ``value``.

    Mappings become ``FrozenDict``, lists and tuples ``FrozenList`` and sets
    ``frozenset``. Scalars and other objects are deep-copied as is.
    """
    if isinstance(value, (FrozenDict, FrozenList)):
        return value
    if isinstance(value, Mapping):
        return FrozenDict((key, freeze(item)) for key, item in value.items())
    if isinstance(value, (list, tuple)):
        return FrozenList(freeze(item) for item in value)
    if isinstance(value, Set):
        return frozenset(freeze(item) for item in value)
    return copy.deepcopy(value)


def thaw(value: Any) -> Any:
    """Return a mutable copy of a frozen value, for handing to HTTP clients."""
    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, FrozenList):
        return [thaw(item) for item in value]
    if isinstance(value, (set, frozenset)):
        return [thaw(item) for item in value]
    return value
