"""Uniform traversal and membership helpers for collection-like values.

``each`` walks three container shapes with one visitor signature,
``visitor(value, index_or_key, collection)``:

  • objects that provide their own ``for_each(visitor, context)``;
  • sized values (sequences, array-likes, sets and other sized iterables),
    visited by position in ascending order;
  • mappings and plain objects, visited by own key.

``in_array`` and ``unique_array`` build on top of it and report absence with
the ``-1`` sentinel instead of raising.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sized
from typing import Any, Callable, Hashable, List, Optional, Protocol, Sequence, runtime_checkable

from shimkit.core.resolver import bind_fn

Visitor = Callable[[Any, Any, Any], Any]

NOT_FOUND = -1


@runtime_checkable
class SupportsForEach(Protocol):
    """A container that knows how to visit its own elements."""

    def for_each(self, visitor: Visitor, context: Any = None) -> None: ...


@runtime_checkable
class IndexedSequence(Protocol):
    """An array-like: a length plus integer indexing."""

    def __len__(self) -> int: ...

    def __getitem__(self, index: int) -> Any: ...


def own_items(obj: object) -> List[tuple]:
    """Snapshot the own key/value pairs of a mapping or plain object."""
    if isinstance(obj, Mapping):
        return [(key, obj[key]) for key in list(obj.keys())]
    try:
        # Instance attributes only; class attributes are inherited.
        return list(vars(obj).items())
    except TypeError:
        return []


def each(obj: Any, iterator: Visitor, context: Any = None) -> None:
    """Invoke ``iterator(value, index_or_key, obj)`` for every element of ``obj``.

    Args:
        obj: Sequence, array-like, sized iterable, mapping or plain object.
        iterator: The visitor.
        context: Optional receiver; when given, the visitor is bound to it and
            receives it as its first argument.
    """
    if isinstance(obj, SupportsForEach):
        obj.for_each(iterator, context)
        return

    visitor = iterator if context is None else bind_fn(iterator, context)

    if isinstance(obj, Mapping):
        for key, value in own_items(obj):
            visitor(value, key, obj)
    elif isinstance(obj, IndexedSequence):
        # Length is fixed before the walk starts.
        for i in range(len(obj)):
            visitor(obj[i], i, obj)
    elif isinstance(obj, Sized) and isinstance(obj, Iterable):
        for i, value in enumerate(list(obj)):
            visitor(value, i, obj)
    else:
        for key, value in own_items(obj):
            visitor(value, key, obj)


# Compared by value; everything else is compared by identity.
_VALUE_TYPES = (int, float, complex, str, bytes, bool, type(None))


def _strict_equals(left: Any, right: Any) -> bool:
    if left is right:
        return True
    return type(left) is type(right) and type(left) in _VALUE_TYPES and left == right


def lookup(item: Any, key: Hashable) -> Any:
    """Read ``item[key]``, falling back to attribute access; missing reads as None."""
    if isinstance(item, Mapping):
        return item.get(key)
    if isinstance(key, str) and not isinstance(item, (str, bytes)):
        return getattr(item, key, None)
    try:
        return item[key]
    except (IndexError, KeyError, TypeError):
        return None


def in_array(src: Sequence[Any], find: Any, find_by_key: Optional[Hashable] = None) -> int:
    """Return the index of the first match in ``src``, or -1.

    Without ``find_by_key`` elements are compared strictly: identical
    objects, or values of the same type that compare equal (so ``1`` does
    not match ``True`` or ``1.0``). With ``find_by_key``, ``item[find_by_key]``
    is compared loosely with ``==``.
    """
    for i in range(len(src)):
        item = src[i]
        if find_by_key:
            if lookup(item, find_by_key) == find:
                return i
        elif _strict_equals(item, find):
            return i
    return NOT_FOUND


def unique_array(src: Sequence[Any], key: Hashable) -> List[Any]:
    """Keep the first element for each distinct ``item[key]``, in order."""
    results: List[Any] = []
    keys: List[Any] = []

    def visit(item: Any, index: int, collection: Any) -> None:
        value = lookup(item, key)
        if in_array(keys, value) < 0:
            results.append(item)
        keys.append(value)

    each(src, visit)
    return results


def to_array(obj: Any) -> List[Any]:
    """Copy an array-like (or any iterable) into a new list."""
    if isinstance(obj, IndexedSequence) and not isinstance(obj, Mapping):
        return [obj[i] for i in range(len(obj))]
    return list(obj)


__all__ = [
    "NOT_FOUND",
    "SupportsForEach",
    "IndexedSequence",
    "each",
    "own_items",
    "lookup",
    "in_array",
    "unique_array",
    "to_array",
]
