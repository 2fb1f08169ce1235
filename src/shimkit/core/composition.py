"""Object composition: non-destructive merge, destructive extend, inheritance.

``merge`` and ``extend`` copy the *own* keys of ``src`` onto ``dest``. Own
keys are mapping keys, or the instance attributes of a plain object
(``vars(obj)``); attributes a plain object only inherits from its class are
never copied. ``dest`` may be a mutable mapping or any object that accepts
attribute assignment.

``inherit`` wires a single-parent relationship between two classes after
they have been defined and records the parent on the child as ``_super``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from typing import Any, Dict, Optional, TypeVar

from shimkit.core.collections import own_items

logger = logging.getLogger(__name__)

D = TypeVar("D")

SUPER_ATTR = "_super"

# Per-class descriptors that type() creates itself.
_GENERATED_MEMBERS = frozenset({"__dict__", "__weakref__"})


def _defines(dest: Any, key: Any) -> bool:
    if isinstance(dest, Mapping):
        return key in dest
    return hasattr(dest, key)


def _assign(dest: Any, key: Any, value: Any) -> None:
    if isinstance(dest, MutableMapping):
        dest[key] = value
    else:
        setattr(dest, key, value)


def merge(dest: D, src: Any) -> D:
    """Copy keys of ``src`` that ``dest`` does not define yet.

    Presence is what counts: a key already on ``dest`` holding ``0``,
    ``False``, ``""`` or ``None`` is left alone.

    Returns:
        ``dest``, mutated in place.
    """
    for key, value in own_items(src):
        if not _defines(dest, key):
            _assign(dest, key, value)
    return dest


def extend(dest: D, src: Any) -> D:
    """Copy every own key of ``src`` onto ``dest``, overwriting existing values.

    Returns:
        ``dest``, mutated in place.
    """
    for key, value in own_items(src):
        _assign(dest, key, value)
    return dest


def _rebase(child: type, parent: type) -> bool:
    """Point ``child`` at ``parent`` in place; False when the runtime refuses."""
    try:
        child.__bases__ = (parent,)
    except TypeError as e:
        logger.debug("Cannot rebase %s onto %s: %s", child.__name__, parent.__name__, e)
        return False
    return True


def _static_members(cls: type) -> Dict[str, Any]:
    """Type-level members of ``cls``: static/class methods and plain data."""
    members: Dict[str, Any] = {}
    for name, value in vars(cls).items():
        if name.startswith("__"):
            continue
        if isinstance(value, (staticmethod, classmethod)):
            members[name] = value
        elif not callable(value) and not hasattr(value, "__get__"):
            members[name] = value
    return members


def _class_namespace(cls: type) -> Dict[str, Any]:
    namespace = {
        name: value
        for name, value in vars(cls).items()
        if name not in _GENERATED_MEMBERS
    }
    namespace["__qualname__"] = cls.__qualname__
    slots = namespace.get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)
    for slot in slots:
        # Slot descriptors are recreated from __slots__.
        namespace.pop(slot, None)
    return namespace


def _derive(child: type, parent: type) -> type:
    """Build a stand-in for ``child`` whose base is ``parent``."""
    namespace = extend(_static_members(parent), _class_namespace(child))
    return type(child)(child.__name__, (parent,), namespace)


def inherit(child: type, parent: type, properties: Optional[Mapping] = None) -> type:
    """Make ``child`` a single-parent subclass of ``parent``.

    The child keeps its own members; anything it does not define resolves
    through ``parent``. ``properties`` are then copied onto the child with
    ``extend`` and win over both. Finally ``child._super`` is set to
    ``parent`` for explicit delegation, e.g. ``Dog._super.speak(self)``.

    When CPython refuses to swap the bases in place (for instance when
    ``child`` derives directly from ``object``), an equivalent class with the
    same name, namespace and ``parent`` as its base is created instead, with
    ``parent``'s static members copied in underneath the child's own.
    Callers should therefore always use the returned class::

        Dog = inherit(Dog, Animal)

    Zero-argument ``super()`` inside the child's methods is bound to the
    original class object and does not survive that replacement; delegate
    through ``_super`` instead.

    Args:
        child: Class to re-parent.
        parent: New base class.
        properties: Optional members to copy onto the resulting class.

    Returns:
        The class that now inherits from ``parent``.
    """
    if _rebase(child, parent):
        derived = child
    else:
        derived = _derive(child, parent)
        logger.debug("Derived %s from %s", derived.__qualname__, parent.__name__)

    if properties:
        extend(derived, properties)

    setattr(derived, SUPER_ATTR, parent)
    return derived


__all__ = ["merge", "extend", "inherit", "SUPER_ATTR"]
