"""Vendor-prefixed member resolution.

Some hosts expose a capability under its standard name, others only under a
vendor-prefixed variant (``requestFullscreen`` vs ``webkitRequestFullscreen``
vs ``mozRequestFullscreen``). ``prefixed`` finds whichever variant a host
provides and uses it as a method or as a value:

    >>> exit_fullscreen = prefixed(document, "exitFullscreen")
    >>> if exit_fullscreen is not None:
    ...     exit_fullscreen()
    >>> prefixed(style, "transform", "rotate(45deg)")   # set
    >>> prefixed(style, "transform")                     # get

Nothing is cached; every call searches the host again.
"""

from __future__ import annotations

import functools
import inspect
import logging
import types
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Iterator, Tuple

if TYPE_CHECKING:
    from shimkit.core.config.schema import ResolverConfig

logger = logging.getLogger(__name__)

# Unprefixed first, then vendor prefixes in search order.
VENDOR_PREFIXES: Tuple[str, ...] = ("", "webkit", "moz", "MS", "ms")


class _Omitted:
    """Marker for an argument the caller did not pass."""

    def __repr__(self) -> str:
        return "<omitted>"

    def __bool__(self) -> bool:
        return False


OMITTED: Any = _Omitted()


def bind_fn(fn: Callable[..., Any], context: Any) -> Callable[..., Any]:
    """Return a callable that invokes ``fn`` with ``context`` as its receiver.

    The receiver is passed as the first positional argument, followed by
    whatever the wrapper is called with.
    """

    @functools.wraps(fn)
    def bound(*args: Any, **kwargs: Any) -> Any:
        return fn(context, *args, **kwargs)

    return bound


def _has_member(obj: Any, name: str) -> bool:
    if isinstance(obj, Mapping):
        return name in obj
    try:
        # Presence only; property getters are not run.
        inspect.getattr_static(obj, name)
    except AttributeError:
        if hasattr(type(obj), "__getattr__"):
            return hasattr(obj, name)
        return False
    return True


def _get_member(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj[name]
    return getattr(obj, name)


def _set_member(obj: Any, name: str, value: Any) -> None:
    if isinstance(obj, MutableMapping):
        obj[name] = value
    else:
        setattr(obj, name, value)


def _stored_on_host(obj: Any, name: str) -> bool:
    """True when ``name`` lives directly on the host instead of its class.

    Class-level functions come back from ``getattr`` already bound; callables
    stored in a mapping host or an instance ``__dict__`` do not.
    """
    if isinstance(obj, Mapping):
        return True
    if isinstance(obj, (type, types.ModuleType)):
        return False
    return name in getattr(obj, "__dict__", {})


@dataclass(frozen=True)
class PrefixResolver:
    """Searches a fixed, ordered list of prefixes for a host member.

    Attributes:
        prefixes: Candidate prefixes in search order; ``""`` means the bare name.
    """

    prefixes: Tuple[str, ...] = VENDOR_PREFIXES

    def __post_init__(self) -> None:
        object.__setattr__(self, "prefixes", tuple(self.prefixes))

    @classmethod
    def from_config(cls, config: "ResolverConfig") -> "PrefixResolver":
        """Create a resolver from the ``resolver`` section of a ShimkitConfig."""
        return cls(prefixes=tuple(config.vendor_prefixes))

    def candidates(self, property: str) -> Iterator[str]:
        """Yield the member names to try for ``property``, in order."""
        camel = property[0].upper() + property[1:]
        for prefix in self.prefixes:
            yield prefix + camel if prefix else property

    def resolve(self, obj: Any, property: str, val: Any = OMITTED) -> Any:
        """Get, set or call the first variant of ``property`` present on ``obj``.

        For a callable member: with ``val`` omitted, return a callable bound to
        ``obj``; otherwise call it right away with ``val`` spread as the
        positional arguments (``None`` meaning no arguments) and return the result.

        For any other member: a truthy ``val`` is assigned and returned; a
        falsy or omitted ``val`` returns the current value. ``0``, ``""`` and
        ``None`` therefore read instead of write.

        Only the first name found is used, even if it cannot serve the
        requested operation.

        Returns:
            The result described above, or None when ``obj`` has no variant.
        """
        for name in self.candidates(property):
            if not _has_member(obj, name):
                continue

            member = _get_member(obj, name)
            if callable(member):
                if _stored_on_host(obj, name):
                    member = bind_fn(member, obj)
                if val is OMITTED:
                    return member
                return member(*(() if val is None else val))

            if val:
                _set_member(obj, name, val)
                return val
            return member

        logger.debug("%s has no variant of %r", type(obj).__name__, property)
        return None


_default_resolver = PrefixResolver()


def prefixed(obj: Any, property: str, val: Any = OMITTED) -> Any:
    """Resolve ``property`` on ``obj`` with the default vendor prefixes.

    See ``PrefixResolver.resolve``. When calling a method, pass its arguments
    as a sequence: ``prefixed(el, "requestFullscreen", [])``.
    """
    return _default_resolver.resolve(obj, property, val)


def default_resolver() -> PrefixResolver:
    """Return the resolver used by ``prefixed``."""
    return _default_resolver


__all__ = [
    "VENDOR_PREFIXES",
    "OMITTED",
    "PrefixResolver",
    "bind_fn",
    "prefixed",
    "default_resolver",
]
