"""Small helpers used alongside the core primitives."""

from __future__ import annotations

import math
import re
from typing import Any, Callable, Protocol

from shimkit.core.collections import each

_WHITESPACE = re.compile(r"\s+")


class EventTarget(Protocol):
    """Anything that registers event handlers per event type."""

    def add_event_listener(self, event_type: str, handler: Callable[..., Any], capture: bool = False) -> None: ...

    def remove_event_listener(self, event_type: str, handler: Callable[..., Any], capture: bool = False) -> None: ...


def add_event_listeners(element: EventTarget, types: str, handler: Callable[..., Any]) -> None:
    """Register ``handler`` for every whitespace-separated event type in ``types``."""

    def add(event_type: str, index: int, names: Any) -> None:
        if event_type:
            element.add_event_listener(event_type, handler, False)

    each(_WHITESPACE.split(types), add)


def remove_event_listeners(element: EventTarget, types: str, handler: Callable[..., Any]) -> None:
    """Unregister ``handler`` for every whitespace-separated event type in ``types``."""

    def remove(event_type: str, index: int, names: Any) -> None:
        if event_type:
            element.remove_event_listener(event_type, handler, False)

    each(_WHITESPACE.split(types), remove)


def in_str(text: str, find: str) -> bool:
    """True when ``find`` occurs anywhere in ``text``."""
    return find in text


def round_int(number: float) -> int:
    """Truncate toward zero and wrap into the signed 32-bit range.

    NaN and infinities map to 0.
    """
    if isinstance(number, float) and not math.isfinite(number):
        return 0
    value = int(number) & 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


__all__ = [
    "EventTarget",
    "add_event_listeners",
    "remove_event_listeners",
    "in_str",
    "round_int",
]
