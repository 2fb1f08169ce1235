"""Core primitives: traversal, composition, inheritance and prefix resolution."""

from shimkit.core.collections import each, in_array, to_array, unique_array
from shimkit.core.composition import extend, inherit, merge
from shimkit.core.exceptions import ConfigError, ShimkitError
from shimkit.core.helpers import add_event_listeners, in_str, remove_event_listeners, round_int
from shimkit.core.resolver import VENDOR_PREFIXES, PrefixResolver, bind_fn, prefixed

__all__ = [
    "each",
    "in_array",
    "unique_array",
    "to_array",
    "merge",
    "extend",
    "inherit",
    "VENDOR_PREFIXES",
    "PrefixResolver",
    "bind_fn",
    "prefixed",
    "add_event_listeners",
    "remove_event_listeners",
    "in_str",
    "round_int",
    "ShimkitError",
    "ConfigError",
]
