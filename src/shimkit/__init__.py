"""
shimkit: compatibility and object-composition helpers
=====================================================

Uniform iteration over collection-like values, non-destructive ``merge``
and destructive ``extend`` of plain data, single-parent ``inherit`` for
classes wired after definition, and ``prefixed`` lookup of members that
some hosts only expose under a vendor prefix.

Examples:
    from shimkit import each, merge, inherit, prefixed

    options = merge({"threshold": 5}, {"threshold": 10, "pointers": 1})
    # {"threshold": 5, "pointers": 1}

    each(["pan", "pinch"], lambda name, i, names: print(i, name))

    Dog = inherit(Dog, Animal, {"legs": 4})
    Dog._super.speak(dog)

    request = prefixed(element, "requestFullscreen")
    if request is not None:
        request()
"""

from __future__ import annotations

import importlib.metadata
from typing import Optional

from shimkit.core import (
    VENDOR_PREFIXES,
    ConfigError,
    PrefixResolver,
    ShimkitError,
    add_event_listeners,
    bind_fn,
    each,
    extend,
    in_array,
    in_str,
    inherit,
    merge,
    prefixed,
    remove_event_listeners,
    round_int,
    to_array,
    unique_array,
)

try:
    __version__ = importlib.metadata.version("shimkit")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.1.0"


def initialize_shimkit(
    config_path: Optional[str] = None,
    env_prefix: str = "SHIMKIT",
    verbose_logging: bool = False,
) -> PrefixResolver:
    """Load configuration, set up logging and build a prefix resolver.

    The sequence is:
    1. Configuration loading and validation (YAML file, then environment)
    2. Logging setup from the ``logging`` section
    3. Resolver construction from the ``resolver`` section

    Args:
        config_path: Optional path to a YAML configuration file. Defaults to
            $SHIMKIT_CONFIG or "shimkit.yaml"; a missing file is fine.
        env_prefix: Prefix for environment variable overrides.
        verbose_logging: Force DEBUG logging for the ``shimkit`` logger.

    Returns:
        A PrefixResolver using the configured vendor prefixes.

    Raises:
        ConfigError: If the configuration cannot be read or is invalid.

    Examples:
        resolver = initialize_shimkit()
        request = resolver.resolve(element, "requestFullscreen")
    """
    # Import here to avoid pulling pydantic in for plain helper use
    from shimkit.core.config import load_config
    from shimkit.core.utils.logging import configure_logging

    config = load_config(file_path=config_path, env_prefix=env_prefix)
    configure_logging(verbose=verbose_logging, config=config.logging)
    return PrefixResolver.from_config(config.resolver)


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
    "initialize_shimkit",
    "__version__",
]
