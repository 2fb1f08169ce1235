"""Logging utilities for shimkit.

Every module logs through a module-level ``logging.getLogger(__name__)``.
This module holds the one place where handlers and levels get configured,
so that applications embedding shimkit stay in control of their own logging.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from shimkit.core.config.schema import LoggingConfig

ROOT_LOGGER_NAME = "shimkit"
DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Get a module logger by name (no prefixing).

    Args:
        name: Logger name (typically ``__name__``).

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)


def _level_value(level: Union[str, int]) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level


def configure_logging(
    verbose: bool = False, config: Optional["LoggingConfig"] = None
) -> logging.Logger:
    """Configure the ``shimkit`` logger hierarchy.

    Installs a single stream handler on the package logger (repeated calls
    reuse it) and applies the level from ``config``. ``verbose`` forces DEBUG.

    Args:
        verbose: Enable debug logging when True.
        config: Optional logging section of a loaded ``ShimkitConfig``.

    Returns:
        The configured package logger.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)

    fmt = config.format if config is not None else DEFAULT_FORMAT
    handler = next(
        (h for h in root.handlers if getattr(h, "_shimkit_handler", False)), None
    )
    if handler is None:
        handler = logging.StreamHandler()
        handler._shimkit_handler = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    handler.setFormatter(logging.Formatter(fmt))

    if verbose:
        root.setLevel(logging.DEBUG)
    elif config is not None:
        root.setLevel(_level_value(config.level))
    else:
        root.setLevel(logging.WARNING)

    if config is not None:
        for component, level in config.components.items():
            set_component_level(component, level)

    return root


def set_component_level(component: str, level: Union[str, int]) -> None:
    """Set log level for a specific component.

    Accepts either string levels (e.g., "INFO") or numeric constants. Short
    component names such as ``"resolver"`` are resolved under
    ``shimkit.core``.
    """
    if not component.startswith(ROOT_LOGGER_NAME):
        component = f"{ROOT_LOGGER_NAME}.core.{component}"
    logging.getLogger(component).setLevel(_level_value(level))


__all__ = ["get_logger", "configure_logging", "set_component_level"]
