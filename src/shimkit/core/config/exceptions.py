"""Configuration exception module.

Re-exports the configuration error type so the config package can be used
on its own.
"""

from shimkit.core.exceptions import ConfigError

__all__ = ["ConfigError"]
