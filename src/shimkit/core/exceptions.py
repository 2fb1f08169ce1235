class ShimkitError(Exception):
    """Base class for all custom exceptions in the shimkit library."""

    pass


class ConfigError(ShimkitError):
    """Raised when configuration cannot be loaded or fails validation.

    This includes errors such as:
    - Unreadable configuration files
    - Invalid YAML
    - Schema validation failures
    """

    pass


__all__ = [
    "ShimkitError",
    "ConfigError",
]
