"""shimkit configuration system.

Loads configuration from a YAML file and environment variables, with
validation through Pydantic.

Example usage:
```python
from shimkit.core.config import load_config
from shimkit.core.resolver import PrefixResolver

config = load_config()
resolver = PrefixResolver.from_config(config.resolver)
```
"""

from .exceptions import ConfigError
from .loader import load_config
from .schema import LoggingConfig, ResolverConfig, ShimkitConfig

__all__ = [
    "ShimkitConfig",
    "LoggingConfig",
    "ResolverConfig",
    "load_config",
    "ConfigError",
]
