"""Configuration schema module.

This module defines the data structures used for configuration in shimkit.
The schemas are designed to be minimal but extensible through Pydantic.
"""

from typing import Dict, List

from pydantic import BaseModel, Field, field_validator

from shimkit.core.resolver import VENDOR_PREFIXES
from shimkit.core.utils.logging import DEFAULT_FORMAT


class LoggingConfig(BaseModel):
    """Logging preferences.

    Attributes:
        level: Level name for the ``shimkit`` logger
        format: Format string for the stream handler
        components: Per-component level overrides, e.g. ``{"resolver": "DEBUG"}``
    """

    level: str = "WARNING"
    format: str = DEFAULT_FORMAT
    components: Dict[str, str] = Field(default_factory=dict)

    model_config = {"extra": "allow"}

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize and check the level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown logging level: {v}")
        return level


class ResolverConfig(BaseModel):
    """Settings for the vendor-prefix resolver.

    Attributes:
        vendor_prefixes: Ordered prefix candidates; ``""`` is the unprefixed name
    """

    vendor_prefixes: List[str] = Field(default_factory=lambda: list(VENDOR_PREFIXES))

    model_config = {"extra": "allow"}

    @field_validator("vendor_prefixes")
    @classmethod
    def validate_prefixes(cls, v: List[str]) -> List[str]:
        """Reject duplicates and prefixes that cannot start an attribute name."""
        seen = set()
        for prefix in v:
            if prefix in seen:
                raise ValueError(f"Duplicate vendor prefix: {prefix!r}")
            if prefix and not prefix.isidentifier():
                raise ValueError(f"Invalid vendor prefix: {prefix!r}")
            seen.add(prefix)
        return v


class ShimkitConfig(BaseModel):
    """Root configuration object."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    resolver: ResolverConfig = Field(default_factory=ResolverConfig)

    model_config = {"extra": "allow"}
