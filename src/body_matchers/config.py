"""Configuration module for body matchers.

This module provides the MatcherConfig class for configuring the correlated
matchers: the header names used to carry correlation tokens, the
unique-body-only deduplication mode, and the optional expiry of correlation
entries.

Example:
    Basic usage with defaults:

        >>> config = MatcherConfig()
        >>> config.hash_header
        'X-Request-Hash'

    Custom configuration:

        >>> config = MatcherConfig(
        ...     unique_body_only=True,
        ...     entry_ttl_seconds=600,
        ... )

    Loading from environment:

        >>> import os
        >>> os.environ['BODY_MATCHER_UNIQUE_BODY_ONLY'] = 'true'
        >>> config = MatcherConfig.from_env()
        >>> config.unique_body_only
        True
"""

import os
import re
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

DEFAULT_HASH_HEADER = "X-Request-Hash"
DEFAULT_ID_HEADER = "X-Request-Match-Id"

# RFC 7230 token characters
_HEADER_NAME_RE = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off", ""}


class MatcherConfig(BaseModel):
    """Configuration for body matchers.

    The configuration is read once, when a matcher is constructed, so a
    matcher's behavior cannot change between calls within a process.

    Attributes:
        unique_body_only: When True, the hash-correlated matcher treats a body
            it has already seen as a non-match, whatever its content. Only the
            first occurrence of a given body can match. Default is False.
        hash_header: Request header carrying the body hash token.
            Default is "X-Request-Hash".
        id_header: Request header carrying the generated correlation id.
            Default is "X-Request-Match-Id".
        entry_ttl_seconds: Lifetime of a correlation entry in seconds. None
            keeps entries for the lifetime of the matcher. Must be between 1
            and 604800 (7 days) when set. Default is None.
        cleanup_interval_seconds: Interval between runs of the background
            cleanup task. Must be between 1 and 86400. Default is 300.

    Note:
        This class is immutable (frozen=True). Create a new instance if you
        need different settings.
    """

    unique_body_only: bool = Field(
        default=False,
        description="Force repeated identical bodies to a non-match",
    )
    hash_header: str = Field(
        default=DEFAULT_HASH_HEADER,
        description="Header carrying the body hash correlation token",
    )
    id_header: str = Field(
        default=DEFAULT_ID_HEADER,
        description="Header carrying the generated correlation id",
    )
    entry_ttl_seconds: int | None = Field(
        default=None,
        description="Lifetime of correlation entries in seconds (None=never expire)",
    )
    cleanup_interval_seconds: int = Field(
        default=300,
        description="Seconds between background cleanup runs (1-86400)",
    )

    model_config = {"frozen": True}

    @field_validator("unique_body_only", mode="before")
    @classmethod
    def validate_unique_body_only(cls, v: Any) -> Any:
        """Accept the usual textual spellings of booleans.

        Example:
            >>> MatcherConfig(unique_body_only="yes").unique_body_only
            True
        """
        if isinstance(v, str):
            normalized = v.strip().lower()
            if normalized in _TRUE_VALUES:
                return True
            if normalized in _FALSE_VALUES:
                return False
            raise ValueError(f"unique_body_only must be a boolean, got {v!r}")
        return v

    @field_validator("hash_header", "id_header")
    @classmethod
    def validate_header_name(cls, v: str) -> str:
        """Validate that a correlation header name is a valid HTTP token.

        Raises:
            ValueError: If the name is empty or contains separators.
        """
        if not _HEADER_NAME_RE.match(v):
            raise ValueError(f"Invalid header name: {v!r}")
        return v

    @field_validator("entry_ttl_seconds")
    @classmethod
    def validate_entry_ttl_seconds(cls, v: int | None) -> int | None:
        if v is not None and not (1 <= v <= 604800):
            raise ValueError(f"entry_ttl_seconds must be between 1 and 604800 (7 days), got {v}")
        return v

    @field_validator("cleanup_interval_seconds")
    @classmethod
    def validate_cleanup_interval_seconds(cls, v: int) -> int:
        if not (1 <= v <= 86400):
            raise ValueError(f"cleanup_interval_seconds must be between 1 and 86400, got {v}")
        return v

    @model_validator(mode="after")
    def validate_distinct_headers(self) -> "MatcherConfig":
        """Ensure the two correlation headers cannot collide.

        Raises:
            ValueError: If hash_header and id_header name the same header.
        """
        if self.hash_header.lower() == self.id_header.lower():
            raise ValueError("hash_header and id_header must be different headers")
        return self

    @classmethod
    def from_env(cls, prefix: str = "BODY_MATCHER_") -> "MatcherConfig":
        """Create configuration from environment variables.

        Variable names are uppercase field names with the prefix, e.g.
        BODY_MATCHER_UNIQUE_BODY_ONLY or BODY_MATCHER_ENTRY_TTL_SECONDS.

        Args:
            prefix: Prefix for environment variable names.

        Returns:
            MatcherConfig instance populated from environment variables.

        Note:
            The environment is read here only. Matchers built from the
            returned config ignore later changes to the environment.
        """
        config_dict: dict[str, Any] = {}

        field_types = {
            "unique_body_only": bool,
            "hash_header": str,
            "id_header": str,
            "entry_ttl_seconds": int,
            "cleanup_interval_seconds": int,
        }

        for field_name, field_type in field_types.items():
            env_var = f"{prefix}{field_name.upper()}"
            env_value = os.environ.get(env_var)

            if env_value is not None:
                if field_type is int:
                    config_dict[field_name] = int(env_value)
                else:
                    # bools are parsed by the field validator
                    config_dict[field_name] = env_value

        return cls(**config_dict)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "MatcherConfig":
        """Create configuration from a dictionary.

        Raises:
            ValidationError: If the dictionary contains invalid values.
        """
        return cls(**config_dict)
