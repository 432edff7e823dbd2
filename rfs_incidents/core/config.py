"""Feed cleaner configuration loaded from environment variables.

All configuration values have defaults that reproduce the behaviour of
the upstream feed (Sydney time, 4 decimal places).  The CLI loads the
configuration once and lets command-line flags override it.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any value is out of
    its valid range, so a bad deployment fails before any request is made.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from rfs_incidents.core.constants import (
    DEFAULT_COORDINATE_PRECISION,
    DEFAULT_FEED_URL,
    DEFAULT_REQUEST_TIMEOUT_S,
    FEED_TIMEZONE,
    MAX_COORDINATE_PRECISION,
)
from rfs_incidents.core.exceptions import PipelineError


class ConfigValidationError(PipelineError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        self.message = message
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class FeedConfig:
    """Immutable feed cleaner configuration.

    Attributes:
        feed_url: URL of the upstream Major Incidents feed.
        request_timeout_s: HTTP timeout for the feed request, in seconds.
        coordinate_precision: Decimal places kept on output coordinates.
        timezone: IANA zone used to interpret the feed's offset-less dates.
    """

    feed_url: str = DEFAULT_FEED_URL
    request_timeout_s: float = DEFAULT_REQUEST_TIMEOUT_S
    coordinate_precision: int = DEFAULT_COORDINATE_PRECISION
    timezone: str = FEED_TIMEZONE

    @classmethod
    def from_env(cls) -> FeedConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range or a
                required string value is empty.
            ValueError: If a numeric environment variable cannot be
                parsed (e.g. ``RFS_REQUEST_TIMEOUT_S=abc``).
        """
        config = cls(
            feed_url=os.getenv("RFS_FEED_URL", DEFAULT_FEED_URL),
            request_timeout_s=float(
                os.getenv("RFS_REQUEST_TIMEOUT_S", str(DEFAULT_REQUEST_TIMEOUT_S))
            ),
            coordinate_precision=int(
                os.getenv("RFS_COORDINATE_PRECISION", str(DEFAULT_COORDINATE_PRECISION))
            ),
            timezone=os.getenv("RFS_TIMEZONE", FEED_TIMEZONE),
        )
        validate_config(config)
        return config


def validate_config(config: FeedConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if not config.feed_url:
        raise ConfigValidationError("RFS_FEED_URL", config.feed_url, "must not be empty")

    if config.request_timeout_s <= 0:
        raise ConfigValidationError(
            "RFS_REQUEST_TIMEOUT_S",
            config.request_timeout_s,
            "must be > 0 (seconds)",
        )

    if not 0 <= config.coordinate_precision <= MAX_COORDINATE_PRECISION:
        raise ConfigValidationError(
            "RFS_COORDINATE_PRECISION",
            config.coordinate_precision,
            f"must be between 0 and {MAX_COORDINATE_PRECISION} (decimal places)",
        )

    try:
        ZoneInfo(config.timezone)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ConfigValidationError(
            "RFS_TIMEZONE",
            config.timezone,
            "must be an IANA time zone name (e.g. 'Australia/Sydney')",
        ) from exc
