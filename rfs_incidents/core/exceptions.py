"""Unified exception taxonomy for the feed cleaner.

Every domain exception inherits from ``PipelineError`` and carries
structured context fields so the CLI can report failures consistently
and a scheduler wrapping it can decide whether a retry makes sense.

Taxonomy categories
-------------------
- ``ValidationError``:   malformed values inside the feed, never retryable.
- ``TransientError``:    temporary failures (network, throttle), retryable.
- ``PermanentError``:    unrecoverable failures, not retryable.
- ``ContractError``:     upstream schema drift (missing fields, wrong shape).

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging.
"""

from __future__ import annotations


class PipelineError(Exception):
    """Base exception for all feed-cleaning errors.

    Attributes:
        message: Human-readable error description.
        stage: Pipeline stage where the error occurred
            (e.g. ``"ingress"``, ``"clean_properties"``).
        code: Machine-readable error code (e.g. ``"DATE_PARSE_FAILED"``).
        retryable: Whether re-running the operation may succeed.
        correlation_id: Identifier of the offending record, when known
            (for example an incident ``guid``).
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
        retryable: bool = False,
        correlation_id: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        self.retryable = retryable
        self.correlation_id = correlation_id
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ContractError):
            return "contract"
        if isinstance(self, ValidationError):
            return "validation"
        if isinstance(self, TransientError):
            return "transient"
        if isinstance(self, PermanentError):
            return "permanent"
        return "transient" if self.retryable else "permanent"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
            "retryable": self.retryable,
            "correlation_id": self.correlation_id,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(PipelineError):
    """Malformed value in the input. Never retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class TransientError(PipelineError):
    """Temporary failure that may succeed on retry."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", True)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class PermanentError(PipelineError):
    """Unrecoverable failure. Not retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class ContractError(PipelineError):
    """Upstream feed no longer matches the expected schema. Never retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Concrete errors
# ---------------------------------------------------------------------------


class MalformedDateError(ValidationError):
    """Raised when a feed date string does not match its expected format.

    Attributes:
        value: The offending date string.
        expected_format: The ``strptime`` pattern it was parsed against.
    """

    default_stage = "clean_properties"
    default_code = "DATE_PARSE_FAILED"

    def __init__(self, value: str, expected_format: str, **kwargs: object) -> None:
        self.value = value
        self.expected_format = expected_format
        super().__init__(
            f"Date {value!r} does not match format {expected_format!r}",
            **kwargs,
        )


class MissingFieldError(ContractError):
    """Raised when a property the feed always supplies is absent.

    Attributes:
        field: Name of the missing property.
    """

    default_stage = "clean_properties"
    default_code = "FIELD_MISSING"

    def __init__(self, field: str, **kwargs: object) -> None:
        self.field = field
        super().__init__(f"Required property {field!r} is missing from feature", **kwargs)
