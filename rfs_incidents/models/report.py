"""Pydantic models describing the outcome of a cleaning run.

``CleanReport`` pairs the cleaned feature collection with the non-fatal
diagnostics raised while producing it, so callers get inconsistencies in
the upstream feed as data rather than only as log lines.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, Field

# Schema version for forward compatibility
SCHEMA_VERSION = "clean-report-v1"


class InconsistentFieldWarning(BaseModel):
    """Two feed fields that should agree carried different values.

    Attributes:
        feature_index: Zero-based position of the feature in the feed.
        guid: Incident ``guid`` property, when the feature has one.
        field: Field whose value was discarded (e.g. ``"alert-level"``).
        value: The discarded value.
        authoritative_field: Field whose value was kept (e.g. ``"category"``).
        authoritative_value: The kept value, before token normalization.
    """

    feature_index: int = 0
    guid: str = ""
    field: str
    value: str
    authoritative_field: str
    authoritative_value: str

    @property
    def message(self) -> str:
        """Human-readable description for log output."""
        return (
            f"{self.authoritative_field} {self.authoritative_value!r} != "
            f"{self.field} {self.value!r}"
        )


class CleanReport(BaseModel):
    """Result of ``clean_with_report``.

    Attributes:
        schema_version: Report schema identifier.
        cleaned_at: When the run finished (ISO 8601, UTC).
        feature_count: Number of features in the cleaned collection.
        warnings: Non-fatal diagnostics, in feed order.
        feature_collection: The cleaned GeoJSON ``FeatureCollection``.
    """

    schema_version: str = SCHEMA_VERSION
    cleaned_at: str = Field(default_factory=lambda: datetime.now(UTC).isoformat())
    feature_count: int = 0
    warnings: list[InconsistentFieldWarning] = Field(default_factory=list)
    feature_collection: dict[str, Any] = Field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a JSON-compatible dict."""
        return self.model_dump(mode="json")
