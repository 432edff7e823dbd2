"""Feature pipeline for the NSW RFS Major Incidents feed.

Takes a decoded upstream feed and produces the cleaned GeoJSON:

1. Canonicalize each feature's geometry (flatten nested collections)
2. Clean each feature's properties (unpack description, dates, tokens)
3. Assemble a new ``FeatureCollection`` in feed order
4. Limit coordinate precision
5. Enforce RFC 7946 winding order

The input is never mutated.  Non-fatal inconsistencies in the feed are
logged through the supplied logger and collected into the report
returned by ``clean_with_report``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from rfs_incidents.cleaning import (
    MISSING,
    clean_geometry,
    clean_properties,
    limit_precision,
    rewind,
)
from rfs_incidents.core.constants import (
    DEFAULT_COORDINATE_PRECISION,
    FEED_TIMEZONE,
    GENERIC_INCIDENT_LINK,
)
from rfs_incidents.core.exceptions import ContractError
from rfs_incidents.models.report import CleanReport, InconsistentFieldWarning

if TYPE_CHECKING:
    from rfs_incidents.models.geojson import Feature, FeatureCollection

logger = logging.getLogger("rfs_incidents.orchestrators.feed_pipeline")


def clean(
    geojson: dict[str, Any],
    *,
    precision: int = DEFAULT_COORDINATE_PRECISION,
    timezone: str = FEED_TIMEZONE,
    generic_link: str = GENERIC_INCIDENT_LINK,
    log: logging.Logger | None = None,
) -> FeatureCollection:
    """Clean an upstream feed and return the canonical ``FeatureCollection``.

    Args:
        geojson: Decoded feed, either a ``FeatureCollection`` or a single ``Feature``.
        precision: Decimal places kept on coordinates.
        timezone: Zone the feed's offset-less dates are expressed in.
        generic_link: ``link`` value dropped from every feature.
        log: Logger for diagnostics (defaults to the cleaning logger).

    Raises:
        ContractError: If *geojson* is neither a FeatureCollection nor a Feature,
            or a required property is missing.
        MalformedDateError: If a feed date cannot be parsed.
    """
    report = clean_with_report(
        geojson,
        precision=precision,
        timezone=timezone,
        generic_link=generic_link,
        log=log,
    )
    return report.feature_collection  # type: ignore[return-value]


def clean_with_report(
    geojson: dict[str, Any],
    *,
    precision: int = DEFAULT_COORDINATE_PRECISION,
    timezone: str = FEED_TIMEZONE,
    generic_link: str = GENERIC_INCIDENT_LINK,
    log: logging.Logger | None = None,
) -> CleanReport:
    """Clean an upstream feed, returning the collection with its diagnostics.

    Same arguments and errors as ``clean``.
    """
    warnings: list[InconsistentFieldWarning] = []

    cleaned_features: list[Feature] = []
    for index, feature in enumerate(_iter_features(geojson)):
        geometry = clean_geometry(feature.get("geometry", MISSING))
        properties = clean_properties(
            feature.get("properties") or {},
            feature_index=index,
            timezone=timezone,
            generic_link=generic_link,
            warnings=warnings,
            log=log,
        )
        cleaned_features.append(
            {"type": "Feature", "properties": properties, "geometry": geometry}
        )

    collection: dict[str, Any] = {"type": "FeatureCollection", "features": cleaned_features}
    collection = limit_precision(collection, precision)
    collection = rewind(collection)

    logger.info(
        "Feed cleaned | features=%d | warnings=%d | precision=%d",
        len(cleaned_features),
        len(warnings),
        precision,
    )

    return CleanReport(
        feature_count=len(cleaned_features),
        warnings=warnings,
        feature_collection=collection,
    )


def _iter_features(geojson: dict[str, Any]) -> list[dict[str, Any]]:
    """Return the features of a FeatureCollection, or a lone Feature as a list."""
    match geojson.get("type"):
        case "FeatureCollection":
            features = geojson.get("features") or []
            if not isinstance(features, list):
                msg = f"FeatureCollection 'features' must be a list, got {type(features).__name__}"
                raise ContractError(msg, stage="clean", code="FEED_INVALID_FEATURES")
            return features
        case "Feature":
            return [geojson]
        case other:
            msg = f"Expected a FeatureCollection or Feature, got type {other!r}"
            raise ContractError(msg, stage="clean", code="FEED_NOT_FEATURES")
