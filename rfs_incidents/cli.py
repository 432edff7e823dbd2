"""Command-line entry point for ``rfs-incidents``.

This module is purely the wiring layer between the shell and the
package: it loads configuration, obtains the raw feed (HTTP or file),
runs the cleaning pipeline and writes JSON.  All business logic lives
in ``rfs_incidents.orchestrators.feed_pipeline``.

Examples::

    rfs-incidents --pretty -o incidents.geojson
    rfs-incidents --input majorIncidents.json --sort-by guid
    rfs-incidents --original > upstream.json
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

from rfs_incidents import __version__
from rfs_incidents.core.config import FeedConfig, validate_config
from rfs_incidents.core.exceptions import PermanentError, PipelineError
from rfs_incidents.core.ingress import decode_feed, fetch_feed
from rfs_incidents.orchestrators.feed_pipeline import clean_with_report

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger("rfs_incidents.cli")

STDIO_PATH = "-"

EXIT_OK = 0
EXIT_PIPELINE_ERROR = 1


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (exposed for tests and docs)."""
    parser = argparse.ArgumentParser(
        prog="rfs-incidents",
        description="Fetch the NSW RFS Major Incidents feed and emit cleaned GeoJSON",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-i",
        "--input",
        help="Read the feed from a file ('-' for stdin) instead of fetching it",
    )
    parser.add_argument("--url", help="Feed URL (default: RFS_FEED_URL or the NSW RFS feed)")
    parser.add_argument(
        "-o",
        "--output",
        default=STDIO_PATH,
        help="Write the result to a file (default: stdout)",
    )
    parser.add_argument("--pretty", action="store_true", help="Indent the JSON output")
    parser.add_argument(
        "--original",
        action="store_true",
        help="Emit the upstream feed as received, without cleaning",
    )
    parser.add_argument(
        "--sort-by",
        metavar="PROPERTY",
        help="Order features by this property (features without it sort last)",
    )
    parser.add_argument(
        "--report",
        action="store_true",
        help="Emit the cleaning report (collection plus diagnostics)",
    )
    parser.add_argument(
        "--precision",
        type=int,
        help="Decimal places kept on coordinates (default: RFS_COORDINATE_PRECISION or 4)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Diagnostics verbosity on stderr (default: WARNING)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = _load_config(args)
        raw = _read_input(args.input) if args.input else fetch_feed(
            config.feed_url, timeout_s=config.request_timeout_s
        )
        feed = decode_feed(raw)

        if args.original:
            result: dict[str, Any] = feed
        else:
            report = clean_with_report(
                feed,
                precision=config.coordinate_precision,
                timezone=config.timezone,
            )
            collection = report.feature_collection
            if args.sort_by:
                collection = sort_features(collection, args.sort_by)
                report = report.model_copy(update={"feature_collection": collection})
            result = report.to_dict() if args.report else collection
    except PipelineError as exc:
        logger.error("Feed processing failed | %s", exc.to_error_dict())
        return EXIT_PIPELINE_ERROR

    _write_output(args.output, result, pretty=args.pretty)
    return EXIT_OK


def sort_features(collection: dict[str, Any], prop: str) -> dict[str, Any]:
    """Return a copy of *collection* with features ordered by property *prop*.

    The sort is stable; features lacking the property keep their relative
    order after all features that have it.
    """

    def sort_key(feature: dict[str, Any]) -> tuple[bool, str]:
        value = (feature.get("properties") or {}).get(prop)
        return (value is None, "" if value is None else str(value))

    return {**collection, "features": sorted(collection.get("features", []), key=sort_key)}


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _load_config(args: argparse.Namespace) -> FeedConfig:
    config = FeedConfig.from_env()
    overrides: dict[str, Any] = {}
    if args.url:
        overrides["feed_url"] = args.url
    if args.precision is not None:
        overrides["coordinate_precision"] = args.precision
    if overrides:
        config = dataclasses.replace(config, **overrides)
        validate_config(config)
    return config


def _read_input(path: str) -> bytes:
    if path == STDIO_PATH:
        return sys.stdin.buffer.read()
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        msg = f"Cannot read feed file {path}: {exc}"
        raise PermanentError(msg, stage="ingress", code="FEED_READ_FAILED") from exc


def _write_output(path: str, result: dict[str, Any], *, pretty: bool) -> None:
    text = json.dumps(result, indent=2 if pretty else None, ensure_ascii=False)
    if path == STDIO_PATH:
        sys.stdout.write(text + "\n")
        return
    Path(path).write_text(text + "\n", encoding="utf-8")
    logger.info("Wrote %s", path)


if __name__ == "__main__":
    sys.exit(main())
