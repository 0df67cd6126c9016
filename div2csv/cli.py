"""
Command line interface for div2csv.

    div2csv HTML_FILE SPEC_FILE OUTPUT_FILE [--config FILE] [--skip-invalid]

Reads the HTML document, applies the specification and writes the CSV.
The conversion itself lives in `div2csv.run`; this module only parses
arguments, configures logging and renders the outcome.  The exit status
is 0 on success and 1 on any failure.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List

from .config import ConfigError, load_config
from .errors import InvalidSpecification
from .extract.records import ExtractionOptions
from .run import RunOptions, convert

logger = logging.getLogger("div2csv.cli")


def _build_options(args: argparse.Namespace, config: dict) -> RunOptions:
    on_missing = "skip" if args.skip_invalid else config.get("on_missing_required", "abort")
    context_chars = args.context_chars
    if context_chars is None:
        context_chars = config.get("context_chars", 80)
    try:
        extraction = ExtractionOptions(
            on_missing_required=on_missing, context_chars=int(context_chars)
        )
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid extraction settings: {exc}") from exc
    return RunOptions(extraction=extraction, encoding=args.encoding or config.get("encoding"))


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="div2csv", description="Convert repeated HTML records into a CSV file"
    )
    parser.add_argument("html_file", help="Path to the HTML document")
    parser.add_argument("spec_file", help="Path to the JSON or YAML specification")
    parser.add_argument("output_file", help="Path to the output CSV")
    parser.add_argument("--config", help="Optional YAML config file")
    parser.add_argument(
        "--skip-invalid",
        action="store_true",
        help="Skip records missing a required column instead of aborting",
    )
    parser.add_argument(
        "--context-chars",
        type=int,
        dest="context_chars",
        help="Maximum record text quoted in error messages (default 80)",
    )
    parser.add_argument("--encoding", help="Encoding of the HTML file (detected by default)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    try:
        config = load_config(args.config)
        options = _build_options(args, config)
        level = "DEBUG" if args.verbose else str(config.get("log_level", "INFO")).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigError(f"Unknown log level {level!r}")
    except ConfigError as exc:
        logger.error("%s", exc)
        return 1
    logging.getLogger().setLevel(level)

    outcome = convert(args.html_file, args.spec_file, args.output_file, options)
    if not outcome.ok:
        if isinstance(outcome.error, InvalidSpecification):
            logger.error("Specification is invalid: %s", outcome.error)
        else:
            logger.error("%s", outcome.error)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
