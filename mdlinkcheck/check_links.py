"""Check internal links and anchors across a tree of Markdown documents.

Every relative link and ``#anchor`` is resolved against the headings the
documents actually render to (GitHub slugging by default). Dangling anchors,
missing files and unreadable documents make the command exit non-zero, so it
can gate CI.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from mdlinkcheck.run_check import run_check


def configure_logging(verbosity: int) -> None:
    """Send log records to stderr; each -v lowers the threshold one level."""
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:  # noqa: PLR2004
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    ap = argparse.ArgumentParser(
        prog="mdlinkcheck",
        description="Validate links and anchors between Markdown documents.",
    )
    ap.add_argument(
        "root",
        type=Path,
        help="Directory containing the Markdown documents to check",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file (default: ROOT/.mdlinkcheck.yml)",
    )
    ap.add_argument(
        "--json",
        type=Path,
        help="Also write a JSON report to this path",
    )
    ap.add_argument(
        "--duplicates",
        action="store_true",
        help="Compare same-titled sections across documents and report drift",
    )
    ap.add_argument(
        "--jobs",
        type=int,
        help="Read documents on this many threads (default: from config, 1)",
    )
    ap.add_argument(
        "--strict",
        action="store_true",
        help="Also fail on structural warnings such as unterminated fences",
    )
    ap.add_argument(
        "--quiet",
        action="store_true",
        help="Print only the summary line",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (-vv for debug detail)",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    """Run the link check."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.jobs is not None and args.jobs < 1:
        parser.error("--jobs must be at least 1")
    configure_logging(args.verbose)
    return run_check(args)


if __name__ == "__main__":
    raise SystemExit(main())
