"""Orchestration logic for checking links across a Markdown tree."""

import argparse
import logging
from pathlib import Path
from typing import Any

from mdlinkcheck.build_documents import build_documents
from mdlinkcheck.compute_config_hash import compute_config_hash
from mdlinkcheck.config_error import ConfigError
from mdlinkcheck.discover_documents import discover_documents
from mdlinkcheck.document import Document
from mdlinkcheck.duplicate_detector import DuplicateDetector
from mdlinkcheck.link_report import EXIT_USAGE, LinkReport
from mdlinkcheck.link_resolver import LinkResolver
from mdlinkcheck.load_config import load_config
from mdlinkcheck.section import DuplicatePair

logger = logging.getLogger(__name__)


def run_check(args: argparse.Namespace) -> int:
    """Execute the full check and return the process exit code."""
    root: Path = args.root
    if not root.is_dir():
        logger.error("Not a directory: %s", root)
        return EXIT_USAGE
    root = root.resolve()

    try:
        config = load_config(args.config, root)
    except ConfigError as exc:
        logger.error("%s", exc)
        return EXIT_USAGE
    if args.jobs is not None:
        config["jobs"] = args.jobs

    report = check_tree(root, config, duplicates=args.duplicates)

    print(report.render_text(quiet=args.quiet), end="")
    if args.json:
        try:
            report.generate_report(str(args.json))
        except OSError as exc:
            logger.error("Cannot write JSON report %s: %s", args.json, exc)
            return EXIT_USAGE
        logger.info("JSON report written to %s", args.json)
    return report.exit_code(strict=args.strict)


def check_tree(
    root: Path, config: dict[str, Any], *, duplicates: bool = False
) -> LinkReport:
    """Discover, load and resolve every document under ``root``."""
    report = LinkReport(str(root), compute_config_hash(config))

    paths = discover_documents(root, config["extensions"], config["exclude"])
    documents, failures = build_documents(
        root, paths, config["slugger"], jobs=config["jobs"]
    )
    for doc in documents:
        report.add_document(doc)
    for failure in failures:
        report.add_failure(failure)

    resolver = LinkResolver(
        root,
        documents,
        unreadable=[f.path for f in failures],
        ignore_patterns=config["ignore_patterns"],
        case_insensitive_anchors=config["anchors"]["case_insensitive"],
    )
    report.add_results(resolver.resolve_all())

    if duplicates:
        report.set_duplicates(_find_duplicates(documents, config))
    return report


def _find_duplicates(
    documents: list[Document], config: dict[str, Any]
) -> list[DuplicatePair]:
    thresholds = config["duplicates"]
    detector = DuplicateDetector(
        exact_threshold=thresholds["exact_threshold"],
        diverged_threshold=thresholds["diverged_threshold"],
    )
    return detector.detect(documents)
