"""Loading of a single Markdown file into a Document."""

import logging
from pathlib import Path

from mdlinkcheck.document import Document
from mdlinkcheck.extract_anchors import extract_anchors, extract_html_anchors
from mdlinkcheck.extract_links import extract_links
from mdlinkcheck.scan_prose import scan_prose

logger = logging.getLogger(__name__)


def build_document(path: str, text: str, style: str = "github") -> Document:
    """Extract headings, links and warnings from already-read text."""
    warnings = scan_prose(text).warnings
    for w in warnings:
        logger.warning("%s:%d: %s", path, w.line, w.message)
    return Document(
        path=path,
        text=text,
        headings=extract_anchors(text, style),
        links=extract_links(text, source=path),
        html_anchors=extract_html_anchors(text),
        warnings=warnings,
    )


def load_document(root: Path, path: str, style: str = "github") -> Document:
    """Read ``root / path`` as UTF-8 and build its Document.

    Raises OSError or UnicodeDecodeError when the file cannot be read.
    """
    text = (root / path).read_text(encoding="utf-8")
    doc = build_document(path, text, style)
    logger.debug(
        "Loaded %s: %d headings, %d links", path, len(doc.headings), len(doc.links)
    )
    return doc
