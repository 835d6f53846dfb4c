"""Extraction of headings and their anchor slugs from Markdown text."""

import re

from mdlinkcheck.heading import Heading
from mdlinkcheck.plain_heading_text import plain_heading_text
from mdlinkcheck.scan_prose import scan_prose
from mdlinkcheck.slugger import Slugger

ATX_RE = re.compile(r"^ {0,3}(?P<hashes>#{1,6})(?:[ \t]+(?P<text>.*?))?[ \t]*$")
ATX_CLOSING_RE = re.compile(r"(?:^|[ \t]+)#+[ \t]*$")
SETEXT_RE = re.compile(r"^ {0,3}(?P<marks>=+|-+)[ \t]*$")
# Lines that start some other block and therefore never join a paragraph.
BLOCK_START_RE = re.compile(r"^(?: {4,}| {0,3}(?:\||<))")
# List items and blockquotes; text lazily continuing them is not a heading.
CONTAINER_START_RE = re.compile(r"^ {0,3}(?:[-+*](?:\s|$)|\d{1,9}[.)](?:\s|$)|>)")
HTML_ANCHOR_RE = re.compile(
    r"<[A-Za-z][^>]*?\s(?:name|id)\s*=\s*[\"']([^\"']+)[\"']",
    re.IGNORECASE,
)


def _make_heading(level: int, raw: str, line: int, slugger: Slugger) -> Heading:
    text = plain_heading_text(raw)
    return Heading(level=level, text=text, slug=slugger.slug(text), line=line)


def extract_anchors(text: str, style: str = "github") -> list[Heading]:
    """Return the document's headings, in order, each with a unique slug.

    Both ATX (``## Title``) and setext (underlined) headings are recognized.
    Anything inside fenced code blocks is ignored.
    """
    slugger = Slugger(style)
    headings: list[Heading] = []
    paragraph: list[str] = []
    in_container = False
    prev_lineno = 0
    for lineno, line in scan_prose(text).lines:
        if lineno != prev_lineno + 1:
            paragraph = []
            in_container = False
        prev_lineno = lineno

        atx = ATX_RE.match(line)
        if atx:
            raw = ATX_CLOSING_RE.sub("", atx.group("text") or "")
            level = len(atx.group("hashes"))
            headings.append(_make_heading(level, raw, lineno, slugger))
            paragraph = []
            in_container = False
            continue

        setext = SETEXT_RE.match(line)
        if setext and paragraph:
            level = 1 if setext.group("marks").startswith("=") else 2
            first_line = lineno - len(paragraph)
            headings.append(
                _make_heading(level, " ".join(paragraph), first_line, slugger)
            )
            paragraph = []
            continue

        if CONTAINER_START_RE.match(line):
            paragraph = []
            in_container = True
            continue
        if not line.strip() or setext or BLOCK_START_RE.match(line):
            paragraph = []
            in_container = False
            continue
        if not in_container:
            paragraph.append(line.strip())
    return headings


def extract_html_anchors(text: str) -> list[str]:
    """Return anchors declared with HTML ``name``/``id`` attributes outside code."""
    anchors: list[str] = []
    for _, line in scan_prose(text).lines:
        anchors.extend(HTML_ANCHOR_RE.findall(line))
    return anchors
