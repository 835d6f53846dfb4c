"""Extraction of links from Markdown text."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from mdlinkcheck.is_external_link import is_external_link
from mdlinkcheck.link import Link
from mdlinkcheck.scan_prose import scan_prose
from mdlinkcheck.split_target import normalize_link_path, split_target

if TYPE_CHECKING:
    from collections.abc import Iterator

# [text](url "title"), ![alt](src), [text](<url with spaces>)
INLINE_LINK_RE = re.compile(
    r"(?P<bang>!?)\[(?P<text>(?:[^\[\]]|\[[^\[\]]*\])*)\]"
    r"\(\s*(?:<(?P<angle>[^<>]*)>|(?P<url>(?:[^\s()]|\([^\s()]*\))*))"
    r"(?:\s+(?:\"[^\"]*\"|'[^']*'|\([^()]*\)))?\s*\)"
)
# [text][ref] and [text][]
REF_LINK_RE = re.compile(
    r"(?P<bang>!?)\[(?P<text>(?:[^\[\]]|\[[^\[\]]*\])+)\]\[(?P<ref>[^\[\]]*)\]"
)
# [ref] on its own, only a link when a definition exists
SHORTCUT_RE = re.compile(r"(?P<bang>!?)\[(?P<text>[^\[\]]+)\](?![\[(:])")
DEFINITION_RE = re.compile(
    r"^ {0,3}\[(?P<ref>[^\]]+)\]:\s*(?:<(?P<angle>[^>]*)>|(?P<url>\S+))"
)
AUTOLINK_RE = re.compile(r"<(?P<url>[A-Za-z][A-Za-z0-9+.-]{1,31}:[^\s<>]*)>")
BARE_URL_RE = re.compile(r"\bhttps?://[^\s<>()\[\]]+")
CODE_SPAN_RE = re.compile(r"(`+).+?\1")
ESCAPED_RE = re.compile(r"\\.")
TRAILING_PUNCT = ".,;:!?'\""


def _normalize_label(label: str) -> str:
    return " ".join(label.split()).lower()


def _mask(line: str) -> str:
    """Blank out code spans and escapes without shifting offsets."""
    line = CODE_SPAN_RE.sub(lambda m: " " * len(m.group(0)), line)
    return ESCAPED_RE.sub("  ", line)


def _collect_definitions(lines: list[tuple[int, str]]) -> dict[str, str]:
    definitions: dict[str, str] = {}
    for _, line in lines:
        m = DEFINITION_RE.match(line)
        if m and not m.group("ref").startswith("^"):
            label = _normalize_label(m.group("ref"))
            # First definition wins.
            definitions.setdefault(label, m.group("angle") or m.group("url") or "")
    return definitions


def _make_link(source: str, text: str, target: str, line: int, kind: str) -> Link:
    target = target.strip()
    if is_external_link(target):
        return Link(
            text=text,
            target=target,
            path="",
            anchor=None,
            line=line,
            kind=kind,
            external=True,
        )
    path, anchor = split_target(target)
    return Link(
        text=text,
        target=target,
        path=normalize_link_path(source, path),
        anchor=anchor,
        line=line,
        kind=kind,
    )


class _LineScanner:
    """Finds every link on one prose line, outermost first, without overlaps."""

    def __init__(self, source: str, definitions: dict[str, str]) -> None:
        self.source = source
        self.definitions = definitions

    def scan(self, lineno: int, line: str) -> list[Link]:
        masked = _mask(line)
        found: list[tuple[int, Link]] = []
        taken: list[tuple[int, int]] = []

        def free(start: int, end: int) -> bool:
            return all(end <= s or start >= e for s, e in taken)

        for start, end, link in self._inline(lineno, line, masked, 0, len(line)):
            found.append((start, link))
            taken.append((start, end))

        for m in REF_LINK_RE.finditer(masked):
            if not free(*m.span()):
                continue
            text = line[m.start("text") : m.end("text")]
            label = _normalize_label(m.group("ref") or m.group("text"))
            if label.startswith("^") or label not in self.definitions:
                continue
            kind = "image" if m.group("bang") else "reference"
            found.append(
                (
                    m.start(),
                    _make_link(
                        self.source, text, self.definitions[label], lineno, kind
                    ),
                )
            )
            taken.append(m.span())

        for m in SHORTCUT_RE.finditer(masked):
            label = _normalize_label(m.group("text"))
            if not free(*m.span()) or label not in self.definitions:
                continue
            kind = "image" if m.group("bang") else "reference"
            text = line[m.start("text") : m.end("text")]
            found.append(
                (
                    m.start(),
                    _make_link(
                        self.source, text, self.definitions[label], lineno, kind
                    ),
                )
            )
            taken.append(m.span())

        for m in AUTOLINK_RE.finditer(masked):
            if free(*m.span()):
                url = line[m.start("url") : m.end("url")]
                found.append(
                    (m.start(), _make_link(self.source, url, url, lineno, "autolink"))
                )
                taken.append(m.span())

        for m in BARE_URL_RE.finditer(masked):
            if free(*m.span()):
                url = line[m.start() : m.end()].rstrip(TRAILING_PUNCT)
                found.append(
                    (m.start(), _make_link(self.source, url, url, lineno, "autolink"))
                )
                taken.append(m.span())

        found.sort(key=lambda pair: pair[0])
        return [link for _, link in found]

    def _inline(
        self, lineno: int, line: str, masked: str, pos: int, endpos: int
    ) -> Iterator[tuple[int, int, Link]]:
        for m in INLINE_LINK_RE.finditer(masked, pos, endpos):
            text = line[m.start("text") : m.end("text")]
            if m.group("angle") is not None:
                target = line[m.start("angle") : m.end("angle")]
            else:
                target = line[m.start("url") : m.end("url")]
            kind = "image" if m.group("bang") else "inline"
            link = _make_link(self.source, text, target, lineno, kind)
            yield m.start(), m.end(), link
            # Badges: an image nested inside a link label.
            for start, _, inner in self._inline(
                lineno, line, masked, m.start("text"), m.end("text")
            ):
                yield start, start, inner


def extract_links(text: str, source: str = "") -> list[Link]:
    """Return every link in the document, in reading order.

    ``source`` is the document's repository-relative path; relative link
    paths are normalized against its directory. Links inside fenced code
    blocks, inline code spans and reference definitions are not extracted.
    """
    lines = scan_prose(text).lines
    definitions = _collect_definitions(lines)
    scanner = _LineScanner(source, definitions)
    links: list[Link] = []
    for lineno, line in lines:
        if DEFINITION_RE.match(line):
            continue
        links.extend(scanner.scan(lineno, line))
    return links
