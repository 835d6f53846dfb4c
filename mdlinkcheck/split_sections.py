"""Splitting of documents into heading-delimited sections."""

import re

from mdlinkcheck.document import Document
from mdlinkcheck.section import Section

SETEXT_UNDERLINE_RE = re.compile(r"^ {0,3}(=+|-+)[ \t]*$")


def normalize_body(lines: list[str]) -> list[str]:
    """Drop trailing whitespace and blank lines."""
    return [ln.rstrip() for ln in lines if ln.strip()]


def split_sections(doc: Document) -> list[Section]:
    """Return one Section per heading; the body runs to the next heading.

    Fenced code inside a section is part of its body.
    """
    raw_lines = doc.text.splitlines()
    sections: list[Section] = []
    for idx, heading in enumerate(doc.headings):
        end = (
            doc.headings[idx + 1].line - 1
            if idx + 1 < len(doc.headings)
            else len(raw_lines)
        )
        body = raw_lines[heading.line : end]
        # Setext headings carry their underline as the first body line.
        if body and SETEXT_UNDERLINE_RE.match(body[0]):
            body = body[1:]
        sections.append(
            Section(
                path=doc.path,
                heading=heading.text,
                line=heading.line,
                body=normalize_body(body),
            )
        )
    return sections
