"""Data model for links extracted from Markdown."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Link:
    """A link as written in a document, with its target split and normalized."""

    text: str
    target: str  # Raw target as written, e.g. ../README.md#appendix
    path: str  # Repository-relative path; "" means the source document
    anchor: str | None
    line: int
    kind: str = "inline"  # inline/image/reference/autolink
    external: bool = False
