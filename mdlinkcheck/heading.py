"""Data model for a Markdown heading and its anchor slug."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Heading:
    """A heading found outside fenced code, with the anchor it renders to."""

    level: int  # 1-6
    text: str  # Rendered text, inline markup removed
    slug: str  # Unique within the owning document
    line: int
