"""Data models for document sections and duplicate-section findings."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Section:
    """A heading and the body lines up to the next heading."""

    path: str
    heading: str
    line: int
    body: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class DuplicatePair:
    """Two same-titled sections in different documents and how alike they are."""

    heading: str
    first: Section
    second: Section
    similarity: float
    classification: str  # exact/similar/diverged
