"""Data model for a scanned Markdown document."""

from dataclasses import dataclass, field

from mdlinkcheck.heading import Heading
from mdlinkcheck.link import Link
from mdlinkcheck.structural_warning import StructuralWarning


@dataclass
class Document:
    """A single Markdown file with everything extracted from it."""

    path: str  # Repository-relative POSIX path
    text: str
    headings: list[Heading] = field(default_factory=list)
    links: list[Link] = field(default_factory=list)
    html_anchors: list[str] = field(default_factory=list)  # <a name/id="...">
    warnings: list[StructuralWarning] = field(default_factory=list)

    @property
    def anchors(self) -> set[str]:
        """Return every fragment identifier this document defines."""
        return {h.slug for h in self.headings} | set(self.html_anchors)
