"""Data model for the outcome of resolving one link."""

from dataclasses import dataclass

from mdlinkcheck.link import Link
from mdlinkcheck.link_status import LinkStatus


@dataclass(frozen=True)
class ValidationResult:
    """Represents the outcome of resolving a link found in a source document."""

    source: str
    link: Link
    status: LinkStatus
    target: str = ""  # Document or file the link resolved to
    reason: str = ""
