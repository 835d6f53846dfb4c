"""Outcome categories for link resolution."""

from enum import Enum


class LinkStatus(str, Enum):
    """Classification of a single link after resolution."""

    RESOLVED = "resolved"
    DANGLING_ANCHOR = "dangling_anchor"
    DANGLING_FILE = "dangling_file"
    EXTERNAL = "external"
    IGNORED = "ignored"

    @property
    def is_dangling(self) -> bool:
        """Return True for statuses that should fail a CI run."""
        return self in {LinkStatus.DANGLING_ANCHOR, LinkStatus.DANGLING_FILE}
