"""Cross-file resolution of extracted links against document anchors."""

from __future__ import annotations

import logging
import posixpath
import re
from typing import TYPE_CHECKING

from mdlinkcheck.link_status import LinkStatus
from mdlinkcheck.validation_result import ValidationResult

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from mdlinkcheck.document import Document
    from mdlinkcheck.link import Link

logger = logging.getLogger(__name__)

# GitHub prefixes rendered ids; links may spell the prefix out.
USER_CONTENT_PREFIX = "user-content-"
# Browsers scroll to the top for #top when no element claims it.
TOP_ANCHOR = "top"
DIRECTORY_INDEX = "README.md"


class LinkResolver:
    """Classifies links as resolved or dangling against a set of documents.

    Document paths are compared case-sensitively. Missing targets never
    raise; every link gets a ValidationResult.
    """

    def __init__(
        self,
        root: Path,
        documents: Iterable[Document],
        *,
        unreadable: Iterable[str] = (),
        ignore_patterns: Iterable[str] = (),
        case_insensitive_anchors: bool = True,
    ) -> None:
        """Index the anchors of every document."""
        self.root = root
        self.documents = {d.path: d for d in documents}
        self.unreadable = set(unreadable)
        self.ignore_patterns = [re.compile(p) for p in ignore_patterns]
        self.case_insensitive_anchors = case_insensitive_anchors
        self._anchors = {
            path: {self._fold(a) for a in doc.anchors}
            for path, doc in self.documents.items()
        }

    def resolve_all(self) -> list[ValidationResult]:
        """Resolve every link of every indexed document, ordered by path."""
        results: list[ValidationResult] = []
        for path in sorted(self.documents):
            doc = self.documents[path]
            results.extend(self.resolve(doc, link) for link in doc.links)
        logger.info(
            "Resolved %d links in %d documents", len(results), len(self.documents)
        )
        return results

    def resolve(self, source: Document, link: Link) -> ValidationResult:
        """Classify a single link found in ``source``."""
        if any(p.search(link.target) for p in self.ignore_patterns):
            return self._result(
                source, link, LinkStatus.IGNORED, reason="Ignored by pattern"
            )
        if link.external:
            return self._result(source, link, LinkStatus.EXTERNAL, target=link.target)
        if not link.path:
            return self._check_anchor(source, link, source)

        path = link.path
        if path == ".." or path.startswith("../"):
            return self._result(
                source,
                link,
                LinkStatus.DANGLING_FILE,
                target=path,
                reason="Target is outside the repository root",
            )
        if path in self.documents:
            return self._check_anchor(source, link, self.documents[path])
        if path in self.unreadable:
            return self._result(
                source,
                link,
                LinkStatus.RESOLVED,
                target=path,
                reason="Target could not be read; anchor not checked",
            )

        candidate = self.root / path
        if candidate.is_dir():
            index = (
                DIRECTORY_INDEX
                if path == "."
                else posixpath.join(path, DIRECTORY_INDEX)
            )
            if link.anchor is not None and index in self.documents:
                return self._check_anchor(source, link, self.documents[index])
            return self._result(source, link, LinkStatus.RESOLVED, target=path)
        if candidate.exists():
            reason = "Not a scanned document; anchor not checked" if link.anchor else ""
            return self._result(
                source, link, LinkStatus.RESOLVED, target=path, reason=reason
            )
        return self._result(
            source,
            link,
            LinkStatus.DANGLING_FILE,
            target=path,
            reason=f"No such file: {path}",
        )

    def has_anchor(self, doc: Document, anchor: str) -> bool:
        """Check whether ``anchor`` names a heading or HTML anchor in ``doc``."""
        if self.documents.get(doc.path) is doc:
            anchors = self._anchors[doc.path]
        else:
            anchors = {self._fold(a) for a in doc.anchors}
        wanted = self._fold(anchor)
        if wanted in anchors:
            return True
        if wanted.startswith(USER_CONTENT_PREFIX):
            return wanted[len(USER_CONTENT_PREFIX) :] in anchors
        return wanted.lower() == TOP_ANCHOR

    def _check_anchor(
        self, source: Document, link: Link, target: Document
    ) -> ValidationResult:
        if link.anchor is None or self.has_anchor(target, link.anchor):
            return self._result(source, link, LinkStatus.RESOLVED, target=target.path)
        return self._result(
            source,
            link,
            LinkStatus.DANGLING_ANCHOR,
            target=target.path,
            reason=f"No heading or anchor #{link.anchor} in {target.path}",
        )

    def _fold(self, anchor: str) -> str:
        return anchor.lower() if self.case_insensitive_anchors else anchor

    @staticmethod
    def _result(
        source: Document,
        link: Link,
        status: LinkStatus,
        *,
        target: str = "",
        reason: str = "",
    ) -> ValidationResult:
        return ValidationResult(
            source=source.path, link=link, status=status, target=target, reason=reason
        )
