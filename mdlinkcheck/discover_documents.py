"""Discovery of Markdown documents under a repository root."""

import fnmatch
import logging
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


def is_excluded(rel_path: str, patterns: Iterable[str]) -> bool:
    """Check a repository-relative path against exclusion globs.

    Patterns are unanchored like .gitignore entries: ``node_modules/**`` also
    excludes ``web/node_modules/x.md``.
    """
    parts = rel_path.split("/")
    tails = ["/".join(parts[i:]) for i in range(len(parts))]
    return any(fnmatch.fnmatchcase(tail, pat) for pat in patterns for tail in tails)


def discover_documents(
    root: Path, extensions: Iterable[str], exclude: Iterable[str] = ()
) -> list[str]:
    """Return sorted repository-relative paths of every Markdown file."""
    suffixes = {e.lower() for e in extensions}
    patterns = list(exclude)
    found: list[str] = []
    for p in root.rglob("*"):
        if p.suffix.lower() not in suffixes or not p.is_file():
            continue
        rel = p.relative_to(root).as_posix()
        if is_excluded(rel, patterns):
            logger.debug("Excluded %s", rel)
            continue
        found.append(rel)
    found.sort()
    logger.info("Found %d Markdown documents under %s", len(found), root)
    return found
