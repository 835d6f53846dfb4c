"""Splitting and normalizing of link targets."""

import posixpath
from urllib.parse import unquote


def split_target(target: str) -> tuple[str, str | None]:
    """Split a raw target into (path, anchor) on the first ``#``.

    The query string is dropped and both parts are percent-decoded. An empty
    fragment (``file.md#``) counts as no anchor.
    """
    path, sep, anchor = target.strip().partition("#")
    path = path.split("?", 1)[0]
    return unquote(path), (unquote(anchor) if sep and anchor else None)


def normalize_link_path(source: str, path: str) -> str:
    """Resolve a link path against its source document.

    Returns a repository-relative POSIX path, or "" for a same-document link.
    A leading slash means the repository root. Paths that climb above the
    root keep their leading ``..`` so the resolver can reject them.
    """
    if not path:
        return ""
    if path.startswith("/"):
        joined = path.lstrip("/")
    else:
        joined = posixpath.join(posixpath.dirname(source), path)
    return posixpath.normpath(joined) if joined else "."
