"""Loading of every discovered document, optionally in parallel."""

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from mdlinkcheck.document import Document
from mdlinkcheck.load_document import load_document
from mdlinkcheck.structural_warning import ReadFailure

logger = logging.getLogger(__name__)


def build_documents(
    root: Path, paths: Sequence[str], style: str = "github", jobs: int = 1
) -> tuple[list[Document], list[ReadFailure]]:
    """Load documents, turning unreadable files into ReadFailures.

    With ``jobs > 1`` files are read on a thread pool. Every load finishes
    before this returns, and output order follows ``paths``.
    """

    def load(path: str) -> Document | ReadFailure:
        try:
            return load_document(root, path, style)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read %s: %s", path, exc)
            return ReadFailure(path=path, error=str(exc))

    if jobs > 1 and len(paths) > 1:
        with ThreadPoolExecutor(max_workers=jobs) as pool:
            outcomes = list(pool.map(load, paths))
    else:
        outcomes = [load(p) for p in paths]

    documents = [o for o in outcomes if isinstance(o, Document)]
    failures = [o for o in outcomes if isinstance(o, ReadFailure)]
    return documents, failures
