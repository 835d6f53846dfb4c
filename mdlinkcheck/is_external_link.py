"""Detection of links that point outside the repository."""

import re

# Any URI scheme (http:, mailto:, tel:, ...) or a protocol-relative URL.
EXTERNAL_RE = re.compile(r"^(?:[A-Za-z][A-Za-z0-9+.-]*:|//)")


def is_external_link(target: str) -> bool:
    """Check if a link target leaves the repository."""
    return bool(EXTERNAL_RE.match(target.strip()))
