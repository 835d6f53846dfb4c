"""Fingerprint of the effective configuration, stamped into JSON reports."""

import hashlib
import json
from typing import Any


def compute_config_hash(config: dict[str, Any]) -> str:
    """Return the SHA-256 hex digest of ``config``.

    Two runs share a digest exactly when their merged settings match,
    whatever order the YAML listed the keys in.
    """
    canonical = json.dumps(config, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
