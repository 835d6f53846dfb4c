"""Utility for generating anchor slugs for Markdown headers."""

import re
import unicodedata

SLUG_STYLES = ("github", "simple")

# Letters, marks, numbers and connector punctuation survive GitHub's slugger.
_KEPT_CATEGORIES = ("L", "M", "N", "Pc")


def github_slug(s: str) -> str:
    """Generate a GitHub anchor slug.

    Lowercase, drop everything except letters, numbers, spaces, hyphens and
    underscores, then turn each space into a hyphen. Runs are not collapsed,
    so "== vs ===" becomes "-vs-".
    """
    kept = (
        ch
        for ch in s.lower()
        if ch in " -" or unicodedata.category(ch).startswith(_KEPT_CATEGORIES)
    )
    return "".join(kept).replace(" ", "-")


def simple_slug(s: str) -> str:
    """Generate an ASCII slug: lower, keep [a-z0-9 -], hyphenate runs."""
    s = s.strip().lower()
    s = re.sub(r"[^a-z0-9 -]", "", s)
    return re.sub(r"[ -]+", "-", s).strip("-")


def header_slug(s: str, style: str = "github") -> str:
    """Generate the anchor slug for header text in the given style."""
    if style == "github":
        return github_slug(s)
    if style == "simple":
        return simple_slug(s)
    msg = f"Unknown slug style: {style!r} (expected one of {', '.join(SLUG_STYLES)})"
    raise ValueError(msg)
