"""Detection of same-titled sections that were copied between documents."""

import logging
from difflib import SequenceMatcher
from itertools import combinations

from mdlinkcheck.document import Document
from mdlinkcheck.section import DuplicatePair, Section
from mdlinkcheck.split_sections import split_sections

logger = logging.getLogger(__name__)

EXACT = "exact"
SIMILAR = "similar"
DIVERGED = "diverged"


def heading_key(text: str) -> str:
    """Normalize heading text for grouping: case-folded, single-spaced."""
    return " ".join(text.split()).casefold()


def similarity(a: list[str], b: list[str]) -> float:
    """Score two normalized bodies from 0.0 (unrelated) to 1.0 (identical)."""
    return SequenceMatcher(None, "\n".join(a), "\n".join(b), autojunk=False).ratio()


class DuplicateDetector:
    """Groups sections by heading across documents and scores each pair.

    Pairs at or above ``exact_threshold`` are exact duplicates, pairs below
    ``diverged_threshold`` have drifted apart, everything between is similar.
    """

    def __init__(
        self, exact_threshold: float = 0.98, diverged_threshold: float = 0.75
    ) -> None:
        """Initialize the detector with its classification thresholds."""
        self.exact_threshold = exact_threshold
        self.diverged_threshold = diverged_threshold

    def classify(self, score: float) -> str:
        """Map a similarity score to exact, similar or diverged."""
        if score >= self.exact_threshold:
            return EXACT
        if score < self.diverged_threshold:
            return DIVERGED
        return SIMILAR

    def detect(self, documents: list[Document]) -> list[DuplicatePair]:
        """Return a DuplicatePair for every same-titled cross-document pair."""
        groups: dict[str, list[Section]] = {}
        for doc in documents:
            for section in split_sections(doc):
                key = heading_key(section.heading)
                if key:
                    groups.setdefault(key, []).append(section)

        pairs: list[DuplicatePair] = []
        for key in sorted(groups):
            for first, second in combinations(groups[key], 2):
                if first.path == second.path:
                    continue
                score = similarity(first.body, second.body)
                pairs.append(
                    DuplicatePair(
                        heading=first.heading,
                        first=first,
                        second=second,
                        similarity=score,
                        classification=self.classify(score),
                    )
                )
        logger.info(
            "Compared %d duplicated sections, %d diverged",
            len(pairs),
            sum(1 for p in pairs if p.classification == DIVERGED),
        )
        return pairs
