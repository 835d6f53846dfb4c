"""Collection and rendering of link validation results."""

import json
import time
from pathlib import Path
from typing import Any

from mdlinkcheck.document import Document
from mdlinkcheck.duplicate_detector import DIVERGED, EXACT, SIMILAR
from mdlinkcheck.link_status import LinkStatus
from mdlinkcheck.section import DuplicatePair
from mdlinkcheck.structural_warning import ReadFailure, StructuralWarning
from mdlinkcheck.validation_result import ValidationResult

EXIT_OK = 0
EXIT_PROBLEMS = 1
EXIT_USAGE = 2


class LinkReport:
    """Aggregates everything one run found and decides the exit code."""

    def __init__(self, root: str, config_hash: str) -> None:
        """Initialize an empty report with run metadata."""
        self.root = root
        self.config_hash = config_hash
        self.results: list[ValidationResult] = []
        self.warnings: list[tuple[str, StructuralWarning]] = []
        self.failures: list[ReadFailure] = []
        self.duplicates: list[DuplicatePair] = []
        self.documents_checked = 0
        self.start_time = time.time()

    def add_document(self, doc: Document) -> None:
        """Count a loaded document and keep its structural warnings."""
        self.documents_checked += 1
        self.warnings.extend((doc.path, w) for w in doc.warnings)

    def add_results(self, results: list[ValidationResult]) -> None:
        """Add link resolution results."""
        self.results.extend(results)

    def add_failure(self, failure: ReadFailure) -> None:
        """Record a document that could not be read."""
        self.failures.append(failure)

    def set_duplicates(self, pairs: list[DuplicatePair]) -> None:
        """Attach duplicate-section findings."""
        self.duplicates = list(pairs)

    @property
    def problems(self) -> list[ValidationResult]:
        """Return the dangling results."""
        return [r for r in self.results if r.status.is_dangling]

    def counts(self) -> dict[str, int]:
        """Count results per status, including zero counts."""
        counts = {status.value: 0 for status in LinkStatus}
        for r in self.results:
            counts[r.status.value] += 1
        return counts

    def exit_code(self, *, strict: bool = False) -> int:
        """Return 1 if anything should fail CI, else 0.

        Dangling links and unreadable documents always fail; structural
        warnings fail only in strict mode.
        """
        if self.problems or self.failures:
            return EXIT_PROBLEMS
        if strict and self.warnings:
            return EXIT_PROBLEMS
        return EXIT_OK

    def render_text(self, *, quiet: bool = False) -> str:
        """Render a plain-text report; ``quiet`` keeps only the summary."""
        out: list[str] = []
        if not quiet:
            out.extend(self._render_problems())
            out.extend(self._render_warnings())
            out.extend(self._render_duplicates())
        out.append(self._summary_line())
        return "\n".join(out) + "\n"

    def generate_report(self, path: str) -> None:
        """Write the full report to a JSON file."""
        report = {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "root": self.root,
                "config_hash": self.config_hash,
                "documents_checked": self.documents_checked,
            },
            "results": [
                {
                    "source": r.source,
                    "line": r.link.line,
                    "text": r.link.text,
                    "target": r.link.target,
                    "kind": r.link.kind,
                    "status": r.status.value,
                    "resolved_path": r.target,
                    "reason": r.reason,
                }
                for r in self.results
            ],
            "warnings": [
                {"source": path_, "line": w.line, "message": w.message}
                for path_, w in self.warnings
            ],
            "failures": [{"source": f.path, "error": f.error} for f in self.failures],
            "duplicates": [
                {
                    "heading": p.heading,
                    "first": {"source": p.first.path, "line": p.first.line},
                    "second": {"source": p.second.path, "line": p.second.line},
                    "similarity": round(p.similarity, 4),
                    "classification": p.classification,
                }
                for p in self.duplicates
            ],
            "stats": self._compute_stats(),
        }
        Path(path).write_text(json.dumps(report, indent=2), encoding="utf-8")

    def _compute_stats(self) -> dict[str, Any]:
        per_document: dict[str, int] = {}
        for r in self.problems:
            per_document[r.source] = per_document.get(r.source, 0) + 1
        duplicate_counts = {EXACT: 0, SIMILAR: 0, DIVERGED: 0}
        for p in self.duplicates:
            duplicate_counts[p.classification] += 1
        return {
            "status_counts": self.counts(),
            "total_links": len(self.results),
            "problems_per_document": per_document,
            "warning_count": len(self.warnings),
            "failure_count": len(self.failures),
            "duplicate_counts": duplicate_counts,
        }

    def _render_problems(self) -> list[str]:
        out: list[str] = []
        current = None
        for r in self.problems:
            if r.source != current:
                current = r.source
                out.append(current)
            out.append(
                f"  {r.link.line}: [{r.link.text}]({r.link.target}) "
                f"{r.status.value}: {r.reason}"
            )
        for f in self.failures:
            out.append(f"{f.path}: could not read: {f.error}")
        return out

    def _render_warnings(self) -> list[str]:
        if not self.warnings:
            return []
        out = ["Warnings:"]
        out.extend(f"  {path}:{w.line}: {w.message}" for path, w in self.warnings)
        return out

    def _render_duplicates(self) -> list[str]:
        if not self.duplicates:
            return []
        order = {DIVERGED: 0, SIMILAR: 1, EXACT: 2}
        ranked = sorted(
            self.duplicates, key=lambda p: (order[p.classification], p.similarity)
        )
        out = ["Duplicate sections:"]
        out.extend(
            f"  {p.classification:<8} {p.similarity:.2f}  {p.heading!r}  "
            f"{p.first.path}:{p.first.line} <-> {p.second.path}:{p.second.line}"
            for p in ranked
        )
        return out

    def _summary_line(self) -> str:
        counts = self.counts()
        parts = ", ".join(f"{n} {status}" for status, n in counts.items())
        return (
            f"Checked {self.documents_checked} documents, {len(self.results)} links: "
            f"{parts}; {len(self.warnings)} warnings; "
            f"{len(self.failures)} read failures"
        )
