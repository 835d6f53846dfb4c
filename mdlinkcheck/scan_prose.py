"""Split Markdown into the lines that can carry headings and links."""

from dataclasses import dataclass, field

from mdlinkcheck.fence_tracker import FenceTracker
from mdlinkcheck.structural_warning import StructuralWarning

FRONT_MATTER_MARKER = "---"


@dataclass
class ProseScan:
    """Prose lines (1-based line number, text) and any structural warnings."""

    lines: list[tuple[int, str]] = field(default_factory=list)
    warnings: list[StructuralWarning] = field(default_factory=list)


def _front_matter_end(raw_lines: list[str]) -> int:
    """Return the number of leading lines taken by YAML front matter."""
    if not raw_lines or raw_lines[0].rstrip() != FRONT_MATTER_MARKER:
        return 0
    for idx in range(1, len(raw_lines)):
        if raw_lines[idx].rstrip() in {FRONT_MATTER_MARKER, "..."}:
            return idx + 1
    return 0


def scan_prose(text: str) -> ProseScan:
    """Return the lines outside fenced code blocks and front matter.

    An unterminated fence is closed implicitly at end of file and reported as
    a StructuralWarning; this never raises.
    """
    scan = ProseScan()
    raw_lines = text.splitlines()
    skip = _front_matter_end(raw_lines)
    tracker = FenceTracker()
    for lineno, line in enumerate(raw_lines, start=1):
        if lineno <= skip:
            continue
        if tracker.feed(line, lineno):
            continue
        scan.lines.append((lineno, line))
    if tracker.in_fence:
        scan.warnings.append(
            StructuralWarning(
                line=tracker.opened_at,
                message=(
                    f"Unterminated code fence opened with "
                    f"{tracker.fence_char * tracker.fence_len}; "
                    "treated as closed at end of file"
                ),
            )
        )
    return scan
