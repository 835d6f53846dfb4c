"""Line-by-line tracking of fenced code blocks."""

import re

# ``` or ~~~ (or longer), indented at most MAX_FENCE_INDENT past its container.
FENCE_RE = re.compile(r"^(?P<indent> *)(?P<fence>`{3,}|~{3,})(?P<info>.*)$")
LIST_ITEM_RE = re.compile(r"^(?P<indent> *)(?P<marker>[-+*]|\d{1,9}[.)])(?P<gap> +|$)")
MAX_FENCE_INDENT = 3
# A list marker followed by more spaces than this starts indented code.
MAX_LIST_GAP = 4


def _indent(line: str) -> int:
    return len(line) - len(line.lstrip(" "))


class FenceTracker:
    """Tracks whether a scan is currently inside a fenced code block.

    Open list items are followed by their content offset, so a fence nested
    in ``1. Step`` may be indented up to six spaces.
    """

    def __init__(self) -> None:
        """Start outside any fence or list."""
        self.fence_char = ""
        self.fence_len = 0
        self.fence_offset = 0
        self.opened_at = 0
        self.list_offsets: list[int] = []

    @property
    def in_fence(self) -> bool:
        """Return True while an opened fence has not been closed."""
        return bool(self.fence_char)

    @property
    def content_offset(self) -> int:
        """Column where the innermost open list item's content starts."""
        return self.list_offsets[-1] if self.list_offsets else 0

    def feed(self, line: str, lineno: int) -> bool:
        """Consume one line and return True if it belongs to a fence.

        Opening and closing marker lines count as part of the fence.
        """
        blank = not line.strip()
        if self.in_fence:
            if blank or _indent(line) >= self.fence_offset:
                if self._closes(line):
                    self._close()
                return True
            # Dedented below the list item holding the fence: both end here.
            self._close()
        if blank:
            return False
        return self._opens(self._track_lists(line), lineno)

    def _track_lists(self, line: str) -> str:
        """Update open list items and return the line with its marker blanked."""
        indent = _indent(line)
        while self.list_offsets and indent < self.content_offset:
            self.list_offsets.pop()
        item = LIST_ITEM_RE.match(line)
        if not item or indent > self.content_offset + MAX_FENCE_INDENT:
            return line
        gap = len(item.group("gap"))
        if gap == 0 or gap > MAX_LIST_GAP:
            gap = 1
        offset = indent + len(item.group("marker")) + gap
        self.list_offsets.append(offset)
        return " " * offset + line[item.end() :]

    def _opens(self, line: str, lineno: int) -> bool:
        m = FENCE_RE.match(line)
        if not m or len(m.group("indent")) > self.content_offset + MAX_FENCE_INDENT:
            return False
        fence = m.group("fence")
        # A backtick fence's info string may not itself contain backticks.
        if fence[0] == "`" and "`" in m.group("info"):
            return False
        self.fence_char = fence[0]
        self.fence_len = len(fence)
        self.fence_offset = self.content_offset
        self.opened_at = lineno
        return True

    def _closes(self, line: str) -> bool:
        m = FENCE_RE.match(line)
        return bool(
            m
            and len(m.group("indent")) <= self.fence_offset + MAX_FENCE_INDENT
            and m.group("fence")[0] == self.fence_char
            and len(m.group("fence")) >= self.fence_len
            and not m.group("info").strip()
        )

    def _close(self) -> None:
        self.fence_char = ""
        self.fence_len = 0
        self.fence_offset = 0
