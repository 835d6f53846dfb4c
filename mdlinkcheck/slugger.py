"""Stateful slugger that numbers repeated headings within one document."""

from mdlinkcheck.header_slug import header_slug


class Slugger:
    """Hands out unique slugs in order of appearance.

    The second "Appendix" becomes ``appendix-1``, the third ``appendix-2``. A
    suffixed slug that is already taken (say by a literal "Appendix 1"
    heading) is skipped and the counter keeps going.
    """

    def __init__(self, style: str = "github") -> None:
        """Initialize an empty slugger for one document."""
        self.style = style
        self.occurrences: dict[str, int] = {}

    def slug(self, text: str) -> str:
        """Return the next unique slug for the given heading text."""
        original = header_slug(text, self.style)
        result = original
        while result in self.occurrences:
            self.occurrences[original] += 1
            result = f"{original}-{self.occurrences[original]}"
        self.occurrences[result] = 0
        return result
