"""Reduce inline Markdown in heading text to what a renderer displays."""

import html
import re

IMAGE_RE = re.compile(r"!\[([^\]]*)\]\([^)]*\)")
LINK_RE = re.compile(r"\[([^\]]*)\]\([^)]*\)")
REF_LINK_RE = re.compile(r"\[([^\]]*)\]\[[^\]]*\]")
CODE_SPAN_RE = re.compile(r"(`+)(.+?)\1")
HTML_TAG_RE = re.compile(r"</?[A-Za-z][^>]*>")
STAR_EMPHASIS_RE = re.compile(r"(\*{1,3})(?=\S)(.+?)(?<=\S)\1")
UNDERSCORE_EMPHASIS_RE = re.compile(r"(?<!\w)(_{1,3})(?=\S)(.+?)(?<=\S)\1(?!\w)")
ESCAPE_RE = re.compile(r"\\([!-/:-@\[-`{-~])")


def _strip_markup(text: str) -> str:
    text = HTML_TAG_RE.sub("", text)
    text = STAR_EMPHASIS_RE.sub(r"\2", text)
    text = UNDERSCORE_EMPHASIS_RE.sub(r"\2", text)
    text = ESCAPE_RE.sub(r"\1", text)
    return html.unescape(text)


def _code_span_content(content: str) -> str:
    # One surrounding space is stripped when both ends have one.
    if len(content) > 1 and content[0] == content[-1] == " " and content.strip():
        return content[1:-1]
    return content


def plain_heading_text(text: str) -> str:
    """Return heading text with links, images, code and emphasis unwrapped.

    Code span contents are kept verbatim, so "`__init__` method" keeps its
    underscores.
    """
    text = IMAGE_RE.sub(r"\1", text)
    text = LINK_RE.sub(r"\1", text)
    text = REF_LINK_RE.sub(r"\1", text)

    pieces: list[str] = []
    pos = 0
    for m in CODE_SPAN_RE.finditer(text):
        pieces.append(_strip_markup(text[pos : m.start()]))
        pieces.append(_code_span_content(m.group(2)))
        pos = m.end()
    pieces.append(_strip_markup(text[pos:]))
    return "".join(pieces).strip()
