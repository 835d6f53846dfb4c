"""Tests for link extraction and target normalization."""

from mdlinkcheck.extract_links import extract_links
from mdlinkcheck.is_external_link import is_external_link
from mdlinkcheck.split_target import normalize_link_path, split_target


def test_inline_links_and_anchors() -> None:
    """Verify inline links are split into path and anchor."""
    links = extract_links("See [B](other.md#sec) and [top](#intro).\n")
    assert [(ln.text, ln.path, ln.anchor) for ln in links] == [
        ("B", "other.md", "sec"),
        ("top", "", "intro"),
    ]
    assert all(ln.line == 1 and ln.kind == "inline" for ln in links)


def test_paths_are_normalized_against_source() -> None:
    """Verify relative, dot-prefixed and root-relative targets."""
    text = "[a](../README.md#appendix) [b](./README.md) [c](/docs/a.md) [d](../../x.md)"
    links = extract_links(text, source="docs/guide.md")
    assert [ln.path for ln in links] == [
        "README.md",
        "docs/README.md",
        "docs/a.md",
        "../x.md",
    ]

    root_links = extract_links("[a](./README.md) [b](README.md)\n", source="NOTES.md")
    assert {ln.path for ln in root_links} == {"README.md"}


def test_links_in_code_are_ignored() -> None:
    """Verify fenced and inline code never yield links."""
    text = "```\n[x](y.md)\n```\nUse `[x](y.md)` literally.\n"
    assert extract_links(text) == []


def test_escaped_brackets_are_not_links() -> None:
    """Verify backslash-escaped brackets stay literal."""
    assert extract_links(r"\[not](a.md)" + "\n") == []


def test_external_links_are_flagged() -> None:
    """Verify inline, angle-bracket and bare URLs are external."""
    text = (
        "[site](https://example.com) <https://x.dev/a> "
        "Visit https://example.com/page.\n"
    )
    links = extract_links(text)
    assert [(ln.target, ln.kind, ln.external) for ln in links] == [
        ("https://example.com", "inline", True),
        ("https://x.dev/a", "autolink", True),
        ("https://example.com/page", "autolink", True),
    ]


def test_images_and_badges() -> None:
    """Verify images, including an image nested inside a link label."""
    text = "![diagram](img/a.png)\n[![badge](b.svg)](https://ci.example)\n"
    links = extract_links(text)
    assert [(ln.kind, ln.target) for ln in links] == [
        ("image", "img/a.png"),
        ("inline", "https://ci.example"),
        ("image", "b.svg"),
    ]


def test_reference_links() -> None:
    """Verify full, collapsed and shortcut reference links use definitions."""
    text = (
        "Read [the guide][g], [Setup][] and [Notes].\n"
        "\n"
        "[g]: docs/guide.md#setup\n"
        "[setup]: <docs/setup.md>\n"
        "[notes]: notes.md\n"
    )
    links = extract_links(text)
    assert [(ln.text, ln.path, ln.anchor, ln.kind, ln.line) for ln in links] == [
        ("the guide", "docs/guide.md", "setup", "reference", 1),
        ("Setup", "docs/setup.md", None, "reference", 1),
        ("Notes", "notes.md", None, "reference", 1),
    ]


def test_undefined_references_stay_text() -> None:
    """Verify bracket pairs without a definition are not links."""
    assert extract_links("matrix[i][j] and [ ] todo and [^1]\n\n[^1]: footnote\n") == []


def test_angle_brackets_titles_and_encoding() -> None:
    """Verify angle targets, titles and percent-decoding."""
    text = '[a](<my file.md>) [b](a.md "Title") [c](my%20file.md#caf%C3%A9)\n'
    links = extract_links(text)
    assert [(ln.path, ln.anchor) for ln in links] == [
        ("my file.md", None),
        ("a.md", None),
        ("my file.md", "café"),
    ]


def test_line_numbers() -> None:
    """Verify links report the line they appear on."""
    links = extract_links("# T\n\ntext\n[a](#t)\n\n[b](#t)\n")
    assert [ln.line for ln in links] == [4, 6]


def test_split_target() -> None:
    """Verify fragment and query handling."""
    assert split_target("a.md#x") == ("a.md", "x")
    assert split_target("a.md#") == ("a.md", None)
    assert split_target("#only") == ("", "only")
    assert split_target("a.md?plain=1#L5") == ("a.md", "L5")
    assert split_target("") == ("", None)


def test_normalize_link_path() -> None:
    """Verify normalization to repository-relative paths."""
    assert normalize_link_path("README.md", "") == ""
    assert normalize_link_path("docs/a.md", "b.md") == "docs/b.md"
    assert normalize_link_path("docs/a.md", "./sub/../b.md") == "docs/b.md"
    assert normalize_link_path("docs/a.md", "/README.md") == "README.md"
    assert normalize_link_path("a.md", "..") == ".."
    assert normalize_link_path("docs/a.md", "../") == "."


def test_is_external_link() -> None:
    """Verify URI schemes and protocol-relative URLs count as external."""
    assert is_external_link("https://example.com")
    assert is_external_link("mailto:someone@example.com")
    assert is_external_link("//cdn.example.com/x.js")
    assert not is_external_link("docs/a.md")
    assert not is_external_link("#anchor")


def test_links_in_fence_nested_in_list_item_are_ignored() -> None:
    """Verify fences indented to a list item's content hide their links."""
    text = (
        "1. Step one\n\n"
        "    ```js\n"
        "    const f = handlers[0](req)\n"
        "    [x](y.md)\n"
        "    ```\n"
    )
    assert extract_links(text) == []

    nested = "- outer\n  - inner\n\n      ~~~\n      [x](y.md)\n      ~~~\n[z](z.md)\n"
    assert [ln.target for ln in extract_links(nested)] == ["z.md"]


def test_dedent_below_list_item_ends_its_fence() -> None:
    """Verify text outside the list item closes a fence opened inside it."""
    text = "- item\n\n  ```\n  code\n[after](a.md)\n"
    assert [ln.target for ln in extract_links(text)] == ["a.md"]
