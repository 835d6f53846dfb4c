"""End-to-end tests for the mdlinkcheck command line."""

import json
from pathlib import Path

import pytest

from mdlinkcheck.check_links import main

README = """# Interview Questions

- [NestJS](#nestjs)
- [JavaScript](JavaScript.md#closures)
- [Appendix](#appendix-1)

## NestJS

```bash
# Not A Heading
[fake](missing.md)
```

## Appendix

## Appendix

See [docs](https://docs.nestjs.com).
"""

JAVASCRIPT = """# JavaScript

## Closures

Back to [the index](./README.md#interview-questions).
"""


def _tree(root: Path) -> None:
    (root / "README.md").write_text(README, encoding="utf-8")
    (root / "JavaScript.md").write_text(JAVASCRIPT, encoding="utf-8")


def test_clean_tree_exits_zero(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify a consistent tree passes and the summary is printed."""
    _tree(tmp_path)
    assert main([str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "Checked 2 documents, 5 links: 4 resolved" in out
    assert "1 external" in out


def test_dangling_links_exit_one(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify dangling anchors and files are listed and fail the run."""
    _tree(tmp_path)
    (tmp_path / "React.md").write_text(
        "# React\n[a](JavaScript.md#hooks)\n[b](Nonexistent.md#x)\n", encoding="utf-8"
    )
    assert main([str(tmp_path)]) == 1
    out = capsys.readouterr().out
    assert "React.md\n" in out
    assert "2: [a](JavaScript.md#hooks) dangling_anchor" in out
    assert "3: [b](Nonexistent.md#x) dangling_file" in out


def test_json_report_and_duplicates(tmp_path: Path) -> None:
    """Verify the JSON report includes results and duplicate sections."""
    _tree(tmp_path)
    (tmp_path / "README-v2.md").write_text(
        "## NestJS\n\nGuards run first.   \n", encoding="utf-8"
    )
    (tmp_path / "Notes.md").write_text(
        "## NestJS\n\nGuards run first.\n", encoding="utf-8"
    )
    report_path = tmp_path / "out" / "report.json"
    report_path.parent.mkdir()
    assert main([str(tmp_path), "--json", str(report_path), "--duplicates"]) == 0

    content = json.loads(report_path.read_text(encoding="utf-8"))
    assert content["meta"]["documents_checked"] == 4
    assert content["stats"]["status_counts"]["resolved"] == 4
    exact = [d for d in content["duplicates"] if d["classification"] == "exact"]
    assert {(d["first"]["source"], d["second"]["source"]) for d in exact} == {
        ("Notes.md", "README-v2.md")
    }


def test_unreadable_document_fails_but_others_are_checked(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify a read failure is reported without aborting the run."""
    _tree(tmp_path)
    (tmp_path / "Broken.md").write_bytes(b"\xff\xfe")
    assert main([str(tmp_path)]) == 1
    out = capsys.readouterr().out
    assert "Broken.md: could not read" in out
    assert "Checked 2 documents, 5 links" in out


def test_strict_mode_fails_on_warnings(tmp_path: Path) -> None:
    """Verify an unterminated fence fails only under --strict."""
    (tmp_path / "a.md").write_text("# A\n```\ncode\n", encoding="utf-8")
    assert main([str(tmp_path), "--quiet"]) == 0
    assert main([str(tmp_path), "--quiet", "--strict"]) == 1


def test_config_in_root_is_used(tmp_path: Path) -> None:
    """Verify ignore patterns from .mdlinkcheck.yml apply."""
    (tmp_path / "a.md").write_text("[x](drafts/todo.md)\n", encoding="utf-8")
    assert main([str(tmp_path), "--quiet"]) == 1
    (tmp_path / ".mdlinkcheck.yml").write_text(
        "ignore_patterns: ['^drafts/']\n", encoding="utf-8"
    )
    assert main([str(tmp_path), "--quiet"]) == 0


def test_jobs_do_not_change_results(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify threaded extraction prints the same report."""
    _tree(tmp_path)
    main([str(tmp_path)])
    serial = capsys.readouterr().out
    main([str(tmp_path), "--jobs", "4"])
    assert capsys.readouterr().out == serial


def test_usage_errors_exit_two(tmp_path: Path) -> None:
    """Verify a missing root or bad config exits with 2."""
    assert main([str(tmp_path / "missing")]) == 2

    bad = tmp_path / "bad.yml"
    bad.write_text("slugger: pandoc\n", encoding="utf-8")
    assert main([str(tmp_path), "--config", str(bad)]) == 2

    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path), "--jobs", "0"])
    assert excinfo.value.code == 2


def test_unwritable_json_report_exits_two(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Verify a JSON report path in a missing directory is a usage error."""
    _tree(tmp_path)
    report_path = tmp_path / "nope" / "report.json"
    assert main([str(tmp_path), "--quiet", "--json", str(report_path)]) == 2
    assert not report_path.exists()
    assert "Cannot write JSON report" in caplog.text
