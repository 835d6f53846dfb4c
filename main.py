"""Main orchestration script for checking this repository's Markdown links."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path


def run_command(cmd_list: Sequence[str | Path], cwd: Path | str | None = None) -> int:
    """Run a command and return its exit code."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    return subprocess.run(cmd_list, check=False, cwd=cwd).returncode


def build_check_command(args: argparse.Namespace) -> list[str]:
    """Build the checker command line for a child running in the project dir.

    Paths given by the caller are resolved against the current directory first.
    """
    cmd = [sys.executable, "-m", "mdlinkcheck.check_links", _absolute(args.root)]
    if args.duplicates:
        cmd.append("--duplicates")
    if args.json:
        cmd.extend(["--json", _absolute(args.json)])
    if args.config:
        cmd.extend(["--config", _absolute(args.config)])
    return cmd


def _absolute(path: str) -> str:
    return str(Path(path).resolve())


def main() -> None:
    """Run the link check, optionally after the development checks."""
    parser = argparse.ArgumentParser(
        description="Check links and anchors across the Markdown documents."
    )
    parser.add_argument(
        "root",
        nargs="?",
        default=".",
        help="Directory to check (default: current directory)",
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Run development checks (linting, tests) before checking links",
    )
    parser.add_argument(
        "--duplicates",
        action="store_true",
        help="Report same-titled sections that drifted apart",
    )
    parser.add_argument(
        "--json",
        help="Write a JSON report to this path",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    args = parser.parse_args()

    root_dir = Path(__file__).parent

    if args.dev:
        print("--- Running Development Checks ---")
        code = run_command([sys.executable, str(root_dir / "dev.py"), "--ci"])
        if code:
            sys.exit(code)
        print("\n✅ Development checks passed. Proceeding with link check.\n")

    code = run_command(build_check_command(args), cwd=root_dir)
    if code:
        print(f"\nFAILED: broken links found under {args.root}")
        sys.exit(code)
    print(f"\nSUCCESS: all links under {args.root} resolve")


if __name__ == "__main__":
    main()
