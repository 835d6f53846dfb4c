"""Development script to run checks (formatting, linting, tests) and a self-check."""

import argparse
import subprocess
import sys


def run_command(command: list[str], step_name: str) -> None:
    """Run a shell command as a step in the development process."""
    print(f"\n--- Running Step: {step_name} ---")
    print(f"$ {' '.join(command)}")
    try:
        subprocess.run(command, check=True)
    except subprocess.CalledProcessError:
        print(f"\n❌ Failed: {step_name}")
        sys.exit(1)


def ci_gate() -> None:
    """Run the read-only checks used in CI."""
    run_command(["ruff", "format", "--check", "."], "Ruff Format Check")
    run_command(["ruff", "check", "."], "Ruff Linting")
    run_command([sys.executable, "-m", "pytest"], "Tests")


def main() -> None:
    """Run the development checks and optionally the link self-check."""
    parser = argparse.ArgumentParser(
        description="Run development checks and the link self-check."
    )
    parser.add_argument(
        "--ci", action="store_true", help="Run checks and tests only, skipping main.py"
    )
    args = parser.parse_args()

    if args.ci:
        ci_gate()
        print("\n✅ CI checks passed successfully. Skipping execution of main.py.")
        return

    # Run auto-formatting and fixing
    run_command(["ruff", "format", "."], "Ruff Formatting")
    run_command(["ruff", "check", "--fix", "."], "Ruff Linting & Fixes")

    ci_gate()

    # Check this repository's own Markdown
    run_command([sys.executable, "main.py", "."], "Link Self-Check")

    print("\n✅ All development checks and the link self-check passed successfully.")


if __name__ == "__main__":
    main()
