"""Development script to run checks (formatting, linting, tests) and a site build."""

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


def main() -> None:
    """Run the development checks and optionally build the site."""
    parser = argparse.ArgumentParser(
        description="Run development checks and build the site."
    )
    parser.add_argument(
        "--ci", action="store_true", help="Run checks and tests only, skipping the build"
    )
    args = parser.parse_args()

    if not args.ci:
        run_command(["ruff", "format"], "Ruff Formatting")
        run_command(["ruff", "check", "--fix"], "Ruff Linting & Fixes")
    else:
        run_command(["ruff", "format", "--check"], "Ruff Format Check")
        run_command(["ruff", "check"], "Ruff Lint Check")

    run_command(
        [sys.executable, "-m", "pytest", "--cov=sitegen", "--cov-report=term-missing"],
        "Tests",
    )

    if args.ci:
        print("\n✅ CI checks passed successfully. Skipping the site build.")
        return

    run_command([sys.executable, "main.py", "--verbose"], "Site Build")
    print("\n✅ All development checks and the site build passed successfully.")


if __name__ == "__main__":
    main()
