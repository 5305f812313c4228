#!/usr/bin/env python3
"""
Development scripts for the dimap project.

Every check runs through uv: `python scripts.py <command>`.
"""

import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

PACKAGE_DIR = "src/dimap/"


def run_command(cmd: list[str], description: str) -> bool:
    """Run a command and return True if successful."""
    print(f"\n🔄 {description}...")
    print(f"Running: {' '.join(cmd)}")

    try:
        subprocess.run(cmd, check=True)
    except subprocess.CalledProcessError as e:
        print(f"❌ {description} failed with exit code {e.returncode}")
        return False
    except FileNotFoundError:
        print(f"❌ Command not found: {cmd[0]}")
        return False

    print(f"✅ {description} passed")
    return True


def run_all(checks: list[tuple[list[str], str]]) -> int:
    results = [run_command(cmd, description) for cmd, description in checks]
    return 0 if all(results) else 1


def run_tests() -> int:
    """Run the test suite."""
    return run_all([(["uv", "run", "pytest", "-v"], "Tests")])


def run_lint() -> int:
    """Run ruff lint and format checks."""
    status = run_all(
        [
            (["uv", "run", "ruff", "check", "."], "Ruff linting"),
            (["uv", "run", "ruff", "format", "--check", "."], "Ruff formatting"),
        ]
    )
    if status:
        print("\n💡 To auto-fix, run: uv run ruff format . && uv run ruff check --fix .")
    return status


def run_typecheck() -> int:
    """Run mypy and pyright on the package."""
    return run_all(
        [
            (["uv", "run", "mypy", PACKAGE_DIR], "MyPy type checking"),
            (["uv", "run", "pyright", PACKAGE_DIR], "Pyright type checking"),
        ]
    )


def run_demos() -> int:
    """Run every demo script in demo/."""
    demo_files = sorted(path for path in Path("demo").glob("*.py") if not path.name.startswith("_"))
    if not demo_files:
        print("⚠️  No demo files found in demo directory")
        return 0
    return run_all([(["uv", "run", "python", str(path)], f"Demo: {path.name}") for path in demo_files])


def run_readme_validation() -> int:
    """Run the Python code blocks of README.md as tests."""
    test_file = Path("test_readme.py")
    test_file.unlink(missing_ok=True)
    try:
        if not run_command(["uv", "run", "phmdoctest", "README.md", "--outfile", str(test_file)], "README tests"):
            return 1
        return run_all([(["uv", "run", "pytest", str(test_file), "-v"], "README code examples")])
    finally:
        test_file.unlink(missing_ok=True)


COMMANDS: dict[str, Callable[[], int]] = {
    "test": run_tests,
    "lint": run_lint,
    "typecheck": run_typecheck,
    "demos": run_demos,
    "readme": run_readme_validation,
}


def check_all() -> int:
    """Run every check and print a summary."""
    print("🚀 Running all checks for dimap")
    results = {name: command() == 0 for name, command in COMMANDS.items()}

    print(f"\n{'=' * 20} SUMMARY {'=' * 20}")
    for name, passed in results.items():
        print(f"{name:<15} {'✅ PASS' if passed else '❌ FAIL'}")
    return 0 if all(results.values()) else 1


if __name__ == "__main__":
    available = [*COMMANDS, "check"]
    if len(sys.argv) != 2 or sys.argv[1] not in available:
        print(f"Available commands: {', '.join(available)}")
        print("Usage: python scripts.py <command>")
        sys.exit(1)
    sys.exit(check_all() if sys.argv[1] == "check" else COMMANDS[sys.argv[1]]())
