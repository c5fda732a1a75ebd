#!/usr/bin/env python
"""
Simple Test Runner for OrderedTreeLib
=====================================

Runs all tests except slow ones.

Usage:
    python run_tests.py           # Run all non-slow tests
    python run_tests.py --slow    # Show info about slow tests
    python run_tests.py --all     # Run everything including slow tests
    python run_tests.py --cov     # Add a coverage report (needs pytest-cov)
"""

import subprocess
import sys
import argparse
from pathlib import Path


def run_tests(include_slow=False, coverage=False):
    """Run the test suite."""
    cmd = [
        sys.executable, "-m", "pytest",
        "--tb=short",               # Short traceback format
        "--durations=10",           # Show 10 slowest tests
        "-v"                        # Verbose output
    ]

    if coverage:
        cmd.extend(["--cov=orderedtreelib", "--cov-report=term-missing"])

    if not include_slow:
        cmd.extend(["-m", "not slow"])
        print("Running all tests EXCEPT slow tests...")
    else:
        print("Running ALL tests including slow ones...")
    print("=" * 60)

    result = subprocess.run(cmd, cwd=Path(__file__).parent)
    return result.returncode


def show_slow_tests():
    """Show information about slow tests."""
    print("=" * 60)
    print("SLOW TESTS")
    print("=" * 60)

    slow_tests = [
        ("test_traversal.py::test_degenerate_tree_iterates_without_recursion",
         "Builds a sorted-input tree deeper than the recursion limit",
         "~1-3s", "Insertion into a degenerate tree is quadratic"),
    ]

    for test_name, description, duration, reason in slow_tests:
        print(f"\n* {test_name}")
        print(f"   Description: {description}")
        print(f"   Duration: {duration}")
        print(f"   Why slow: {reason}")

    print("""
Run them with:
   python -m pytest -m slow -v
   python run_tests.py --all
""")


def main():
    parser = argparse.ArgumentParser(description="Test runner for OrderedTreeLib")
    parser.add_argument("--slow", action="store_true", help="Show info about slow tests")
    parser.add_argument("--all", action="store_true", help="Run all tests including slow ones")
    parser.add_argument("--cov", action="store_true", help="Report coverage")

    args = parser.parse_args()

    if args.slow:
        show_slow_tests()
        return 0

    return run_tests(include_slow=args.all, coverage=args.cov)


if __name__ == "__main__":
    sys.exit(main())
