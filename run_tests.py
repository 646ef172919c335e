#!/usr/bin/env python
"""
Simple Test Runner for PasswordTreeLib
======================================

Runs the test suite, skipping the slow randomized property tests
unless asked for.

Usage:
    python run_tests.py           # Run all non-slow tests
    python run_tests.py --all     # Run everything including slow tests
"""

import subprocess
import sys
import argparse
from pathlib import Path


def run_tests(include_slow=False):
    """Run the test suite."""
    cmd = [
        sys.executable, "-m", "pytest",
        "--tb=short",               # Short traceback format
        "--durations=10",           # Show 10 slowest tests
        "-v"                        # Verbose output
    ]

    if not include_slow:
        cmd.extend(["-m", "not slow"])
        print("Running all tests EXCEPT slow tests...")
        print("=" * 60)
    else:
        print("Running ALL tests including slow ones...")
        print("=" * 60)

    result = subprocess.run(cmd, cwd=Path(__file__).parent)
    return result.returncode


def main():
    parser = argparse.ArgumentParser(description="Run PasswordTreeLib tests")
    parser.add_argument("--all", action="store_true",
                        help="Run all tests including slow ones")
    args = parser.parse_args()

    return run_tests(include_slow=args.all)


if __name__ == "__main__":
    sys.exit(main())
