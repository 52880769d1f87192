#!/usr/bin/env python
"""
Simple Test Runner for WalkTreeLib
==================================

Runs the test suite with pytest, optionally with coverage.

Usage:
    python run_tests.py           # Run all tests
    python run_tests.py --cov     # Run with coverage report
"""

import subprocess
import sys
import argparse
from pathlib import Path


def run_tests(with_coverage=False):
    """Run the test suite."""
    cmd = [
        sys.executable, "-m", "pytest",
        "tests",
        "--tb=short",               # Short traceback format
        "--durations=10",           # Show 10 slowest tests
        "-v"                        # Verbose output
    ]

    if with_coverage:
        cmd.extend(["--cov=walktreelib", "--cov-report=term-missing"])
        print("Running all tests with coverage...")
    else:
        print("Running all tests...")
    print("=" * 60)

    result = subprocess.run(cmd, cwd=Path(__file__).parent)
    return result.returncode


def main():
    parser = argparse.ArgumentParser(description="Run WalkTreeLib tests")
    parser.add_argument("--cov", action="store_true", help="Collect coverage for walktreelib")
    args = parser.parse_args()

    sys.exit(run_tests(with_coverage=args.cov))


if __name__ == "__main__":
    main()
