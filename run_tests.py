#!/usr/bin/env python3
"""
Test runner for ssm-param-resolver.

This script provides various test execution options:
- Run all tests
- Run specific test categories (unit, smoke)
- Run tests for specific modules
- Generate coverage reports
"""

import argparse
import subprocess
import sys
from pathlib import Path


def run_command(cmd, description):
    """Run a command and handle output."""
    print(f"\n{'=' * 60}")
    print(f"Running: {description}")
    print(f"Command: {' '.join(cmd)}")
    print("=" * 60)

    result = subprocess.run(cmd, capture_output=False, text=True)

    if result.returncode != 0:
        print(f"\n[FAIL] {description} failed with exit code {result.returncode}")
        return False
    else:
        print(f"\n[PASS] {description} completed successfully")
        return True


def main():
    parser = argparse.ArgumentParser(description="Run tests for ssm-param-resolver")

    parser.add_argument(
        "--type",
        choices=["all", "unit", "smoke", "ci"],
        default="unit",
        help="Type of tests to run",
    )

    parser.add_argument(
        "--module",
        choices=["all", "models", "resolution", "infrastructure", "interfaces", "shared"],
        default="all",
        help="Specific module to test",
    )

    parser.add_argument("--coverage", action="store_true", help="Generate coverage report")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    parser.add_argument("--failfast", "-x", action="store_true", help="Stop on first failure")

    args = parser.parse_args()

    cmd = ["pytest"]

    # Add test selection
    if args.type == "all":
        cmd.append("tests/")
    elif args.type == "unit":
        cmd.append("tests/unit/")
    elif args.type == "smoke":
        cmd.extend(["-m", "smoke"])
    elif args.type == "ci":
        cmd.extend(["tests/", "--strict-markers"])

    # Add module selection
    if args.module != "all":
        module_map = {
            "models": "tests/unit/core/models/",
            "resolution": "tests/unit/core/resolution/",
            "infrastructure": "tests/unit/infrastructure/",
            "interfaces": "tests/unit/interfaces/",
            "shared": "tests/unit/shared/",
        }
        test_path = Path(module_map[args.module])
        if test_path.exists():
            cmd.append(str(test_path))
        else:
            print(f"Warning: Test path {test_path} not found, testing all")

    if args.coverage:
        cmd.extend(["--cov=ssm_param_resolver", "--cov-report=html", "--cov-report=xml", "--cov-report=term"])

    if args.verbose:
        cmd.append("-vv")

    if args.failfast:
        cmd.append("-x")

    success = run_command(cmd, f"{args.type} tests")

    if args.coverage and success:
        print("\n" + "=" * 60)
        print("Coverage Summary")
        print("=" * 60)
        print("HTML coverage report generated at: htmlcov/index.html")
        print("XML coverage report generated at: coverage.xml")

    print("\n" + "=" * 60)
    print("All tests completed successfully!" if success else "Some tests failed")
    print("=" * 60)

    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
