#!/usr/bin/env python3
"""Test runner for SiteTree with coverage reporting."""

import sys
import subprocess
import os
from pathlib import Path

ENGINE_TESTS = [
    "tests/test_config.py",
    "tests/test_tree.py",
    "tests/test_resolver.py",
    "tests/test_substitute.py",
]


def run_tests():
    """Run all tests with coverage reporting."""

    # Change to the project directory
    os.chdir(Path(__file__).parent)

    print("🧪 Running SiteTree Test Suite")
    print("=" * 50)

    # Install test requirements
    print("📦 Installing test requirements...")
    try:
        subprocess.run([
            sys.executable, "-m", "pip", "install", "-r", "requirements-test.txt"
        ], check=True, capture_output=True)
        print("✅ Test requirements installed successfully")
    except subprocess.CalledProcessError as e:
        print(f"❌ Failed to install test requirements: {e}")
        return False

    # Run tests with coverage
    print("\n🔍 Running tests with coverage...")
    result = subprocess.run([
        sys.executable, "-m", "pytest",
        "tests/",
        "-v",
        "--cov=sitetree",
        "--cov-report=html",
        "--cov-report=term-missing",
        "--cov-fail-under=80"
    ], check=False)

    if result.returncode == 0:
        print("\n✅ All tests passed!")
        print("📊 Coverage report generated in htmlcov/")
        return True

    print(f"\n❌ Tests failed with return code {result.returncode}")
    return False


def run_engine_tests():
    """Run the parser, tree, resolver and substitution tests on their own."""
    print("\n⚙️  Running engine tests...")
    result = subprocess.run([
        sys.executable, "-m", "pytest", *ENGINE_TESTS, "-v"
    ], check=False)

    if result.returncode == 0:
        print("✅ Engine tests passed!")
        return True

    print("❌ Engine tests failed!")
    return False


def main():
    """Main test runner."""
    success = True

    if not run_tests():
        success = False

    if not run_engine_tests():
        success = False

    print("\n" + "=" * 50)
    if success:
        print("🎉 All test suites completed successfully!")
        print("📈 Check htmlcov/index.html for detailed coverage report")
    else:
        print("💥 Some tests failed. Please review the output above.")

    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
