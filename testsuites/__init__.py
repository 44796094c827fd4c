"""
Test suites package.

`testsuites` is importable to support:
  - IDE navigation
  - programmatic runners (e.g., `run_tests.py`)
  - reuse of the Movie App page objects from other projects
"""
