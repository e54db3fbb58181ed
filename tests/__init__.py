"""
Test Suite for WiseCrowd Data.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: End-to-end tests over YAML fixtures
    - performance/: Timing benchmarks
    - fixtures/: Shared test fixtures and sample data

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest -m "not performance"             # Skip benchmarks
    pytest --cov=src/wisecrowd_data         # With coverage
"""
