"""
Test Suite for Form Validator.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: End-to-end validation tests
    - fixtures/: YAML rule sets and profiles

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
    pytest --cov=src/form_validator         # With coverage
"""
