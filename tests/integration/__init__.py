"""
Integration Tests - End-to-End Validation Tests.

Test Files:
    - test_validation_scenarios.py: Public entry points and YAML rule sets
"""
