"""
Test Fixtures - Shared Test Data and Configurations.

This package contains reusable test fixtures:
    - sample_rules.yaml: Sample rule set with messages
    - profiles/strict.yaml: Profile overlay for the sample rule set
"""
