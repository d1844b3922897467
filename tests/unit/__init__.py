"""
Unit Tests - Testing Individual Components in Isolation.

Test Files:
    - test_rule_registry.py: Registration, name resolution, freezing
    - test_rule_spec.py: Rule input normalization
    - test_message_table.py: Custom message overrides
    - test_engine.py: Presence check, dispatch, error recording
    - test_builtin_rules.py: Default registry and predicates
    - test_value_objects.py: Result lookups
    - test_config_loader.py: Configuration loading/validation
"""
