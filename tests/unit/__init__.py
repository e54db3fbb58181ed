"""
Unit Tests - Testing Individual Components in Isolation.

Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_entities.py: Entity construction and invariants
    - test_range_validator.py: Range validation
    - test_range_filter.py: filter_by_range and RangeFilter
    - test_asset_class_collection.py: Asset class queries
    - test_reference_collections.py: Currency and customer segment queries
    - test_config_loader.py: Configuration loading/validation
    - test_catalog_loader.py: YAML catalog loading
"""
