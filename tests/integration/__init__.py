"""
Integration Tests - Config, Catalog and Filter Together.

These tests load YAML fixtures, build catalogs and run range filters
end to end without mocks.

Test Files:
    - test_catalog_filtering.py: Config-driven catalog filtering
"""
