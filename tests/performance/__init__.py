"""
Performance Tests.

Benchmarks for range filtering on large inputs:
    - 100k records < 1 second
    - Repeated collection queries < 1 second
"""
