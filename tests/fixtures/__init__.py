"""
Test Fixtures and Utilities

Builders for synthetic orders, rule groups and order sheet files.
"""
