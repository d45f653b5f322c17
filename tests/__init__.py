"""
Test Suite for Order Match

Test Structure:
- fixtures/: Shared synthetic order sheets and builders
- unit/: Unit tests mirroring src/ package structure
- integration/: CLI and end-to-end workflow tests

Test Data:
All sellers, products and amounts are synthetic.
"""
