"""Test suite for moneta.

- unit/: Unit and property tests. No I/O, no external services.
"""
