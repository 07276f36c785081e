"""src/divan/utils/__init__.py

Coercion, proplist and JSON helpers for Divan.
"""
