"""Ordered pattern-substitution resolver with glob capture tokens."""
