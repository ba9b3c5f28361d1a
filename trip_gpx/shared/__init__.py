"""Shared, feature-independent utilities."""
