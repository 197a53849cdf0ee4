"""Helpers for deriving cube data."""
