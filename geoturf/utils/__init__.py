"""Shared helper functions used across multiple algorithm modules."""
