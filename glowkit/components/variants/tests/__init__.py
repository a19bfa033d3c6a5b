"""Variants component tests."""
