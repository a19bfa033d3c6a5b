"""Adapter component tests."""
