"""Cascade component tests."""
