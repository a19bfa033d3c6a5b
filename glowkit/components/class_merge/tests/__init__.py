"""Class merge component tests."""
