"""Shared helpers: datetime handling and time slot classification."""
