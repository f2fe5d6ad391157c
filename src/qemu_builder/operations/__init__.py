"""Build pipeline operations."""
