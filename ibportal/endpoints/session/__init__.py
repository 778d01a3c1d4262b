"""Session endpoint modules."""
