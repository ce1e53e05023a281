"""Image codec operations."""
