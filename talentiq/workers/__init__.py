"""Background event workers."""
