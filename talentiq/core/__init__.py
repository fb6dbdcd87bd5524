"""Core domain layer: exceptions and the practice problem catalog."""
