"""Infrastructure adapters for storage, events and logging."""
