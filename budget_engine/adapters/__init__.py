"""Command-line adapters for scheduled and operational jobs."""
