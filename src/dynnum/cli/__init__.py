"""Command-line interface for dynnum."""
