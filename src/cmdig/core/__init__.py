"""Core logic for cmdig, independent of the CLI."""
