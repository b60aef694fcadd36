"""Command-line interface for meshraw."""
