"""Command-line interface for swimqualifiers."""
