"""Command-line interface for the telescope calculator."""
