"""Command-line interface for bincursor."""
