"""Command-line interface for SPConverter."""
