"""Command line interface for greet."""
