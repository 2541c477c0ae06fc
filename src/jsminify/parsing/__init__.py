"""Command-line argument parsing."""
