"""Command-line entrypoints for fbc-normalize."""
