"""Command-line interface for selectorkit."""
