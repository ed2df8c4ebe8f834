"""Command-line interface for metatron."""
