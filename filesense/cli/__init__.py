"""Command line interface for FileSense."""
