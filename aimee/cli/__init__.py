"""Command line tools for Aimee."""
