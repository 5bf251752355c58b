"""Command-line interface for SystemCSS."""
