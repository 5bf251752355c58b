"""Shared constants for SystemCSS."""
