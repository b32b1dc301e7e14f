"""Content application module."""
