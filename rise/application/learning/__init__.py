"""Learning application module."""
