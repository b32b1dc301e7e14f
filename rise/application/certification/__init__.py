"""Certification application module."""
