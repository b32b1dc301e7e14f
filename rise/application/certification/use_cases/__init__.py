"""Certification use cases."""
