"""Certification module: eligibility and certificates."""
