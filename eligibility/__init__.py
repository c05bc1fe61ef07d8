"""Admission eligibility matching service."""
