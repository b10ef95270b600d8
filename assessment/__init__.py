"""Core domain logic for the daily self-assessment check-in.

This package contains the question catalog, scoring and classification rules,
and the per-day history ledger, isolated from storage and UI concerns for easy
testing and reasoning.
"""
