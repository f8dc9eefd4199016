"""
Reconciliation - Matching payments to membership contacts.

This package contains:
- matching: Surname index, forename disambiguation and payment suggestions
- schemas: Pydantic models for payments and suggestions
- config: Fast-fail configuration loader
"""
