"""Schemas: Pydantic request/response models for the HTTP boundary.

Invariants:
    - Schemas validate shape and field rules only; no DB access
    - Response models serialize camelCase (by_alias) for the frontend
"""
