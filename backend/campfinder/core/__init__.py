"""Core Layer: pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Mapping, filtering, CSV parsing and validation are plain functions over
      dicts/strings, testable without a database

Design Decisions:
    - Functional core separated from the imperative shell (services/, api/)
"""
