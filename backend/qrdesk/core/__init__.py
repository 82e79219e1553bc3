"""Core Layer: error types, password hashing and session tokens. No IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
"""
