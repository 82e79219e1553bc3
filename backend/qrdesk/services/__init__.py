"""Services Layer: credential and QR record stores.

Invariants:
    - Services take an AsyncSession explicitly; they never open their own
    - Failures surface as core/errors.py exceptions, never HTTPException
"""
