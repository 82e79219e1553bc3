"""Infrastructure Layer: database sessions, Stripe client and logging setup.

Invariants:
    - Infrastructure never imports from services/ or api/
    - External failures are mapped to core/errors.py types before leaving this layer
"""
