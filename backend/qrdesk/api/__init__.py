"""API Layer: FastAPI routes, dependencies, origin guard and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints except GET / return JSON
"""
