"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - JSON field names are camelCase (frontend contract); Python attributes are snake_case

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
