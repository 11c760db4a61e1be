"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (form input, API responses)
    - Wire keys are camelCase, matching the stored record shape

Design Decisions:
    - Separate from core dataclasses: schemas are API contracts, core types are domain
"""
