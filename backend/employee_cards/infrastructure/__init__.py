"""Infrastructure Layer — storage, image processing and cross-cutting concerns.

Invariants:
    - Infrastructure implements core protocols; it never calls core transforms
    - Errors from external libraries mapped to core/errors.py types

Design Decisions:
    - Thin adapters over SQLAlchemy and Pillow, one file per concern
"""
