"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic
    - Malformed input degrades to empty values, never raises

Design Decisions:
    - Functional core separated from imperative shell: the shell loads and saves,
      the core transforms
"""
