"""Services Layer — record store and form orchestration around the pure core.

Invariants:
    - Services load, call core transforms, then save (impure shell around pure logic)
    - Persistence failures are logged and degraded here, not in routes

Design Decisions:
    - One service per concern: record_store (persistence) and
      form_service (form sessions and image intake)
"""
