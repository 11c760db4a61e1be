"""Database Infrastructure — SQLAlchemy Base shared by models and migrations.

Invariants:
    - Single async engine per process (initialized via init_db)
    - All sessions are async (AsyncSession)

Design Decisions:
    - aiosqlite for the local single-operator file database, asyncpg when
      DATABASE_URL points at PostgreSQL
"""
