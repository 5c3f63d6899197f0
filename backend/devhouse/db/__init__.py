"""Database Infrastructure — SQLAlchemy declarative Base.

Design Decisions:
    - asyncpg driver for PostgreSQL in production, aiosqlite in tests
"""
