"""Infrastructure Layer — database pool, repositories, and cross-cutting concerns.

Invariants:
    - Driver exceptions never cross this boundary unwrapped
    - All database access goes through the connection pool
"""
