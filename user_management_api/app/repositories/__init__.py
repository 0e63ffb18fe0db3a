"""
Data access layer.

A repository exposes the small set of queries a service needs.  Two
implementations ship with the project: an in‑memory one (handy for
tests and demos) and one backed by SQLite.
"""

from .user_repository import InMemoryUserRepository, SQLiteUserRepository, UserRepository

__all__ = ["UserRepository", "InMemoryUserRepository", "SQLiteUserRepository"]
