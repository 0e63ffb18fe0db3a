"""
User repositories.

``UserRepository`` is the contract the service layer relies on.  Any
object with matching ``find_all``, ``find_by_email``, ``save`` and
``update`` methods satisfies it; no inheritance is required.

Both implementations enforce the same storage rules:

* ``save`` assigns a fresh id and refuses an e‑mail already on file
  (``DuplicateEmailError``);
* ``update`` replaces name and e‑mail of an existing row, raising
  ``UserNotFoundError`` for an unknown id and ``DuplicateEmailError``
  if the e‑mail belongs to another user;
* ``find_all`` returns users in insertion (id) order.
"""

import logging
import sqlite3
import threading
from typing import Iterable, List, Optional, Protocol

from ..core.db import get_connection
from ..core.errors import DuplicateEmailError, UserNotFoundError
from ..schemas.user import User


logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    def find_all(self) -> List[User]: ...

    def find_by_email(self, email: str) -> Optional[User]: ...

    def save(self, user: User) -> User: ...

    def update(self, user: User) -> User: ...


class InMemoryUserRepository:
    """Keep users in a list guarded by a lock.

    Users passed to the constructor are stored as given, including
    their ids; subsequent saves continue numbering after the highest
    seeded id.
    """

    def __init__(self, users: Iterable[User] = ()) -> None:
        self._lock = threading.Lock()
        self._users: List[User] = list(users)
        self._next_id = max((u.id or 0 for u in self._users), default=0) + 1

    def find_all(self) -> List[User]:
        with self._lock:
            return list(self._users)

    def find_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            for user in self._users:
                if user.email == email:
                    return user
            return None

    def save(self, user: User) -> User:
        if user.id is not None:
            raise ValueError(f"Cannot save user that already has id {user.id}")
        with self._lock:
            if any(u.email == user.email for u in self._users):
                raise DuplicateEmailError(user.email)
            stored = user.model_copy(update={"id": self._next_id})
            self._next_id += 1
            self._users.append(stored)
            return stored

    def update(self, user: User) -> User:
        with self._lock:
            for index, existing in enumerate(self._users):
                if existing.id == user.id:
                    break
            else:
                raise UserNotFoundError(user.id)
            if any(u.email == user.email and u.id != user.id for u in self._users):
                raise DuplicateEmailError(user.email)
            self._users[index] = user
            return user


class SQLiteUserRepository:
    """Store users in the ``users`` table created by ``core.db.init_db``.

    A new connection is opened for every call, so one instance can be
    shared between threads.
    """

    def __init__(self, db_path: Optional[str] = None) -> None:
        self.db_path = db_path

    @staticmethod
    def _to_user(row: sqlite3.Row) -> User:
        return User(id=row["id"], name=row["name"], email=row["email"])

    @staticmethod
    def _is_email_conflict(exc: sqlite3.IntegrityError) -> bool:
        return "users.email" in str(exc)

    def find_all(self) -> List[User]:
        conn = get_connection(self.db_path)
        try:
            rows = conn.execute("SELECT id, name, email FROM users ORDER BY id").fetchall()
            return [self._to_user(row) for row in rows]
        finally:
            conn.close()

    def find_by_email(self, email: str) -> Optional[User]:
        conn = get_connection(self.db_path)
        try:
            row = conn.execute(
                "SELECT id, name, email FROM users WHERE email = ?",
                (email,),
            ).fetchone()
            return self._to_user(row) if row else None
        finally:
            conn.close()

    def save(self, user: User) -> User:
        if user.id is not None:
            raise ValueError(f"Cannot save user that already has id {user.id}")
        conn = get_connection(self.db_path)
        try:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO users (name, email) VALUES (?, ?)",
                (user.name, user.email),
            )
            conn.commit()
            logger.debug("Inserted user %s with id %s", user.email, cursor.lastrowid)
            return user.model_copy(update={"id": cursor.lastrowid})
        except sqlite3.IntegrityError as exc:
            conn.rollback()
            if self._is_email_conflict(exc):
                raise DuplicateEmailError(user.email) from exc
            raise
        finally:
            conn.close()

    def update(self, user: User) -> User:
        conn = get_connection(self.db_path)
        try:
            cursor = conn.cursor()
            cursor.execute(
                "UPDATE users SET name = ?, email = ?, updated_at = CURRENT_TIMESTAMP WHERE id = ?",
                (user.name, user.email, user.id),
            )
            if cursor.rowcount == 0:
                conn.rollback()
                raise UserNotFoundError(user.id)
            conn.commit()
            return user
        except sqlite3.IntegrityError as exc:
            conn.rollback()
            if self._is_email_conflict(exc):
                raise DuplicateEmailError(user.email) from exc
            raise
        finally:
            conn.close()
