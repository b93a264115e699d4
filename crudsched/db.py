"""SQLite storage for the user records the CRUD tasks operate on."""

from __future__ import annotations

import sqlite3
import sys
import threading
from dataclasses import dataclass
from os import PathLike
from typing import TextIO

_CREATE_TABLE = (
    "CREATE TABLE IF NOT EXISTS usuarios "
    "(id INTEGER PRIMARY KEY, nome TEXT, email TEXT)"
)


@dataclass(frozen=True)
class User:
    """One row of the ``usuarios`` table."""

    id: int
    name: str | None
    email: str | None


class UserDatabase:
    """A thread-safe handle on the ``usuarios`` table of a SQLite file."""

    def __init__(self, path: str | PathLike[str] = "dados.db") -> None:
        self._conn = sqlite3.connect(
            path, check_same_thread=False, isolation_level=None
        )
        self._lock = threading.Lock()
        with self._lock:
            self._conn.execute(_CREATE_TABLE)

    def close(self) -> None:
        """Close the underlying connection."""
        with self._lock:
            self._conn.close()

    def __enter__(self) -> UserDatabase:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def insert_user(self, name: str, email: str) -> int:
        """Insert a user and return the id it was given."""
        with self._lock:
            cursor = self._conn.execute(
                "INSERT INTO usuarios (nome, email) VALUES (?, ?)", (name, email)
            )
            return int(cursor.lastrowid)

    def update_user(self, user_id: int, name: str, email: str) -> int:
        """Change the name and e-mail of one user; return the rows changed."""
        with self._lock:
            cursor = self._conn.execute(
                "UPDATE usuarios SET nome = ?, email = ? WHERE id = ?",
                (name, email, user_id),
            )
            return cursor.rowcount

    def remove_users_from(self, user_id: int) -> int:
        """Delete every user whose id is at least ``user_id``; return the count."""
        with self._lock:
            cursor = self._conn.execute(
                "DELETE FROM usuarios WHERE id >= ?", (user_id,)
            )
            return cursor.rowcount

    def list_users(self) -> list[User]:
        """Return all users in table order."""
        with self._lock:
            rows = self._conn.execute(
                "SELECT id, nome, email FROM usuarios"
            ).fetchall()
        return [User(*row) for row in rows]

    def print_users(self, out: TextIO | None = None) -> None:
        """Write the user listing to ``out`` (standard output by default)."""
        out = out if out is not None else sys.stdout
        print("Usuários cadastrados:", file=out)
        for user in self.list_users():
            name = user.name if user.name is not None else "(null)"
            email = user.email if user.email is not None else "(null)"
            print(f"ID: {user.id} | Nome: {name} | Email: {email}", file=out)