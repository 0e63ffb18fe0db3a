"""Storage rules shared by the in-memory and SQLite repositories."""

from pathlib import Path

import pytest

from user_management_api.app.core.db import get_cursor, init_db
from user_management_api.app.core.errors import DuplicateEmailError, UserNotFoundError
from user_management_api.app.repositories.user_repository import InMemoryUserRepository, SQLiteUserRepository
from user_management_api.app.schemas.user import User


@pytest.fixture(params=["memory", "sqlite"])
def repo(request, tmp_path: Path):
    if request.param == "memory":
        return InMemoryUserRepository()
    db_path = str(tmp_path / "users.db")
    init_db(db_path)
    return SQLiteUserRepository(db_path)


def test_empty_repository(repo):
    assert repo.find_all() == []
    assert repo.find_by_email("nobody@mail.com") is None


def test_save_assigns_sequential_ids_and_keeps_order(repo):
    first = repo.save(User(name="Jack", email="jack@mail.com"))
    second = repo.save(User(name="Anna-Maria", email="anna@mail.com"))

    assert first == User(id=1, name="Jack", email="jack@mail.com")
    assert second.id == 2
    assert repo.find_all() == [first, second]


def test_find_by_email(repo):
    saved = repo.save(User(name="Jack", email="jack@mail.com"))

    assert repo.find_by_email("jack@mail.com") == saved
    assert repo.find_by_email("JACK@mail.com") is None


def test_save_rejects_duplicate_email(repo):
    repo.save(User(name="Jack", email="jack@mail.com"))

    with pytest.raises(DuplicateEmailError):
        repo.save(User(name="Other", email="jack@mail.com"))
    assert len(repo.find_all()) == 1


def test_save_rejects_user_with_id(repo):
    with pytest.raises(ValueError):
        repo.save(User(id=7, name="Jack", email="jack@mail.com"))


def test_update_replaces_fields_in_place(repo):
    jack = repo.save(User(name="Jack", email="jack@mail.com"))
    anna = repo.save(User(name="Anna", email="anna@mail.com"))

    changed = repo.update(User(id=jack.id, name="John", email="john@mail.com"))

    assert changed == User(id=jack.id, name="John", email="john@mail.com")
    assert repo.find_all() == [changed, anna]
    assert repo.find_by_email("jack@mail.com") is None


def test_update_unknown_id(repo):
    with pytest.raises(UserNotFoundError):
        repo.update(User(id=42, name="John", email="john@mail.com"))


def test_update_to_email_of_other_user(repo):
    repo.save(User(name="Jack", email="jack@mail.com"))
    anna = repo.save(User(name="Anna", email="anna@mail.com"))

    with pytest.raises(DuplicateEmailError):
        repo.update(User(id=anna.id, name="Anna", email="jack@mail.com"))
    assert repo.find_by_email("anna@mail.com") == anna


def test_in_memory_seed_keeps_ids_and_continues_numbering():
    seeded = [User(id=3, name="Jack", email="jack@mail.com"), User(id=8, name="Anna", email="anna@mail.com")]
    repo = InMemoryUserRepository(seeded)

    assert repo.find_all() == seeded
    assert repo.save(User(name="John", email="john@mail.com")).id == 9


def test_init_db_is_idempotent(tmp_path: Path):
    db_path = str(tmp_path / "users.db")
    init_db(db_path)
    SQLiteUserRepository(db_path).save(User(name="Jack", email="jack@mail.com"))
    init_db(db_path)

    with get_cursor(db_path) as cursor:
        versions = [row["version"] for row in cursor.execute("SELECT version FROM migrations")]
    assert versions == [1]
    assert len(SQLiteUserRepository(db_path).find_all()) == 1
