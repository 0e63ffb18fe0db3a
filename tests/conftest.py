import pytest

from user_management_api.app.repositories.user_repository import InMemoryUserRepository
from user_management_api.app.schemas.user import User
from user_management_api.app.services.user_service import UserService

EXISTING_EMAIL = "jack3@mail.com"
NEW_EMAIL = "jack6@mail.com"


class RecordingUserRepository(InMemoryUserRepository):
    """In-memory repository that remembers every write it receives."""

    def __init__(self, users=()):
        super().__init__(users)
        self.saved = []
        self.updated = []

    def save(self, user):
        self.saved.append(user)
        return super().save(user)

    def update(self, user):
        self.updated.append(user)
        return super().update(user)


def seed_users():
    return [
        User(id=1, name="Jack", email="jack1@mail.com"),
        User(id=2, name="Jane", email="jack2@mail.com"),
        User(id=3, name="Anna-Maria", email=EXISTING_EMAIL),
        User(id=4, name="Oskar", email="jack4@mail.com"),
    ]


@pytest.fixture
def repository():
    return RecordingUserRepository(seed_users())


@pytest.fixture
def service(repository):
    return UserService(repository)


@pytest.fixture
def seeded_users():
    return seed_users()
