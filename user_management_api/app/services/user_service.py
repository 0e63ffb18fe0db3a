"""
Business logic for users.

``UserService`` validates names and e‑mail addresses before handing
work to its repository.  Either every check passes and exactly one
repository write is made, or an error is raised and the repository is
left untouched.
"""

import logging
from typing import List

from ..core.errors import DuplicateEmailError, InvalidInputError
from ..repositories.user_repository import UserRepository
from ..schemas.user import User
from .validation import validate_email, validate_name


class UserService:
    """Service for listing, creating and updating users.

    The repository is supplied by the caller; see
    ``repositories.user_repository`` for the available implementations.
    """

    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository

    def get_all_users(self) -> List[User]:
        """Return every stored user in repository order."""
        return self.repository.find_all()

    def create_user(self, name: str, email: str) -> User:
        """Register a new user and return it with its assigned id.

        Raises ``InvalidInputError`` if the name or e‑mail is malformed
        and ``DuplicateEmailError`` if the e‑mail is already taken.
        """
        logger = logging.getLogger(__name__)
        self._validate(name, email)
        if self.repository.find_by_email(email) is not None:
            logger.warning("Rejected registration: email %s already exists", email)
            raise DuplicateEmailError(email)
        saved = self.repository.save(User(name=name, email=email))
        logger.info("Created user %s (%s)", saved.id, email)
        return saved

    def update_user(self, user_id: int, name: str, email: str) -> User:
        """Replace the name and e‑mail of user ``user_id``.

        Validation failures raise ``InvalidInputError``.  Whether the id
        exists and whether the new e‑mail clashes with another user is
        decided by the repository.
        """
        logger = logging.getLogger(__name__)
        self._validate(name, email)
        updated = self.repository.update(User(id=user_id, name=name, email=email))
        logger.info("Updated user %s", user_id)
        return updated

    def _validate(self, name: str, email: str) -> None:
        try:
            validate_name(name)
            validate_email(email)
        except InvalidInputError as exc:
            logging.getLogger(__name__).warning("Rejected %s %r: %s", exc.field, exc.value, exc.message)
            raise
