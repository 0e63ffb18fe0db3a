"""
Format rules for user names and e‑mail addresses.

Names are one or more hyphen‑joined words, each written as a capital
letter followed by lowercase letters: ``Jack`` and ``Anna-Maria`` pass,
``name``, ``CamelCase`` and ``Firstname Lastname`` do not.

E‑mail addresses need a local part of at least
``settings.email_min_local_length`` characters, an ``@``, and a dotted
domain ending in an alphabetic top‑level label of two or more letters.

Each validator returns the value unchanged or raises
``InvalidInputError``.
"""

import re
from typing import Optional

from ..core.config import settings
from ..core.errors import InvalidInputError


_LOCAL_PART = re.compile(r"[A-Za-z0-9._%+-]+")
_DOMAIN = re.compile(r"(?:[A-Za-z0-9-]+\.)+[A-Za-z]{2,}")


def _is_name_segment(segment: str) -> bool:
    return (
        len(segment) >= 2
        and segment[0].isalpha()
        and segment[0].isupper()
        and segment[1:].isalpha()
        and segment[1:].islower()
    )


def validate_name(name: str) -> str:
    if not isinstance(name, str) or not name.strip():
        raise InvalidInputError("name", name, "Name must not be blank")
    if any(ch.isspace() for ch in name):
        raise InvalidInputError("name", name, "Name must be a single word without spaces")
    if not all(_is_name_segment(segment) for segment in name.split("-")):
        raise InvalidInputError(
            "name",
            name,
            "Name must start with a capital letter followed by lowercase letters "
            "(hyphenated parts likewise)",
        )
    return name


def validate_email(email: str, min_local_length: Optional[int] = None) -> str:
    """Check ``email`` against the address rule.

    ``min_local_length`` overrides the configured minimum length of the
    part before the ``@``.
    """
    if min_local_length is None:
        min_local_length = settings.email_min_local_length
    if not isinstance(email, str) or not email.strip():
        raise InvalidInputError("email", email, "Email must not be blank")
    if "@" not in email:
        raise InvalidInputError("email", email, "Email must contain '@'")

    local, _, domain = email.rpartition("@")
    if not _LOCAL_PART.fullmatch(local):
        raise InvalidInputError("email", email, "Email has an empty or malformed local part")
    if len(local) < min_local_length:
        raise InvalidInputError(
            "email",
            email,
            f"Email local part must be at least {min_local_length} characters long",
        )
    if not _DOMAIN.fullmatch(domain):
        raise InvalidInputError("email", email, "Email domain must look like 'mail.com'")
    return email
