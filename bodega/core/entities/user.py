"""System user entity: the single set of credentials for the till."""

import re

from pydantic import Field, field_validator

from bodega.core import security
from bodega.core.entities.base import DomainModel
from bodega.core.exceptions import ValidationError

MIN_USERNAME_LENGTH = 4
MAX_USERNAME_LENGTH = 20
MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_LENGTH = 12

_USERNAME_DISALLOWED = re.compile(r"[^A-Za-z0-9_-]")

# (pattern, message) pairs, checked in order after the length rule
_PASSWORD_RULES = [
    (re.compile(r"[A-Z]"), "The password must include at least one uppercase letter"),
    (re.compile(r"[a-z]"), "The password must include at least one lowercase letter"),
    (re.compile(r"[0-9]"), "The password must include at least one digit"),
    (re.compile(r"[\W_]"), "The password must include at least one special character"),
]


def _clean_username(raw: str) -> str:
    """Trim, drop characters outside [A-Za-z0-9_-] and check the length."""
    username = _USERNAME_DISALLOWED.sub("", raw.strip())
    if not username:
        raise ValueError("The username cannot be empty")
    if not MIN_USERNAME_LENGTH <= len(username) <= MAX_USERNAME_LENGTH:
        raise ValueError(
            f"The username must have between {MIN_USERNAME_LENGTH} "
            f"and {MAX_USERNAME_LENGTH} characters"
        )
    return username


class User(DomainModel):
    """
    The only user of the system.

    The password is kept solely as a bcrypt hash. Use ``register`` to build a
    user from raw input so both policies are applied.
    """

    username: str
    password_hash: str = Field(repr=False)

    @field_validator("username")
    @classmethod
    def check_username(cls, v: str) -> str:
        return _clean_username(v)

    @classmethod
    def normalize_username(cls, raw: str) -> str:
        """Return the username as it would be stored."""
        try:
            return _clean_username(raw)
        except ValueError as exc:
            raise ValidationError("username", str(exc), raw) from exc

    @staticmethod
    def check_password_policy(raw: str) -> str:
        """Return the trimmed password, raising on the first broken rule."""
        password = raw.strip()
        # Never echo the password back in error details
        if not password:
            raise ValidationError("password", "The password cannot be empty")
        if not MIN_PASSWORD_LENGTH <= len(password) <= MAX_PASSWORD_LENGTH:
            raise ValidationError(
                "password",
                f"The password must have between {MIN_PASSWORD_LENGTH} "
                f"and {MAX_PASSWORD_LENGTH} characters",
            )
        for pattern, message in _PASSWORD_RULES:
            if not pattern.search(password):
                raise ValidationError("password", message)
        return password

    @classmethod
    def register(cls, username: str, password: str) -> "User":
        """Build a new user from raw credentials."""
        return cls(
            username=cls.normalize_username(username),
            password_hash=security.hash_password(cls.check_password_policy(password)),
        )

    def change_username(self, raw: str) -> None:
        self.username = raw

    def change_password(self, raw: str) -> None:
        self.password_hash = security.hash_password(self.check_password_policy(raw))

    def verify_password(self, plain: str) -> bool:
        return security.verify_password(plain, self.password_hash)
