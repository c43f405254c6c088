from __future__ import annotations

from passlib.context import CryptContext
from passlib.exc import UnknownHashError


class PasswordHasher:
    def __init__(self, schemes: tuple[str, ...] = ("bcrypt",)) -> None:
        self._pwd_context = CryptContext(schemes=schemes, deprecated="auto")

    def hash(self, password: str) -> str:
        return self._pwd_context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        # Seeded accounts may carry a placeholder hash; treat it as a mismatch
        try:
            return self._pwd_context.verify(plain_password, hashed_password)
        except UnknownHashError:
            return False
