from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import UUID

from jose import jwt
from jose.exceptions import ExpiredSignatureError, JWTError

from src.application.errors import AuthError
from src.config.settings import Settings
from src.domain.value_objects.role import Role

TOKEN_TYPE = "access"


@dataclass(slots=True, frozen=True)
class IssuedToken:
    token: str
    expires_at: datetime


class JWTService:
    """Signs and verifies the bearer tokens handed out at login.

    The role claim is informational; the middleware re-reads the role from
    the user row on every request.
    """

    def __init__(
        self,
        *,
        secret_key: str,
        algorithm: str = "HS256",
        ttl: timedelta = timedelta(minutes=60),
        issuer: str | None = None,
        audience: str | None = None,
    ) -> None:
        self._secret_key = secret_key
        self.algorithm = algorithm
        self.ttl = ttl
        self.issuer = issuer
        self.audience = audience

    @classmethod
    def from_settings(cls, settings: Settings) -> JWTService:
        return cls(
            secret_key=settings.jwt_secret_key.get_secret_value(),
            algorithm=settings.jwt_algorithm,
            ttl=timedelta(minutes=settings.jwt_access_token_expires_minutes),
            issuer=settings.jwt_issuer,
            audience=settings.jwt_audience,
        )

    def issue_access_token(self, *, user_id: UUID, role: Role, email: str) -> IssuedToken:
        issued_at = datetime.now(timezone.utc)
        expires_at = issued_at + self.ttl
        claims: dict[str, Any] = {
            "sub": str(user_id),
            "role": role.value,
            "email": email,
            "typ": TOKEN_TYPE,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        if self.issuer:
            claims["iss"] = self.issuer
        if self.audience:
            claims["aud"] = self.audience
        token = jwt.encode(claims, self._secret_key, algorithm=self.algorithm)
        return IssuedToken(token=token, expires_at=expires_at)

    def decode(self, token: str) -> dict[str, Any]:
        try:
            claims = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                audience=self.audience,
            )
        except ExpiredSignatureError as exc:
            raise AuthError("Token expired") from exc
        except JWTError as exc:
            raise AuthError("Token validation failed") from exc
        if claims.get("typ") != TOKEN_TYPE:
            raise AuthError("Invalid access token")
        if claims.get("role") not in {role.value for role in Role}:
            raise AuthError("Token carries an unknown role")
        return claims
