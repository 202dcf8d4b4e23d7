from __future__ import annotations

import logging

import jwt

from appointease.application.dto.principal import Principal
from appointease.domain.value_objects.enums import UserRole

logger = logging.getLogger(__name__)


class SessionTokenDecoder:
    """Read the signed-in account from a backend-issued session JWT.

    The backend owns token verification. When a shared secret is configured
    the signature is checked too; otherwise only the claims are read.
    """

    def __init__(self, secret: str = "", algorithm: str = "HS256") -> None:
        self._secret = secret
        self._algorithm = algorithm

    def decode(self, token: str) -> Principal:
        if self._secret:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        else:
            payload = jwt.decode(token, options={"verify_signature": False})
        role_raw = payload.get("role", UserRole.USER)
        role = UserRole(role_raw) if role_raw in UserRole.__members__.values() else UserRole.USER
        subject = payload.get("sub") or payload.get("id")
        if subject is None:
            raise jwt.InvalidTokenError("Token has no subject")
        return Principal(
            user_id=str(subject),
            role=role,
            token=token,
            name=payload.get("name"),
        )
