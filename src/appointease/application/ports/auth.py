from __future__ import annotations

from typing import Protocol

from appointease.application.dto.principal import Principal


class TokenDecoder(Protocol):
    def decode(self, token: str) -> Principal: ...
