from __future__ import annotations

from appointease.application.dto.principal import Principal
from appointease.application.exceptions import ForbiddenError


def assert_provider(principal: Principal) -> None:
    if not principal.is_provider:
        raise ForbiddenError("Provider account required")
