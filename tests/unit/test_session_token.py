from __future__ import annotations

import jwt
import pytest

from appointease.domain.value_objects.enums import UserRole
from appointease.infrastructure.auth.session_token import SessionTokenDecoder
from tests.conftest import PROVIDER_ID, make_token

SECRET = "unit-secret"


def test_decodes_provider_token():
    token = make_token(SECRET, sub=PROVIDER_ID, role=UserRole.PROVIDER)

    principal = SessionTokenDecoder(SECRET).decode(token)

    assert principal.user_id == PROVIDER_ID
    assert principal.is_provider
    assert principal.token == token


def test_unknown_role_falls_back_to_user():
    token = make_token(SECRET, role="Admin")

    assert SessionTokenDecoder(SECRET).decode(token).role == UserRole.USER


def test_wrong_secret_is_rejected():
    token = make_token("other-secret")

    with pytest.raises(jwt.InvalidSignatureError):
        SessionTokenDecoder(SECRET).decode(token)


def test_claims_read_without_secret():
    token = make_token("whatever", sub="abc")

    assert SessionTokenDecoder().decode(token).user_id == "abc"


def test_id_claim_is_accepted():
    token = jwt.encode({"id": 12}, SECRET, algorithm="HS256")

    assert SessionTokenDecoder(SECRET).decode(token).user_id == "12"


def test_token_without_subject():
    token = jwt.encode({"role": "User"}, SECRET, algorithm="HS256")

    with pytest.raises(jwt.InvalidTokenError):
        SessionTokenDecoder(SECRET).decode(token)
