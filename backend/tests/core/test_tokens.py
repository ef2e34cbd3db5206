"""Tokens & Passwords — JWT issue/verify round trip and bcrypt checks."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest

from shopping_mall.config import get_settings
from shopping_mall.core.domain_types import ActorType, TokenType
from shopping_mall.core.errors import UnauthorizedError
from shopping_mall.infrastructure.passwords import hash_password, verify_password
from shopping_mall.infrastructure.tokens import decode_token, issue_tokens


def _now() -> datetime:
    return datetime.now(timezone.utc) - timedelta(seconds=5)


def test_access_token_decodes_to_actor():
    uid = uuid4()
    pair = issue_tokens(uid, ActorType.SELLER, _now())
    actor = decode_token(pair.access, TokenType.ACCESS)
    assert actor.id == uid
    assert actor.type is ActorType.SELLER


def test_expiry_instants_follow_settings():
    now = _now()
    pair = issue_tokens(uuid4(), ActorType.MEMBER, now)
    settings = get_settings()
    assert pair.expired_at == now + timedelta(seconds=settings.access_token_ttl_seconds)
    assert pair.refreshable_until == now + timedelta(seconds=settings.refresh_token_ttl_seconds)


def test_refresh_token_is_not_an_access_token():
    pair = issue_tokens(uuid4(), ActorType.MEMBER, _now())
    with pytest.raises(UnauthorizedError):
        decode_token(pair.refresh, TokenType.ACCESS)
    with pytest.raises(UnauthorizedError):
        decode_token(pair.access, TokenType.REFRESH)


def test_expired_token_is_rejected():
    issued = datetime.now(timezone.utc) - timedelta(days=30)
    pair = issue_tokens(uuid4(), ActorType.MEMBER, issued)
    with pytest.raises(UnauthorizedError, match="expired"):
        decode_token(pair.access, TokenType.ACCESS)


def test_foreign_signature_is_rejected():
    forged = jwt.encode(
        {"id": str(uuid4()), "type": "admin", "token_type": "access",
         "iss": get_settings().jwt_issuer,
         "exp": int((datetime.now(timezone.utc) + timedelta(hours=1)).timestamp())},
        "some-other-secret-key-that-is-long-enough",
        algorithm="HS256",
    )
    with pytest.raises(UnauthorizedError):
        decode_token(forged, TokenType.ACCESS)


def test_garbage_is_rejected():
    with pytest.raises(UnauthorizedError):
        decode_token("not-a-jwt", TokenType.ACCESS)


def test_password_hash_verifies_only_the_original():
    hashed = hash_password("s3cret-pass")
    assert hashed != "s3cret-pass"
    assert verify_password("s3cret-pass", hashed)
    assert not verify_password("wrong-pass", hashed)


def test_malformed_stored_hash_does_not_verify():
    assert not verify_password("anything", "not-a-bcrypt-hash")
