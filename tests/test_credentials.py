import datetime

import jwt
import pytest

from utils.passwords import hash_password, verify_password
from utils.tokens import issue_token, verify_token, TokenError


def test_hash_is_salted(app):
    first = hash_password("secret1")
    second = hash_password("secret1")
    assert first != second
    assert verify_password("secret1", first)
    assert verify_password("secret1", second)


def test_verify_password_rejects_wrong_and_malformed(app):
    hashed = hash_password("secret1")
    assert not verify_password("secret2", hashed)
    assert not verify_password("secret1", "")
    assert not verify_password("secret1", "not-a-hash")
    assert not verify_password("secret1", "bogus$salt$value")


def test_token_round_trip(app):
    check = verify_token(issue_token(42))
    assert check.ok
    assert check.account_id == 42
    assert check.error is None


def test_token_expires_after_seven_days(app):
    token = issue_token(7)
    payload = jwt.decode(token, app.config["JWT_SECRET_KEY"], algorithms=["HS256"])
    assert payload["exp"] - payload["iat"] == 7 * 24 * 60 * 60


def test_expired_token(app):
    token = issue_token(1, expires_in=datetime.timedelta(seconds=-10))
    check = verify_token(token)
    assert not check.ok
    assert check.error is TokenError.EXPIRED


def test_bad_signature(app):
    token = issue_token(1, secret="some-other-secret")
    check = verify_token(token)
    assert check.error is TokenError.BAD_SIGNATURE


def test_malformed_tokens(app):
    assert verify_token("not.a.token").error is TokenError.MALFORMED
    assert verify_token("garbage").error is TokenError.MALFORMED


def test_token_with_non_numeric_subject_is_malformed(app):
    now = datetime.datetime.now(datetime.timezone.utc)
    token = jwt.encode(
        {"sub": "abc", "exp": now + datetime.timedelta(hours=1)},
        app.config["JWT_SECRET_KEY"],
        algorithm="HS256",
    )
    assert verify_token(token).error is TokenError.MALFORMED


def test_verify_password_rejects_non_string_input(app):
    hashed = hash_password("123456")
    assert verify_password(123456, hashed) is False
    assert verify_password(None, hashed) is False
    assert verify_password(["123456"], hashed) is False


def test_rejected_token_is_logged_once(app, monkeypatch):
    from utils import auth
    from utils.errors import Unauthenticated
    from utils.logger import logger

    records = []
    for level in ("debug", "info", "warning", "error"):
        monkeypatch.setattr(logger, level, lambda msg, *args, **kwargs: records.append((msg, kwargs)))

    expired = issue_token(1, expires_in=datetime.timedelta(seconds=-10))
    with app.test_request_context(headers={"Authorization": f"Bearer {expired}"}):
        from flask import request
        with pytest.raises(Unauthenticated):
            auth.authenticate(request)

    assert len(records) == 1
    assert records[0][1]["extra"]["reason"] == "expired"
