import datetime
import enum
from dataclasses import dataclass
from typing import Optional

import jwt
from flask import current_app


class TokenError(enum.Enum):
    MALFORMED = "malformed"
    EXPIRED = "expired"
    BAD_SIGNATURE = "bad signature"


@dataclass(frozen=True)
class TokenCheck:
    """Outcome of verifying a bearer token."""
    account_id: Optional[int] = None
    error: Optional[TokenError] = None

    @property
    def ok(self):
        return self.error is None and self.account_id is not None


def _settings(secret, algorithm):
    config = current_app.config
    return (
        secret or config["JWT_SECRET_KEY"],
        algorithm or config.get("JWT_ALGORITHM", "HS256"),
    )


def issue_token(account_id, secret=None, algorithm=None, expires_in=None):
    """Generate a signed JWT carrying the account id and an expiry."""
    if account_id is None:
        raise ValueError("Account id must be provided to generate a token")

    secret, algorithm = _settings(secret, algorithm)
    if expires_in is None:
        expires_in = datetime.timedelta(days=current_app.config.get("TOKEN_EXPIRY_DAYS", 7))

    now = datetime.datetime.now(datetime.timezone.utc)
    payload = {
        "sub": str(account_id),
        "iat": now,
        "exp": now + expires_in,
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def verify_token(token, secret=None, algorithm=None):
    """Decode and validate a JWT. Failures come back as a TokenCheck, never raised."""
    secret, algorithm = _settings(secret, algorithm)
    try:
        payload = jwt.decode(token, secret, algorithms=[algorithm], options={"require": ["exp", "sub"]})
    except jwt.ExpiredSignatureError:
        return TokenCheck(error=TokenError.EXPIRED)
    except jwt.InvalidSignatureError:
        return TokenCheck(error=TokenError.BAD_SIGNATURE)
    except jwt.InvalidTokenError:
        return TokenCheck(error=TokenError.MALFORMED)

    try:
        account_id = int(payload["sub"])
    except (TypeError, ValueError):
        return TokenCheck(error=TokenError.MALFORMED)
    return TokenCheck(account_id=account_id)
