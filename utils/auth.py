from functools import wraps
from flask import request, g, current_app
from utils.tokens import verify_token
from utils.errors import Unauthenticated
from utils.logger import logger


def get_token_from_request(req):
    """Bearer token from the Authorization header, falling back to the token cookie."""
    auth_header = req.headers.get("Authorization", "")
    if auth_header.startswith("Bearer "):
        token = auth_header[len("Bearer "):].strip()
        if token:
            return token

    cookie_name = current_app.config.get("TOKEN_COOKIE_NAME", "token")
    return req.cookies.get(cookie_name) or None


def authenticate(req):
    """Resolve the calling account id or raise Unauthenticated."""
    token = get_token_from_request(req)
    if not token:
        raise Unauthenticated("no credential")

    check = verify_token(token)
    if not check.ok:
        logger.info("Rejected credential", extra={"reason": check.error.value, "path": req.path})
        raise Unauthenticated("invalid credential")

    return check.account_id


def login_required(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        g.account_id = authenticate(request)
        return f(*args, **kwargs)

    return decorated_function
