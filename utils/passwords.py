from flask import current_app, has_app_context
from werkzeug.security import generate_password_hash, check_password_hash

DEFAULT_HASH_METHOD = "pbkdf2:sha256"


def _hash_method():
    if has_app_context():
        return current_app.config.get("PASSWORD_HASH_METHOD", DEFAULT_HASH_METHOD)
    return DEFAULT_HASH_METHOD


def hash_password(password, method=None):
    """Salted one-way hash of a plaintext password."""
    return generate_password_hash(password, method=method or _hash_method(), salt_length=16)


def verify_password(password, password_hash):
    """Check a password against a stored hash. Malformed hashes never match."""
    if not isinstance(password, str) or not password or not password_hash:
        return False
    try:
        return check_password_hash(password_hash, password)
    except (ValueError, TypeError):
        return False
