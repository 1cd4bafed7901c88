from datetime import timedelta
from flask import Blueprint, request, jsonify, make_response, current_app, g
from models import db
from classes.account_store import AccountStore
from classes.validators import require_fields
from utils.auth import login_required
from utils.errors import Unauthenticated
from utils.tokens import issue_token
from utils.logger import logger

auth_bp = Blueprint('auth_bp', __name__)


def _set_token_cookie(response, token, max_age):
    config = current_app.config
    response.set_cookie(
        config["TOKEN_COOKIE_NAME"], token,
        httponly=True,
        secure=config["TOKEN_COOKIE_SECURE"],
        samesite=config["TOKEN_COOKIE_SAMESITE"],
        path="/",
        max_age=max_age
    )
    return response


# Register
@auth_bp.route('/register', methods=['POST'])
def register():
    data = require_fields(
        request.get_json(silent=True), "email", "username", "password",
        message="Email, username, and password are required"
    )

    account = AccountStore(db.session).register(
        email=data.get("email"),
        username=data.get("username"),
        password=data.get("password"),
        role=data.get("role"),
    )

    return jsonify({
        "message": "User registered successfully",
        "user": account.to_public_dict()
    }), 201


# Login
@auth_bp.route('/login', methods=['POST'])
def login():
    data = require_fields(
        request.get_json(silent=True), "email", "password",
        message="Email and password are required"
    )

    account = AccountStore(db.session).authenticate(data.get("email"), data.get("password"))
    if account is None:
        logger.info("Failed login attempt")
        return jsonify({"error": "Invalid email or password"}), 401

    token = issue_token(account.id)
    max_age = int(timedelta(days=current_app.config["TOKEN_EXPIRY_DAYS"]).total_seconds())

    response = make_response(jsonify({
        "message": "Login successful",
        "user": account.to_public_dict(),
        "token": token
    }))
    return _set_token_cookie(response, token, max_age)


# Logout
@auth_bp.route('/logout', methods=['POST'])
def logout():
    response = make_response(jsonify({"message": "Logout successful"}))
    return _set_token_cookie(response, "", 0)


# Auth Check
@auth_bp.route('/me', methods=['GET'])
@login_required
def me():
    account = AccountStore(db.session).get(g.account_id)
    if account is None:
        # token outlived its account
        raise Unauthenticated("invalid credential")

    return jsonify({"user": account.to_public_dict()}), 200
