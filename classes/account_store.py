from sqlalchemy.exc import IntegrityError

from models.accounts import Account
from classes.validators import validate_email, validate_password, validate_username, validate_role
from utils.errors import Conflict
from utils.passwords import hash_password, verify_password
from utils.logger import logger


class AccountStore:
    def __init__(self, session):
        self.session = session

    def _find_existing(self, email, username):
        return self.session.query(Account).filter(
            (Account.email == email) | (Account.username == username)
        ).first()

    def register(self, email, username, password, role=None):
        """Validate and persist a new account. Email or username collisions raise Conflict."""
        email = validate_email(email)
        username = validate_username(username)
        password = validate_password(password)
        role = validate_role(role)

        if self._find_existing(email, username):
            raise Conflict("User with this email or username already exists")

        account = Account(
            email=email,
            username=username,
            password_hash=hash_password(password),
            role=role,
        )
        self.session.add(account)
        try:
            self.session.commit()
        except IntegrityError:
            # lost a race with a concurrent registration
            self.session.rollback()
            logger.info("Registration conflict on commit", extra={"username": username})
            raise Conflict("User with this email or username already exists")

        logger.info("Registered account", extra={"account_id": account.id, "role": role})
        return account

    def authenticate(self, email, password):
        """Return the account for valid credentials, otherwise None."""
        email = validate_email(email)
        account = self.session.query(Account).filter_by(email=email).first()
        if account is None or not verify_password(password, account.password_hash):
            return None
        return account

    def get(self, account_id):
        return self.session.get(Account, account_id)
