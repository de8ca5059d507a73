# =============================================================================
# core/services/auth_service.py - Authentication Business Logic
# =============================================================================
# Password hashing (bcrypt), bearer token issue/verification (HS256 JWT via
# python-jose), registration and login.
#
# The signing secret is passed in at construction; this module never reads
# settings itself.
# =============================================================================

import logging
from datetime import datetime, timedelta, timezone

import bcrypt
from jose import ExpiredSignatureError, JWTError, jwt

from app.exceptions import (
    DuplicateEmailError,
    InvalidCredentialsError,
    UnauthenticatedError,
)
from core.models.user import RegisterRequest, User
from core.stores.user_store import UserStore
from lib.supabase_client import DuplicateKeyError

logger = logging.getLogger(__name__)

# Fixed bcrypt cost factor
BCRYPT_ROUNDS = 10

# bcrypt ignores (newer releases reject) input beyond 72 bytes
BCRYPT_MAX_BYTES = 72

TOKEN_ALGORITHM = "HS256"
TOKEN_TTL = timedelta(hours=24)


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


class AuthService:
    """
    Service for account and token operations.

    Example:
        auth = AuthService(UserStore(client), secret_key=settings.JWT_SECRET_KEY)
        token, user = auth.login("d@x.com", "s3cret")
        user_id = auth.authenticate(token)
    """

    def __init__(self, users: UserStore, secret_key: str):
        self._users = users
        self._secret_key = secret_key

    # -------------------------------------------------------------------------
    # Passwords
    # -------------------------------------------------------------------------

    @staticmethod
    def hash_password(password: str) -> str:
        """Salted one-way hash of a password."""
        salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
        return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")

    @staticmethod
    def verify_password(password: str, password_hash: str) -> bool:
        """
        Check a password against a stored hash.

        The comparison is done by bcrypt.checkpw, which is constant-time.
        A malformed hash counts as a mismatch.
        """
        try:
            return bcrypt.checkpw(_password_bytes(password), password_hash.encode("utf-8"))
        except ValueError as e:
            logger.error(f"Password verification error: {e}")
            return False

    # -------------------------------------------------------------------------
    # Tokens
    # -------------------------------------------------------------------------

    def issue_token(self, user_id: str) -> str:
        """Sign a token carrying userId, valid for 24 hours."""
        issued_at = datetime.now(timezone.utc)
        claims = {
            "userId": str(user_id),
            "iat": issued_at,
            "exp": issued_at + TOKEN_TTL,
        }
        return jwt.encode(claims, self._secret_key, algorithm=TOKEN_ALGORITHM)

    def authenticate(self, token: str | None) -> str:
        """
        Resolve a bearer token to a user ID.

        Raises:
            UnauthenticatedError: If the token is absent, malformed, signed
                with another key, expired, or carries no userId
        """
        if not token:
            raise UnauthenticatedError("No token provided")

        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[TOKEN_ALGORITHM])
        except ExpiredSignatureError:
            logger.warning("Bearer token has expired")
            raise UnauthenticatedError("Invalid token")
        except JWTError as e:
            logger.warning(f"Bearer token validation failed: {e}")
            raise UnauthenticatedError("Invalid token")

        user_id = payload.get("userId")
        if not user_id:
            logger.warning("Bearer token missing 'userId' claim")
            raise UnauthenticatedError("Invalid token")

        return str(user_id)

    # -------------------------------------------------------------------------
    # Accounts
    # -------------------------------------------------------------------------

    def register(self, request: RegisterRequest) -> User:
        """
        Create a new account.

        Raises:
            DuplicateEmailError: If the email is already registered. Checked
                up front and again by the store's unique constraint, which
                catches two registrations racing each other.
        """
        if self._users.find_by_email(request.email):
            raise DuplicateEmailError()

        try:
            row = self._users.create({
                "name": request.name,
                "email": request.email,
                "password_hash": self.hash_password(request.password),
                "phone": request.phone,
                "user_type": request.user_type.value,
                "address": request.address,
            })
        except DuplicateKeyError:
            raise DuplicateEmailError()

        user = User.from_row(row)
        logger.info(f"Registered {user.user_type.value}: {user.id}")
        return user

    def login(self, email: str, password: str) -> tuple[str, User]:
        """
        Check credentials and issue a token.

        Unknown email and wrong password fail identically.
        """
        row = self._users.find_by_email(email)
        if row is None:
            raise InvalidCredentialsError()

        user = User.from_row(row)
        if not self.verify_password(password, user.password_hash):
            raise InvalidCredentialsError()

        logger.info(f"User logged in: {user.id}")
        return self.issue_token(user.id), user
