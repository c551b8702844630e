"""Authentication service for JWT and password handling."""

import logging
from datetime import UTC, datetime, timedelta

from jose import ExpiredSignatureError, JWTError, jwt
from jose.exceptions import JWTClaimsError
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.exceptions import (
    ConflictError,
    ExpiredTokenError,
    InternalError,
    InvalidCredentialsError,
    InvalidSignatureError,
    MalformedTokenError,
    MissingTokenError,
    NotFoundError,
)
from src.models.user import User

logger = logging.getLogger(__name__)


class PasswordHasher:
    """One-way salted bcrypt hashing."""

    def __init__(self, rounds: int = 12):
        self.context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

    def hash(self, password: str) -> str:
        """Hash a password. The salt is embedded in the returned string."""
        return self.context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash."""
        return self.context.verify(plain_password, hashed_password)


class TokenService:
    """Issue and verify signed JWT access tokens."""

    def __init__(self, secret: str, algorithm: str = "HS256", expires_minutes: int = 60):
        self.secret = secret
        self.algorithm = algorithm
        self.expires_minutes = expires_minutes

    def issue(self, subject_id: int, expires_delta: timedelta | None = None) -> str:
        """Create a JWT access token for the given user id."""
        now = datetime.now(UTC)
        expire = now + (expires_delta or timedelta(minutes=self.expires_minutes))
        to_encode = {
            "sub": str(subject_id),
            "iat": now,
            "exp": expire,
        }
        return jwt.encode(to_encode, self.secret, algorithm=self.algorithm)

    def verify(self, token: str | None) -> int:
        """Decode and validate a JWT token, returning its subject id.

        Raises a distinct ``AuthError`` subclass for a missing token, a
        malformed token, a bad signature and an expired token.
        """
        if not token:
            raise MissingTokenError()

        try:
            jwt.get_unverified_header(token)
        except JWTError:
            raise MalformedTokenError() from None

        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except ExpiredSignatureError:
            raise ExpiredTokenError() from None
        except JWTClaimsError:
            raise MalformedTokenError() from None
        except JWTError:
            raise InvalidSignatureError() from None

        try:
            return int(payload["sub"])
        except (KeyError, TypeError, ValueError):
            raise MalformedTokenError() from None


class AuthService:
    """Registration, login and account lookup."""

    def __init__(self, db: Session, hasher: PasswordHasher, tokens: TokenService):
        self.db = db
        self.hasher = hasher
        self.tokens = tokens

    def get_user_by_email(self, email: str) -> User | None:
        """Get a user by email."""
        return self.db.query(User).filter(User.email == email).first()

    def get_user(self, user_id: int) -> User:
        """Get a user by id."""
        user = self.db.query(User).filter(User.id == user_id).first()
        if user is None:
            raise NotFoundError("User not found")
        return user

    def register(self, email: str, password: str) -> User:
        """Create a new user.

        The email pre-check gives a fast answer in the common case; the unique
        index on ``users.email`` settles concurrent registrations.
        """
        if self.get_user_by_email(email):
            raise ConflictError("User already exists")

        try:
            password_hash = self.hasher.hash(password)
        except ValueError as exc:
            raise InternalError("Registration failed") from exc

        user = User(email=email, password_hash=password_hash)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError("User already exists") from None
        self.db.refresh(user)

        logger.info(f"Registered user {user.id}")
        return user

    def authenticate(self, email: str, password: str) -> str:
        """Check credentials and return a fresh access token."""
        user = self.get_user_by_email(email)
        if not user or not self._password_matches(password, user.password_hash):
            logger.info("Failed login attempt")
            raise InvalidCredentialsError()

        logger.info(f"User {user.id} logged in")
        return self.tokens.issue(user.id)

    def _password_matches(self, password: str, password_hash: str) -> bool:
        """Verify a password; input bcrypt cannot hash never matches."""
        try:
            return self.hasher.verify(password, password_hash)
        except ValueError:
            return False
