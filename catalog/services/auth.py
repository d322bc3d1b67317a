"""Authentication service for JWT and password handling."""

import logging
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from catalog.config import Settings
from catalog.exceptions import InvalidTokenError, StoreError, ValidationError
from catalog.models.user import User
from catalog.schemas.auth import TokenIdentity

logger = logging.getLogger(__name__)

BCRYPT_ROUNDS = 10

# Password hashing context
pwd_context = CryptContext(
    schemes=["bcrypt"], deprecated="auto", bcrypt__default_rounds=BCRYPT_ROUNDS
)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(user_id: int, email: str, settings: Settings) -> str:
    """Create a JWT access token."""
    expire = datetime.now(UTC) + timedelta(minutes=settings.jwt_expiration_minutes)
    to_encode = {
        "sub": str(user_id),
        "email": email,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_access_token(token: str, settings: Settings) -> TokenIdentity:
    """Decode and validate a JWT token.

    Only the signature and expiry are checked; the user table is not consulted,
    so a token stays valid for its whole lifetime.

    Raises:
        InvalidTokenError: If the token is malformed, expired, badly signed or
            lacks the identity claims.
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require_exp": True},
        )
    except JWTError as e:
        logger.info(f"Rejected access token: {e}")
        raise InvalidTokenError("Invalid token") from e

    subject = payload.get("sub")
    email = payload.get("email")
    if subject is None or email is None:
        raise InvalidTokenError("Invalid token")

    try:
        user_id = int(subject)
    except (TypeError, ValueError) as e:
        raise InvalidTokenError("Invalid token") from e

    return TokenIdentity(user_id=user_id, email=email)


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == email).first()


def authenticate_user(db: Session, email: str, password: str) -> User | None:
    """Authenticate a user by email and password.

    Unknown emails and wrong passwords both return None.
    """
    try:
        user = get_user_by_email(db, email)
    except SQLAlchemyError as e:
        logger.error(f"Failed to look up user for login: {e}")
        raise StoreError("Error during login") from e

    if not user:
        return None
    if not verify_password(password, user.password):
        return None
    return user


def create_user(db: Session, email: str, password: str) -> User:
    """Create a new user.

    Raises:
        ValidationError: If the email is already registered.
        StoreError: On any other persistence failure.
    """
    user = User(email=email, password=get_password_hash(password))
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ValidationError("Email already exists") from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to create user: {e}")
        raise StoreError("Error creating user") from e

    db.refresh(user)
    return user
