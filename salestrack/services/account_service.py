import logging

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from salestrack.config import get_settings
from salestrack.core.errors import InvalidCredentials, RegistrationError
from salestrack.core.security import create_access_token, generate_salt, hash_password, verify_password
from salestrack.models.user import User

logger = logging.getLogger(__name__)


def user_exists(db: Session, username: str) -> bool:
    stmt = select(User.id).where(User.username == username).limit(1)
    return db.execute(stmt).first() is not None


def password_problems(password: str) -> list[str]:
    settings = get_settings()
    problems = []
    if len(password) < settings.PASSWORD_MIN_LENGTH:
        problems.append(
            "Passwords must be at least {} characters.".format(settings.PASSWORD_MIN_LENGTH)
        )
    if not any(char.isdigit() for char in password):
        problems.append("Passwords must have at least one digit ('0'-'9').")
    if not any(char.islower() for char in password):
        problems.append("Passwords must have at least one lowercase ('a'-'z').")
    if not any(char.isupper() for char in password):
        problems.append("Passwords must have at least one uppercase ('A'-'Z').")
    if all(char.isalnum() for char in password):
        problems.append("Passwords must have at least one non alphanumeric character.")
    return problems


def register_user(db: Session, username: str, email: str, password: str) -> User:
    problems = password_problems(password)
    if problems:
        raise RegistrationError(problems)

    clash = db.execute(
        select(User.username, User.email).where(
            or_(User.username == username, func.lower(User.email) == email.lower())
        )
    ).first()
    if clash is not None:
        if clash.username == username:
            raise RegistrationError(["Username '{}' is already taken.".format(username)])
        raise RegistrationError(["Email '{}' is already taken.".format(email)])

    salt = generate_salt()
    user = User(
        username=username,
        email=email,
        password_salt=salt,
        password_hash=hash_password(password, salt),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise RegistrationError(["Username or email is already taken."]) from exc
    db.refresh(user)
    logger.info("Registered user %s", username)
    return user


def authenticate_user(db: Session, username: str, password: str) -> str:
    user = db.execute(select(User).where(User.username == username.strip())).scalars().first()
    if user is None or not verify_password(password, user.password_salt, user.password_hash):
        logger.warning("Failed login for %s", username)
        raise InvalidCredentials("Invalid username or password.")
    return create_access_token(user.username)


__all__ = ["authenticate_user", "password_problems", "register_user", "user_exists"]
