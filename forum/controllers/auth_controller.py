import logging
import uuid
from redis import Redis, RedisError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from forum.core.config import get_settings
from forum.core.email import send_email
from forum.core.security import hash_password, verify_password
from forum.core.session import SessionContext
from forum.core.validation import validate_register
from forum.repositories.user_repo import (
    create_user,
    get_user_by_email,
    get_user_by_id,
    get_user_by_username,
    update_user_password,
)
from forum.repositories.password_reset_repo import (
    consume_password_reset,
    create_password_reset,
)
from forum.schemas.user_schema import UsernamePasswordInput, UserRead, UserResponse

logger = logging.getLogger(__name__)


def register(db: Session, options: UsernamePasswordInput, session: SessionContext) -> UserResponse:
    if get_user_by_username(db, options.username):
        return UserResponse.error("username", "The username already exists.")

    errors = validate_register(options)
    if errors:
        return UserResponse(errors=errors)

    try:
        user = create_user(db, options.username, options.email, hash_password(options.password))
    except IntegrityError as err:
        db.rollback()
        # TODO: map unique violations on email to a field error of their own.
        return UserResponse.error("db", str(err.orig))

    session.establish(user.id)
    logger.info("Registered user %s (id=%s)", user.username, user.id)
    return UserResponse(user=UserRead.model_validate(user))


def login(db: Session, username_or_email: str, password: str, session: SessionContext) -> UserResponse:
    if "@" in username_or_email:
        user = get_user_by_email(db, username_or_email)
    else:
        user = get_user_by_username(db, username_or_email)

    if not user:
        return UserResponse.error("usernameOrEmail", "That user does not exist.")

    if not verify_password(password, user.password):
        return UserResponse.error("password", "The password is incorrect.")

    session.establish(user.id)
    return UserResponse(user=UserRead.model_validate(user))


def logout(session: SessionContext) -> bool:
    try:
        session.destroy()
    except RedisError:
        logger.exception("Could not destroy session")
        return False
    return True


def _send_reset_email(to_email: str, reset_link: str):
    subject = "Change your password"
    html = f'<a href="{reset_link}">change password</a>'
    send_email(to_email, subject, html, text_body=f"Change your password: {reset_link}")


def forgot_password(db: Session, redis: Redis, email: str) -> bool:
    user = get_user_by_email(db, email)
    if not user:
        # Unknown emails get the same answer as known ones.
        return True

    settings = get_settings()
    token = str(uuid.uuid4())
    create_password_reset(redis, token, user.id, settings.reset_token_ttl)

    reset_link = f"{settings.frontend_base_url}/change-password/{token}"
    _send_reset_email(user.email, reset_link)
    logger.info("Issued password reset token for user id=%s", user.id)
    return True


def change_password(db: Session, redis: Redis, token: str, new_password: str) -> UserResponse:
    if len(new_password) <= 5:
        return UserResponse.error("newPassword", "The password must be at least six characters long.")

    # Spent before the user lookup; at most one request redeems a token.
    user_id = consume_password_reset(redis, token)
    if user_id is None:
        return UserResponse.error("token", "The token has expired.")

    user = get_user_by_id(db, user_id)
    if not user:
        return UserResponse.error("token", "User no longer exists.")

    update_user_password(db, user, hash_password(new_password))
    return UserResponse(user=UserRead.model_validate(user))
