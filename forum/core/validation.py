from typing import Optional
from forum.schemas.user_schema import FieldError, UsernamePasswordInput


def validate_register(options: UsernamePasswordInput) -> Optional[list[FieldError]]:
    """Check registration input, reporting only the first rule that fails."""
    # TODO: replace the "@" check with real address validation (email-validator).
    if "@" not in options.email:
        return [FieldError(field="email", message="The email address is invalid.")]

    if len(options.username) <= 2:
        return [FieldError(field="username", message="The username must be at least three characters long.")]

    if "@" in options.username:
        return [FieldError(field="username", message="The username is invalid.")]

    if len(options.password) <= 5:
        return [FieldError(field="password", message="The password must be at least six characters long.")]

    return None
