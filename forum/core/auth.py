from forum.core.session import SessionContext

NOT_AUTHENTICATED = "not authenticated"


class NotAuthenticatedError(Exception):
    def __init__(self, message: str = NOT_AUTHENTICATED):
        super().__init__(message)


def get_current_user_id(session: SessionContext) -> int:
    if session.user_id is None:
        raise NotAuthenticatedError()
    return session.user_id
