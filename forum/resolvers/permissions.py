from typing import Any

from strawberry.permission import BasePermission
from strawberry.types import Info

from forum.core.auth import NOT_AUTHENTICATED


class IsAuthenticated(BasePermission):
    message = NOT_AUTHENTICATED

    def has_permission(self, source: Any, info: Info, **kwargs: Any) -> bool:
        return info.context.session.is_authenticated
