from datetime import datetime
from typing import List, Optional

import strawberry

from forum.schemas.post_schema import PostRead
from forum.schemas.user_schema import UserRead
from forum.schemas import user_schema


@strawberry.type
class User:
    id: int
    username: str
    email: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_schema(cls, data: UserRead) -> "User":
        return cls(**data.model_dump())


@strawberry.type
class Post:
    id: int
    title: str
    content: str
    points: int
    author_id: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_schema(cls, data: PostRead) -> "Post":
        return cls(**data.model_dump())


@strawberry.type
class FieldError:
    field: str
    message: str


@strawberry.type
class UserResponse:
    errors: Optional[List[FieldError]] = None
    user: Optional[User] = None

    @classmethod
    def from_schema(cls, data: user_schema.UserResponse) -> "UserResponse":
        errors = None
        if data.errors is not None:
            errors = [FieldError(field=e.field, message=e.message) for e in data.errors]
        user = User.from_schema(data.user) if data.user else None
        return cls(errors=errors, user=user)


@strawberry.input
class UsernamePasswordInput:
    username: str
    email: str
    password: str


@strawberry.input
class PostInput:
    title: str
    content: str
