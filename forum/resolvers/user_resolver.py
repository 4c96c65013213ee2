from typing import List, Optional

import strawberry
from starlette.concurrency import run_in_threadpool
from strawberry.types import Info

from forum.controllers import auth_controller, user_controller
from forum.resolvers.context import Context
from forum.resolvers.types import User, UserResponse, UsernamePasswordInput
from forum.schemas import user_schema

# Controllers block on the database, Redis, hashing and SMTP; resolvers run them in the threadpool.


@strawberry.type
class UserQuery:
    @strawberry.field
    async def me(self, info: Info[Context, None]) -> Optional[User]:
        user = await run_in_threadpool(user_controller.me, info.context.db, info.context.session)
        return User.from_schema(user) if user else None

    @strawberry.field
    async def users(self, info: Info[Context, None]) -> List[User]:
        users = await run_in_threadpool(user_controller.list_users, info.context.db)
        return [User.from_schema(u) for u in users]


@strawberry.type
class UserMutation:
    @strawberry.mutation
    async def register(self, info: Info[Context, None], options: UsernamePasswordInput) -> UserResponse:
        data = user_schema.UsernamePasswordInput(
            username=options.username,
            email=options.email,
            password=options.password,
        )
        result = await run_in_threadpool(auth_controller.register, info.context.db, data, info.context.session)
        info.context.sync_session_cookie()
        return UserResponse.from_schema(result)

    @strawberry.mutation
    async def login(self, info: Info[Context, None], username_or_email: str, password: str) -> UserResponse:
        result = await run_in_threadpool(
            auth_controller.login, info.context.db, username_or_email, password, info.context.session
        )
        info.context.sync_session_cookie()
        return UserResponse.from_schema(result)

    @strawberry.mutation
    async def logout(self, info: Info[Context, None]) -> bool:
        ok = await run_in_threadpool(auth_controller.logout, info.context.session)
        info.context.sync_session_cookie()
        return ok

    @strawberry.mutation
    async def forgot_password(self, info: Info[Context, None], email: str) -> bool:
        return await run_in_threadpool(auth_controller.forgot_password, info.context.db, info.context.redis, email)

    @strawberry.mutation
    async def change_password(self, info: Info[Context, None], token: str, new_password: str) -> UserResponse:
        result = await run_in_threadpool(
            auth_controller.change_password, info.context.db, info.context.redis, token, new_password
        )
        return UserResponse.from_schema(result)

    @strawberry.mutation
    async def delete_user(self, info: Info[Context, None], id: int) -> int:
        return await run_in_threadpool(user_controller.delete_user, info.context.db, id)
