from typing import List, Optional

import strawberry
from starlette.concurrency import run_in_threadpool
from strawberry.types import Info

from forum.controllers import post_controller
from forum.resolvers.context import Context
from forum.resolvers.permissions import IsAuthenticated
from forum.resolvers.types import Post, PostInput
from forum.schemas.post_schema import PostCreate, PostUpdate


@strawberry.type
class PostQuery:
    @strawberry.field
    async def posts(self, info: Info[Context, None]) -> List[Post]:
        posts = await run_in_threadpool(post_controller.list_posts, info.context.db)
        return [Post.from_schema(p) for p in posts]

    @strawberry.field
    async def post(self, info: Info[Context, None], id: int) -> Optional[Post]:
        post = await run_in_threadpool(post_controller.get_post, info.context.db, id)
        return Post.from_schema(post) if post else None


@strawberry.type
class PostMutation:
    @strawberry.mutation(permission_classes=[IsAuthenticated])
    async def create_post(self, info: Info[Context, None], input: PostInput) -> Post:
        data = PostCreate(title=input.title, content=input.content)
        post = await run_in_threadpool(post_controller.create_post, info.context.db, data, info.context.session)
        return Post.from_schema(post)

    # No ownership check: any caller may edit or delete any post.
    @strawberry.mutation
    async def update_post(self, info: Info[Context, None], id: int, title: Optional[str] = None) -> Optional[Post]:
        data = PostUpdate() if title is None else PostUpdate(title=title)
        post = await run_in_threadpool(post_controller.update_post, info.context.db, id, data)
        return Post.from_schema(post) if post else None

    @strawberry.mutation
    async def delete_post(self, info: Info[Context, None], id: int) -> bool:
        return await run_in_threadpool(post_controller.delete_post, info.context.db, id)
