import strawberry

from forum.resolvers.post_resolver import PostMutation, PostQuery
from forum.resolvers.user_resolver import UserMutation, UserQuery


@strawberry.type
class Query(PostQuery, UserQuery):
    pass


@strawberry.type
class Mutation(PostMutation, UserMutation):
    pass


schema = strawberry.Schema(query=Query, mutation=Mutation)
