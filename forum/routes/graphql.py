from strawberry.fastapi import GraphQLRouter
from forum.resolvers.context import get_context
from forum.resolvers.schema import schema

router = GraphQLRouter(schema, context_getter=get_context)
