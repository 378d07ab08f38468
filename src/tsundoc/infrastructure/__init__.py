from .graphql_client import GraphQLClient, GraphQLClientFactory, graphql_endpoint
from .token_provider import EnvTokenProvider, StaticTokenProvider, TokenProvider

__all__ = [
    "EnvTokenProvider",
    "GraphQLClient",
    "GraphQLClientFactory",
    "StaticTokenProvider",
    "TokenProvider",
    "graphql_endpoint",
]
