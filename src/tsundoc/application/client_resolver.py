"""Pick an authenticated or anonymous data client for each request."""

from __future__ import annotations

import logging

from tsundoc.errors import AuthUnavailableError
from tsundoc.infrastructure.graphql_client import GraphQLClient, GraphQLClientFactory
from tsundoc.infrastructure.token_provider import TokenProvider


class ClientResolver:
    """Resolve a :class:`GraphQLClient`, falling back to anonymous access.

    ``resolve_client`` never raises: any token provider failure is logged
    and absorbed, and an anonymous client is returned instead.  Whether the
    service then restricts the query is its own business.
    """

    def __init__(self, factory: GraphQLClientFactory, token_provider: TokenProvider) -> None:
        self._factory = factory
        self._token_provider = token_provider
        self._logger = logging.getLogger(__name__)

    async def resolve_client(self) -> GraphQLClient:
        try:
            token = await self._request_token()
        except AuthUnavailableError as exc:
            self._logger.debug("Using anonymous client: %s", exc)
            return self._factory.anonymous()
        return self._factory.authenticated(token)

    async def _request_token(self) -> str:
        try:
            token = await self._token_provider.get_token()
        except Exception as exc:
            raise AuthUnavailableError(f"token provider failed: {exc}") from exc
        if not token:
            raise AuthUnavailableError("no active session")
        return token
