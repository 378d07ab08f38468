from __future__ import annotations

import logging
from typing import Optional

import httpx

from tsundoc.application.client_resolver import ClientResolver
from tsundoc.application.library_service import LibraryService
from tsundoc.errors.handler import ErrorHandler
from tsundoc.events.bus import EventBus
from tsundoc.infrastructure.graphql_client import GraphQLClientFactory
from tsundoc.infrastructure.token_provider import EnvTokenProvider, TokenProvider
from tsundoc.settings.manager import SettingsManager
from .container import Container


def bootstrap(
    container: Container,
    settings: SettingsManager,
    token_provider: Optional[TokenProvider] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Container:
    """Register all application services in the DI container.

    *transport* is handed to every ``httpx.AsyncClient``; tests pass an
    ``httpx.MockTransport`` here.
    """
    container.register_instance(SettingsManager, settings)
    container.register_instance(TokenProvider, token_provider or EnvTokenProvider())
    container.register_singleton(EventBus, lambda _c: EventBus())
    container.register_singleton(
        ErrorHandler,
        lambda c: ErrorHandler(logging.getLogger("tsundoc.errors"), c.resolve(EventBus)),
    )
    container.register_singleton(
        GraphQLClientFactory,
        lambda c: GraphQLClientFactory(
            c.resolve(SettingsManager).api_endpoint(),
            timeout=c.resolve(SettingsManager).request_timeout(),
            transport=transport,
        ),
    )
    container.register_factory(
        ClientResolver,
        lambda c: ClientResolver(c.resolve(GraphQLClientFactory), c.resolve(TokenProvider)),
    )
    container.register_singleton(
        LibraryService,
        lambda c: LibraryService(c.resolve(ClientResolver), c.resolve(EventBus)),
    )
    return container
