from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from tsundoc.application.client_resolver import ClientResolver
from tsundoc.application.queries import MY_BOOKS_QUERY, SAVE_BOOK_MUTATION
from tsundoc.config import (
    GENERIC_FETCH_ERROR,
    GENERIC_SAVE_ERROR,
    LIST_ITEMS_OPERATION,
    SAVE_ITEM_OPERATION,
)
from tsundoc.domain.models import Item
from tsundoc.errors import ServiceError, ValidationError
from tsundoc.events.bus import EventBus
from tsundoc.events.library_events import ItemSavedEvent


class LibraryService:
    """
    Application Service Facade for the remote item collection.
    Resolves a client per call and maps GraphQL payloads onto ``Item``.
    """

    def __init__(self, resolver: ClientResolver, event_bus: Optional[EventBus] = None):
        self._resolver = resolver
        self._event_bus = event_bus
        self._logger = logging.getLogger(__name__)

    async def list_items(self, keyword: Optional[str] = None) -> List[Item]:
        variables: Dict[str, Any] = {}
        if keyword is not None:
            variables["keyword"] = keyword
        client = await self._resolver.resolve_client()
        data = await client.execute(LIST_ITEMS_OPERATION, MY_BOOKS_QUERY, variables)
        raw_items = data.get("myBooks")
        if raw_items is None:
            raw_items = []
        if not isinstance(raw_items, list):
            raise ServiceError(f"myBooks is not a list: {raw_items!r}", GENERIC_FETCH_ERROR)
        return [Item.from_payload(entry) for entry in raw_items]

    async def save_item(
        self,
        content: str,
        title: Optional[str] = None,
        tags: Iterable[str] = (),
    ) -> Item:
        if not content or not content.strip():
            raise ValidationError("Content must not be empty")
        save_input: Dict[str, Any] = {"content": content}
        if title:
            save_input["title"] = title
        tag_list = list(tags)
        if tag_list:
            save_input["tags"] = tag_list

        client = await self._resolver.resolve_client()
        data = await client.execute(
            SAVE_ITEM_OPERATION, SAVE_BOOK_MUTATION, {"input": save_input}
        )
        payload = data.get("saveBook")
        if payload is None:
            raise ServiceError("saveBook returned nothing", GENERIC_SAVE_ERROR)
        item = Item.from_payload(payload)
        self._logger.info("Saved item %s (%s)", item.id, item.title)
        if self._event_bus is not None:
            self._event_bus.publish(ItemSavedEvent(item_id=item.id, title=item.title))
        return item
