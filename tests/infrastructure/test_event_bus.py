from dataclasses import dataclass

from tsundoc.events.bus import Event, EventBus
from tsundoc.events.library_events import ItemSavedEvent


@dataclass(frozen=True, kw_only=True)
class SimpleEvent(Event):
    payload: str = ""


def test_subscribe_publish():
    bus = EventBus()
    received = []

    bus.subscribe(SimpleEvent, lambda e: received.append(e.payload))
    bus.publish(SimpleEvent(payload="hello"))

    assert received == ["hello"]


def test_handlers_only_receive_their_event_type():
    bus = EventBus()
    received = []

    bus.subscribe(ItemSavedEvent, lambda e: received.append(e.item_id))
    bus.publish(SimpleEvent(payload="ignored"))
    bus.publish(ItemSavedEvent(item_id="42"))

    assert received == ["42"]


def test_unsubscribe():
    bus = EventBus()
    received = []

    sub = bus.subscribe(SimpleEvent, lambda e: received.append(e.payload))
    bus.unsubscribe(sub)
    bus.publish(SimpleEvent(payload="x"))

    assert received == []
    assert sub.active is False


def test_cancelled_subscription_is_skipped_and_pruned():
    bus = EventBus()
    received = []

    sub = bus.subscribe(SimpleEvent, lambda e: received.append(e.payload))
    sub.cancel()
    bus.publish(SimpleEvent(payload="x"))

    assert received == []
    assert bus.subscriber_count(SimpleEvent) == 0


def test_failing_handler_does_not_block_others():
    bus = EventBus()
    received = []

    def bad(event):
        raise RuntimeError("boom")

    bus.subscribe(SimpleEvent, bad)
    bus.subscribe(SimpleEvent, lambda e: received.append(e.payload))
    bus.publish(SimpleEvent(payload="still delivered"))

    assert received == ["still delivered"]
