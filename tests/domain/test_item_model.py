import pytest

from tsundoc.domain.models import FetchStatus, Item, ViewMode
from tsundoc.errors import ServiceError


def test_from_payload_maps_service_fields():
    item = Item.from_payload({
        "id": "1",
        "title": "Test Book 1",
        "content": "This is test content for book 1",
        "tags": ["fiction", "test", "fiction"],
        "createdAt": "2024-01-01T00:00:00Z",
    })

    assert item == Item(
        "1",
        "Test Book 1",
        "This is test content for book 1",
        ("fiction", "test", "fiction"),
        "2024-01-01T00:00:00Z",
    )


def test_from_payload_defaults_optional_fields():
    item = Item.from_payload({"id": "7", "title": "Bare", "content": None, "tags": None})

    assert item.content == ""
    assert item.tags == ()
    assert item.created_at == ""


@pytest.mark.parametrize(
    "payload",
    [
        {"title": "no id"},
        {"id": "1"},
        {"id": "1", "title": ""},
        "not-a-dict",
        None,
    ],
)
def test_from_payload_rejects_incomplete_items(payload):
    with pytest.raises(ServiceError):
        Item.from_payload(payload)


def test_created_label_parses_iso_timestamps():
    item = Item("1", "T", created_at="2024-01-02T15:04:05+09:00")

    assert item.created_datetime is not None
    assert item.created_label() == "2024-01-02"
    assert item.created_label("%d/%m") == "02/01"


def test_created_label_falls_back_to_raw_text():
    item = Item("1", "T", created_at="yesterday")

    assert item.created_datetime is None
    assert item.created_label() == "yesterday"


def test_enums_round_trip_from_strings():
    assert ViewMode("shelf") is ViewMode.SHELF
    assert FetchStatus("error") is FetchStatus.ERROR
