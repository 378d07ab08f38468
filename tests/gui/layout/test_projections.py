"""Tests for the per-mode projections."""

import pytest

from conftest import make_item
from tsundoc.domain.models import ViewMode
from tsundoc.gui.layout.projections import (
    CardProps,
    CoverProps,
    SpineProps,
    card_columns,
    project,
    spine_height,
)


@pytest.mark.parametrize(
    "tags, expected",
    [
        ((), "sm"),
        (("a",), "sm"),
        (("a", "b"), "md"),
        (("a", "b", "c"), "md"),
        (("a", "b", "c", "d"), "lg"),
    ],
)
def test_spine_height_follows_tag_count(tags, expected):
    assert spine_height(make_item(1, tags=tags)) == expected


def test_cover_projection_groups_by_columns():
    items = [make_item(i) for i in range(6)]

    rows = project(ViewMode.COVER, items, 4)

    assert [len(row) for row in rows] == [4, 2]
    assert all(isinstance(p, CoverProps) for row in rows for p in row)
    assert [p.item for row in rows for p in row] == items


def test_shelf_projection_carries_spine_height():
    items = [make_item(1, tags=("a", "b", "c", "d")), make_item(2, tags=())]

    rows = project(ViewMode.SHELF, items, 5)

    assert [p.height for p in rows[0]] == ["lg", "sm"]
    assert all(isinstance(p, SpineProps) for p in rows[0])


def test_card_projection_caps_columns():
    items = [make_item(i) for i in range(7)]

    rows = project(ViewMode.CARD, items, 5)

    assert [len(row) for row in rows] == [3, 3, 1]
    assert all(isinstance(p, CardProps) for row in rows for p in row)


def test_card_projection_created_label():
    item = make_item(1, created_at="2024-03-05T10:20:00Z")

    rows = project(ViewMode.CARD, [item], 2)

    assert rows[0][0].created_label == "2024-03-05"


@pytest.mark.parametrize("columns, expected", [(0, 1), (1, 1), (2, 2), (3, 3), (5, 3)])
def test_card_columns(columns, expected):
    assert card_columns(columns) == expected


def test_project_accepts_mode_strings():
    rows = project("shelf", [make_item(1)], 3)

    assert isinstance(rows[0][0], SpineProps)


@pytest.mark.parametrize("mode", list(ViewMode))
def test_props_expose_render_fields(mode):
    item = make_item(3, tags=("x", "y"))

    props = project(mode, [item], 3)[0][0]

    assert props.title == item.title
    assert props.content == item.content
    assert props.tags == ("x", "y")
    assert props.created_at == item.created_at


def test_click_handlers_forward_to_callbacks():
    item = make_item(1, tags=("python",))
    clicked, tags = [], []

    props = project(ViewMode.COVER, [item], 2, on_click=clicked.append, on_tag_click=tags.append)[0][0]
    props.click()
    props.click_tag("python")

    assert clicked == [item]
    assert tags == ["python"]


def test_click_without_callbacks_is_noop():
    props = project(ViewMode.CARD, [make_item(1)], 2)[0][0]

    props.click()
    props.click_tag("anything")
