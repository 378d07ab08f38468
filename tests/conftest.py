import asyncio
import os
import sys
from pathlib import Path
from typing import Dict, List, Optional, Union

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Allow running the suite from a checkout without installing the package.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# Qt widgets are only used headless in tests.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from tsundoc.domain.models import Item  # noqa: E402


class FakeLibraryService:
    """Stand-in for ``LibraryService`` whose responses can be held back.

    ``responses`` maps a keyword (``None`` for the unfiltered list) to either
    a list of items or an exception to raise.  ``gate(keyword)`` returns an
    ``asyncio.Event`` that the matching call waits on before answering.
    """

    def __init__(self, responses: Optional[Dict[Optional[str], Union[List[Item], Exception]]] = None):
        self.responses = dict(responses or {})
        self.calls: List[Optional[str]] = []
        self._gates: Dict[Optional[str], asyncio.Event] = {}

    def gate(self, keyword: Optional[str]) -> asyncio.Event:
        event = asyncio.Event()
        self._gates[keyword] = event
        return event

    async def list_items(self, keyword: Optional[str] = None) -> List[Item]:
        self.calls.append(keyword)
        gate = self._gates.get(keyword)
        if gate is not None:
            await gate.wait()
        result = self.responses.get(keyword, [])
        if isinstance(result, Exception):
            raise result
        return list(result)


def make_item(index: int, **overrides) -> Item:
    fields = {
        "id": str(index),
        "title": f"Book {index}",
        "content": f"Content of book {index}",
        "tags": ("sample",),
        "created_at": "2024-01-0%dT00:00:00Z" % (index % 9 + 1),
    }
    fields.update(overrides)
    return Item(**fields)


@pytest.fixture
def books() -> List[Item]:
    return [
        Item("1", "Understanding React Hooks", "Hooks let you use state without classes.",
             ("react", "javascript", "frontend"), "2024-01-01T00:00:00Z"),
        Item("2", "GraphQL Best Practices", "A query language for APIs.",
             ("graphql", "api", "backend"), "2024-01-02T00:00:00Z"),
        Item("3", "TypeScript Deep Dive", "Static types for JavaScript.",
             ("typescript", "javascript", "types", "language"), "2024-01-03T00:00:00Z"),
        Item("4", "Cooking Recipes", "Delicious recipes to try.",
             (), "2024-01-04T00:00:00Z"),
    ]
