"""GraphQL documents used by the library view."""

from __future__ import annotations

from typing import Final

ITEM_FIELDS: Final[str] = """
    id
    title
    content
    tags
    createdAt
"""

MY_BOOKS_QUERY: Final[str] = f"""
query MyBooks($keyword: String) {{
  myBooks(keyword: $keyword) {{{ITEM_FIELDS}  }}
}}
"""

SAVE_BOOK_MUTATION: Final[str] = f"""
mutation SaveBook($input: SaveBookInput!) {{
  saveBook(input: $input) {{{ITEM_FIELDS}  }}
}}
"""
