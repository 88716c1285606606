# app/db/books.py

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.engine import Engine

from app.db.schema import books
from app.models.books import Book


def _row_to_book(row) -> Book:
    return Book(
        id=row["id"],
        title=row["title"],
        author=row["author"],
        isbn=row["isbn"],
        publish_date=row["publish_date"],
        description=row["description"],
    )


class BookStore:
    """
    Read-only queries against the books table.

    Lookup misses come back as None or an empty list; database errors
    propagate to the caller.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def _fetch(self, stmt) -> List[Book]:
        with self.engine.connect() as conn:
            rows = conn.execute(stmt.order_by(books.c.id)).mappings().all()
        return [_row_to_book(row) for row in rows]

    def find_all(self) -> List[Book]:
        return self._fetch(select(books))

    def find_by_id(self, book_id: int) -> Optional[Book]:
        stmt = select(books).where(books.c.id == book_id)

        with self.engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()

        if row is None:
            return None
        return _row_to_book(row)

    def find_by_title(self, title: str) -> List[Book]:
        """Exact, case-sensitive title match."""
        return self._fetch(select(books).where(books.c.title == title))

    def find_by_title_containing(self, keyword: str) -> List[Book]:
        """Case-insensitive substring match; % and _ are matched literally."""
        stmt = select(books).where(books.c.title.icontains(keyword, autoescape=True))
        return self._fetch(stmt)
