# app/services/catalog.py

from typing import List, Optional

from app.db.books import BookStore
from app.models.books import Book


class CatalogService:
    """
    Entry point the HTTP layer talks to. Currently every call is handed
    straight to the store; rules that do not belong in SQL go here.
    """

    def __init__(self, store: BookStore):
        self.store = store

    def list_books(self) -> List[Book]:
        return self.store.find_all()

    def get_book(self, book_id: int) -> Optional[Book]:
        return self.store.find_by_id(book_id)

    def find_books_by_title(self, title: str) -> List[Book]:
        return self.store.find_by_title(title)

    def search_books(self, keyword: str) -> List[Book]:
        return self.store.find_by_title_containing(keyword)
