# app/api/books.py

import re
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from app.models.books import Book
from app.services.catalog import CatalogService

router = APIRouter(prefix="/api/v1/books", tags=["books"])

# ids are signed 64-bit integers in the books table
_BOOK_ID_RE = re.compile(r"-?[0-9]+")
_BOOK_ID_MIN = -(2**63)
_BOOK_ID_MAX = 2**63 - 1


def parse_book_id(raw: str) -> int:
    if not _BOOK_ID_RE.fullmatch(raw):
        raise HTTPException(status_code=400, detail="book id must be an integer")

    book_id = int(raw)
    if not _BOOK_ID_MIN <= book_id <= _BOOK_ID_MAX:
        raise HTTPException(status_code=400, detail="book id must be an integer")
    return book_id


def get_catalog(request: Request) -> CatalogService:
    return request.app.state.catalog


@router.get("", response_model=List[Book], response_model_exclude_none=True)
def list_books(catalog: CatalogService = Depends(get_catalog)) -> List[Book]:
    """
    Return every book in the catalog.
    """
    return catalog.list_books()


@router.get("/search", response_model=List[Book], response_model_exclude_none=True)
def search_books(
    title: Optional[str] = Query(
        default=None,
        description="Exact title, case-sensitive",
    ),
    keyword: Optional[str] = Query(
        default=None,
        description="Substring of the title, case-insensitive",
    ),
    catalog: CatalogService = Depends(get_catalog),
) -> List[Book]:
    """
    Look up books by title. Exactly one of title or keyword must be given.
    """
    if (title is None) == (keyword is None):
        raise HTTPException(
            status_code=400,
            detail="provide exactly one of 'title' or 'keyword'",
        )

    if title is not None:
        return catalog.find_books_by_title(title)
    return catalog.search_books(keyword)


@router.get("/{book_id}", response_model=Book, response_model_exclude_none=True)
def get_book(book_id: str, catalog: CatalogService = Depends(get_catalog)):
    """
    Look up a single book by its id. Unknown ids get an empty 404.
    """
    book = catalog.get_book(parse_book_id(book_id))
    if book is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    return book
