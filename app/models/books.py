# app/models/books.py

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class Book(BaseModel):
    id: int
    title: str
    author: Optional[str] = None
    isbn: Optional[str] = None
    publish_date: Optional[date] = Field(default=None, alias="publishDate")
    description: Optional[str] = None

    class Config:
        from_attributes = True
        populate_by_name = True
