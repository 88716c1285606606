# app/db/schema.py

from sqlalchemy import MetaData, Table, Column, Integer, String, Date, Text

metadata = MetaData()

books = Table(
    "books",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String, nullable=False),
    Column("author", String, nullable=True),
    Column("isbn", String, nullable=True),
    Column("publish_date", Date, nullable=True),
    Column("description", Text, nullable=True),
)
