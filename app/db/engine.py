# app/db/engine.py

from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from app.config import get_settings


def get_engine(db_url: Optional[str] = None) -> Engine:
    # echo=True if you want to see SQL printed in the terminal
    return create_engine(db_url or get_settings().database_url, future=True)
