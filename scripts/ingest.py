# scripts/ingest.py

import csv
from datetime import datetime
import logging
from typing import Optional

from sqlalchemy.engine import Engine

from app.config import get_settings
from app.db.engine import get_engine
from app.db.schema import books, metadata

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)

FILE_PATH = get_settings().data_file


# ---- Helpers ----

def clean_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_publish_date(value: Optional[str]):
    value = clean_text(value)
    if value is None:
        return None
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_books_csv(file_path: str = FILE_PATH):
    """
    Read the catalog CSV (Id,Title,Author,PublishDate,Isbn,Description).

    Rows with a blank title, a non-integer id, a bad date or an id that was
    already seen are skipped and counted as errors.
    """
    books_list = []
    seen_ids: set[int] = set()

    n_rows = 0
    n_errors = 0
    error_examples = []

    with open(file_path, newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)

        for row in reader:
            n_rows += 1

            try:
                book_id = int(row["Id"].strip())
                if book_id in seen_ids:
                    raise ValueError(f"duplicate Id {book_id}")

                title = clean_text(row["Title"])
                if title is None:
                    raise ValueError("missing Title")

                books_list.append(
                    {
                        "id": book_id,
                        "title": title,
                        "author": clean_text(row.get("Author")),
                        "isbn": clean_text(row.get("Isbn")),
                        "publish_date": parse_publish_date(row.get("PublishDate")),
                        "description": clean_text(row.get("Description")),
                    }
                )
                seen_ids.add(book_id)

            except (KeyError, AttributeError, ValueError) as e:
                n_errors += 1
                if len(error_examples) < 5:
                    error_examples.append(
                        {
                            "row_number": n_rows,
                            "row": dict(row),
                            "error": repr(e),
                        }
                    )

    stats = {
        "n_rows": n_rows,
        "n_books": len(books_list),
        "n_errors": n_errors,
        "error_examples": error_examples,
    }
    return books_list, stats


def reset_schema(engine: Engine) -> None:
    """Drop and recreate every catalog table."""
    metadata.drop_all(engine)
    metadata.create_all(engine)
    logger.info("Books schema recreated.")


def load_into_db(books_list, engine: Optional[Engine] = None, reset: bool = False):
    engine = engine or get_engine()
    if reset:
        reset_schema(engine)
    else:
        metadata.create_all(engine)

    with engine.begin() as conn:
        # Rebuild the catalog from scratch (deterministic)
        conn.execute(books.delete())
        if books_list:
            conn.execute(books.insert(), books_list)


def main():
    books_list, stats = parse_books_csv(FILE_PATH)
    load_into_db(books_list)

    logger.info(f"Total CSV rows read:   {stats['n_rows']}")
    logger.info(f"Books loaded:          {stats['n_books']}")
    logger.info(f"Rows with errors:      {stats['n_errors']}")

    if stats["error_examples"]:
        logger.warning("Example errors:")
        for ex in stats["error_examples"]:
            logger.warning("Row %s: %s", ex["row_number"], ex["error"])


if __name__ == "__main__":
    main()
