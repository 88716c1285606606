# load_data.py
"""
Load the catalog CSV into the database.

Pass --reset to drop and recreate the books table first.
"""

import argparse

from scripts.ingest import parse_books_csv, load_into_db, FILE_PATH


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--file", default=FILE_PATH, help="catalog CSV to load")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="drop and recreate the schema before loading",
    )
    args = parser.parse_args(argv)

    books_list, stats = parse_books_csv(args.file)
    load_into_db(books_list, reset=args.reset)

    print("Load complete.")
    print(f"Total CSV rows read:   {stats['n_rows']}")
    print(f"Books loaded:          {stats['n_books']}")
    print(f"Rows with errors:      {stats['n_errors']}")


if __name__ == "__main__":
    main()
