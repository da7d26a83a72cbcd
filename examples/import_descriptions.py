#!/usr/bin/env python3
"""Example: apply field descriptions from a CSV file to the description store.

The file needs a header row with the columns "Entity type",
"Bundle machine ID", "Field machine ID" and "Description". Extra columns
(such as the labels written by export_descriptions.py) are ignored.

Database settings are read from DESCKIT_DB_* environment variables or a
.env file in the working directory.
"""

import logging

from dotenv import load_dotenv

from desckit import DescriptionParser, render_import_summary
from desckit.adapters.csv_adapter import CsvAdapter
from desckit.ingest import PostgresClient


def import_csv(input_file: str, debug: bool = False) -> str:
    """Import descriptions from ``input_file`` and return the summary line.

    Args:
        input_file: Path to the CSV import file
        debug: Log every import decision
    """
    parser = DescriptionParser()
    parser.register_adapter(CsvAdapter())

    db = PostgresClient()
    try:
        summary = parser.import_file(input_file, db, debug=debug)
    finally:
        db.close()

    return render_import_summary(summary)


if __name__ == "__main__":
    import sys

    if len(sys.argv) < 2:
        print("Usage: python import_descriptions.py <input_file.csv> [--debug]")
        print("\nExample:")
        print("  python import_descriptions.py field-descriptions.csv")
        sys.exit(1)

    load_dotenv()
    debug = "--debug" in sys.argv[2:]
    logging.basicConfig(level=logging.INFO if debug else logging.WARNING)

    message = import_csv(sys.argv[1], debug=debug)
    print(message)
    if message == "Error processing file":
        sys.exit(1)
