#!/usr/bin/env python3
"""Example: export field or bundle descriptions from the description store.

    python export_descriptions.py fields [entity_type ...]
    python export_descriptions.py bundles [bundle_entity_type ...]

Writes field-descriptions.csv or entity-type-descriptions.csv in the current
directory. Without type arguments every available type is listed.
"""

from dotenv import load_dotenv

from desckit import DescriptionParser
from desckit.ingest import PostgresClient
from desckit.schema import BUNDLE_EXPORT_FILENAME, FIELD_EXPORT_FILENAME


def export_descriptions(kind: str, types=None) -> str:
    """Export one listing and return the path written.

    Args:
        kind: "fields" or "bundles"
        types: Entity type IDs (fields) or bundle entity type IDs (bundles)
    """
    parser = DescriptionParser()
    db = PostgresClient()

    try:
        if kind == "fields":
            return parser.export_field_descriptions(db, FIELD_EXPORT_FILENAME, entity_types=types)
        if kind == "bundles":
            return parser.export_bundle_descriptions(db, BUNDLE_EXPORT_FILENAME, bundle_entity_types=types)
        raise ValueError(f"Unknown listing: {kind}. Use 'fields' or 'bundles'")
    finally:
        db.close()


if __name__ == "__main__":
    import sys

    if len(sys.argv) < 2:
        print("Usage: python export_descriptions.py fields|bundles [type ...]")
        sys.exit(1)

    load_dotenv()
    path = export_descriptions(sys.argv[1], sys.argv[2:] or None)
    print(f"Wrote {path}")
