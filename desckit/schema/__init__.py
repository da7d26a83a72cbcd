"""Description list schema definitions for CSV headers and known entity types."""

from typing import Dict, List

# Columns an import file must carry (extra columns are ignored)
ENTITY_TYPE_COLUMN = "Entity type"
BUNDLE_ID_COLUMN = "Bundle machine ID"
FIELD_ID_COLUMN = "Field machine ID"
DESCRIPTION_COLUMN = "Description"

REQUIRED_IMPORT_HEADERS = [
    ENTITY_TYPE_COLUMN,
    BUNDLE_ID_COLUMN,
    FIELD_ID_COLUMN,
    DESCRIPTION_COLUMN,
]

# Field description listing, in table order
FIELD_LIST_HEADERS = [
    ENTITY_TYPE_COLUMN,
    BUNDLE_ID_COLUMN,
    "Bundle label",
    FIELD_ID_COLUMN,
    "Field label",
    DESCRIPTION_COLUMN,
]

# Bundle (entity type) description listing, in table order
BUNDLE_LIST_HEADERS = [
    ENTITY_TYPE_COLUMN,
    BUNDLE_ID_COLUMN,
    "Bundle label",
    DESCRIPTION_COLUMN,
]

# Bundle entity types whose bundles carry a description, with display labels
BUNDLE_ENTITY_TYPES: Dict[str, str] = {
    "node_type": "Node type (Content type)",
    "media_type": "Media type",
    "comment_type": "Comment type",
    "taxonomy_vocabulary": "Vocabulary",
    "paragraphs_type": "Paragraph type",
    "webform": "Webform",
    "block_content_type": "Block content type",
    "menu": "Menu",
}

FIELD_EXPORT_FILENAME = "field-descriptions.csv"
BUNDLE_EXPORT_FILENAME = "entity-type-descriptions.csv"


def missing_import_headers(keys) -> List[str]:
    """Return the required import columns absent from ``keys``, in header order."""
    present = set(keys)
    return [header for header in REQUIRED_IMPORT_HEADERS if header not in present]
