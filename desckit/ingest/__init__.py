"""Description import module for applying CSV edits to a description store."""

from .description_import import (
    import_descriptions,
    render_import_summary,
    validate_import_records,
    ImportSummary,
)
from .store import (
    DescriptionStore,
    DescriptionSaveError,
    EntityTypeInfo,
    BundleDescription,
    FieldDescription,
)
from .postgres_client import PostgresClient

__all__ = [
    "import_descriptions",
    "render_import_summary",
    "validate_import_records",
    "ImportSummary",
    "DescriptionStore",
    "DescriptionSaveError",
    "EntityTypeInfo",
    "BundleDescription",
    "FieldDescription",
    "PostgresClient",
]
