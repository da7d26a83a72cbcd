from .parser import DescriptionParser
from .listing import DescriptionLister
from .ingest import import_descriptions, render_import_summary, ImportSummary
from .schema import REQUIRED_IMPORT_HEADERS, FIELD_LIST_HEADERS, BUNDLE_LIST_HEADERS

__all__ = [
    "DescriptionParser",
    "DescriptionLister",
    "import_descriptions",
    "render_import_summary",
    "ImportSummary",
    "REQUIRED_IMPORT_HEADERS",
    "FIELD_LIST_HEADERS",
    "BUNDLE_LIST_HEADERS",
]
