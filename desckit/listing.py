"""Builds field and bundle description tables from a description store."""

import logging
from typing import Dict, Iterable, List, Optional

from .ingest.store import DescriptionStore
from .schema import BUNDLE_ENTITY_TYPES, BUNDLE_LIST_HEADERS, FIELD_LIST_HEADERS

logger = logging.getLogger(__name__)


class DescriptionLister:
    """Lists descriptions of fields and bundles for display or export.

    Rows are plain lists of strings in header order, so the same table can
    be rendered on screen or handed to DescriptionParser.export().
    """

    def __init__(self, store: DescriptionStore):
        """Initialize the lister.

        Args:
            store: Store the content model is read from
        """
        self.store = store

    def available_entity_types(self) -> Dict[str, str]:
        """Get the fieldable entity types that can be listed.

        Returns:
            Mapping of entity type ID to label
        """
        return {info.entity_type: info.label for info in self.store.list_entity_types()}

    def available_bundle_entity_types(self) -> Dict[str, str]:
        """Get the known bundle entity types that exist in the store.

        Returns:
            Mapping of bundle entity type ID to label, in BUNDLE_ENTITY_TYPES order
        """
        available = {}
        for bundle_entity_type, label in BUNDLE_ENTITY_TYPES.items():
            if self.store.list_bundle_configs(bundle_entity_type):
                available[bundle_entity_type] = label
        return available

    def field_header(self) -> List[str]:
        return list(FIELD_LIST_HEADERS)

    def bundle_header(self) -> List[str]:
        return list(BUNDLE_LIST_HEADERS)

    def field_rows(self, entity_types: Iterable[str]) -> List[List[str]]:
        """List the configurable fields of every bundle of the given entity types.

        Base fields (no target bundle) are left out.

        Args:
            entity_types: Content entity type IDs (e.g. ["node", "media"])

        Returns:
            Rows matching field_header()
        """
        rows = []

        for entity_type in entity_types:
            for bundle in self.store.list_bundles(entity_type):
                for field in self.store.list_fields(entity_type, bundle.bundle_id):
                    if not field.target_bundle:
                        continue
                    rows.append([
                        entity_type,
                        bundle.bundle_id,
                        bundle.label,
                        field.field_id,
                        field.label,
                        field.description,
                    ])

        return rows

    def bundle_rows(self, bundle_entity_types: Iterable[str]) -> List[List[str]]:
        """List every bundle of the given bundle entity types with its description.

        Args:
            bundle_entity_types: Bundle entity type IDs (e.g. ["node_type"])

        Returns:
            Rows matching bundle_header(); the first column holds the bundle
            entity type's label
        """
        rows = []

        for bundle_entity_type in bundle_entity_types:
            label = BUNDLE_ENTITY_TYPES.get(bundle_entity_type)
            if label is None:
                logger.warning(f"Unknown bundle entity type skipped: {bundle_entity_type}")
                continue

            for bundle in self.store.list_bundle_configs(bundle_entity_type):
                rows.append([label, bundle.bundle_id, bundle.label, bundle.description])

        return rows


def rows_to_records(header: List[str], rows: List[List[str]]) -> List[Dict[str, str]]:
    """Convert table rows into header-keyed dictionaries for export."""
    return [dict(zip(header, row)) for row in rows]


def list_field_descriptions(
    store: DescriptionStore,
    entity_types: Optional[Iterable[str]] = None
) -> List[Dict[str, str]]:
    """List field descriptions as records.

    Args:
        store: Description store
        entity_types: Entity type IDs to list (default: every fieldable type)

    Returns:
        Records keyed by FIELD_LIST_HEADERS
    """
    lister = DescriptionLister(store)
    if entity_types is None:
        entity_types = list(lister.available_entity_types())
    return rows_to_records(lister.field_header(), lister.field_rows(entity_types))


def list_bundle_descriptions(
    store: DescriptionStore,
    bundle_entity_types: Optional[Iterable[str]] = None
) -> List[Dict[str, str]]:
    """List bundle descriptions as records.

    Args:
        store: Description store
        bundle_entity_types: Bundle entity type IDs to list (default: every
            known type present in the store)

    Returns:
        Records keyed by BUNDLE_LIST_HEADERS
    """
    lister = DescriptionLister(store)
    if bundle_entity_types is None:
        bundle_entity_types = list(lister.available_bundle_entity_types())
    return rows_to_records(lister.bundle_header(), lister.bundle_rows(bundle_entity_types))
