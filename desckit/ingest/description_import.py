"""
CSV description import.

Reconciles imported records against the descriptions held by a
DescriptionStore:

1. Check the first record carries the required columns (only the first one)
2. For each record: look up the field, classify the change, save if needed
3. Report counters (processed / added / modified / deleted)

Every save is independent. A failing save aborts the run, but descriptions
saved before it stay saved.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..diff.change_events import ChangeEvent, ChangeEventType, classify_change
from ..schema import (
    BUNDLE_ID_COLUMN,
    DESCRIPTION_COLUMN,
    ENTITY_TYPE_COLUMN,
    FIELD_ID_COLUMN,
    missing_import_headers,
)
from .store import DescriptionStore

logger = logging.getLogger(__name__)

ERROR_MESSAGE = "Error processing file"


@dataclass
class ImportSummary:
    """
    Aggregate result of one import run.

    ``processed`` counts every record, including no-ops, lookup misses and
    skipped rows, so it is at least added + modified + deleted.
    """
    processed: int = 0
    added: int = 0
    modified: int = 0
    deleted: int = 0
    events: List[ChangeEvent] = field(default_factory=list)

    def record(self, event: ChangeEvent) -> None:
        if event.event_type == ChangeEventType.DESCRIPTION_ADDED:
            self.added += 1
        elif event.event_type == ChangeEventType.DESCRIPTION_MODIFIED:
            self.modified += 1
        elif event.event_type == ChangeEventType.DESCRIPTION_DELETED:
            self.deleted += 1
        self.events.append(event)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary for JSON output."""
        return {
            "processed": self.processed,
            "added": self.added,
            "modified": self.modified,
            "deleted": self.deleted,
            "events": [e.to_dict() for e in self.events],
        }


def validate_import_records(records: Sequence[Mapping[str, str]]) -> List[str]:
    """
    Return the required columns missing from the first record.

    Only the first record is inspected; an empty sequence is valid.
    """
    if not records:
        return []
    return missing_import_headers(records[0].keys())


def import_descriptions(
    records: Sequence[Mapping[str, str]],
    store: DescriptionStore,
    debug: bool = False
) -> Optional[ImportSummary]:
    """
    Apply imported field descriptions to the store.

    Args:
        records: Records from CsvAdapter.read(), in file order
        store: Description store to read and write
        debug: Log every decision at INFO level

    Returns:
        ImportSummary, or None if the first record lacks a required column
        (nothing is processed in that case)

    Raises:
        DescriptionSaveError: If the store fails to save a description.
            Descriptions saved earlier in the run are not rolled back.
    """
    missing = validate_import_records(records)
    if missing:
        logger.warning(f"Import rejected, missing columns: {', '.join(missing)}")
        return None

    summary = ImportSummary()

    for row_number, record in enumerate(records, start=1):
        summary.processed += 1

        # Short rows past the first one lack trailing columns
        absent = missing_import_headers(record.keys())
        if absent:
            logger.warning(
                f"Record {row_number} skipped, missing columns: {', '.join(absent)}"
            )
            continue

        entity_type = record[ENTITY_TYPE_COLUMN]
        bundle_id = record[BUNDLE_ID_COLUMN]
        field_id = record[FIELD_ID_COLUMN]

        field_config = store.find_field(entity_type, bundle_id, field_id)
        if field_config is None:
            if debug:
                logger.info(f"Field not found: {entity_type}.{bundle_id}.{field_id}")
            continue

        existing = field_config.description
        new = record[DESCRIPTION_COLUMN]

        event_type = classify_change(existing, new)
        if event_type is None:
            continue

        field_config.description = new
        try:
            store.save_field_description(field_config)
        except Exception as e:
            logger.error(
                f"Saving description for {entity_type}.{bundle_id}.{field_id} failed "
                f"after {summary.processed - 1} records: {e}",
                exc_info=True
            )
            raise

        event = ChangeEvent(
            entity_type=entity_type,
            bundle_id=bundle_id,
            field_id=field_id,
            event_type=event_type,
            from_value=existing or "",
            to_value=new,
        )
        summary.record(event)

        if debug:
            logger.info(f"{event_type.name}: {entity_type}.{bundle_id}.{field_id}")

    if debug:
        logger.info(
            f"Import complete: processed {summary.processed}, added {summary.added}, "
            f"modified {summary.modified}, deleted {summary.deleted}"
        )

    return summary


def render_import_summary(summary: Optional[ImportSummary]) -> str:
    """Format a summary as the one-line message shown to the user."""
    if summary is None:
        return ERROR_MESSAGE
    return (
        f"Processed: {summary.processed}, Added: {summary.added}, "
        f"Modified: {summary.modified}, Deleted: {summary.deleted}"
    )

