"""
Tests for applying imported descriptions to a store.

Covers the four-way classification, header validation, lookup misses,
idempotence and save failures.
"""

import pytest

from desckit.diff.change_events import ChangeEventType
from desckit.ingest import (
    import_descriptions,
    render_import_summary,
    validate_import_records,
    DescriptionSaveError,
    ImportSummary,
)


def make_record(entity_type, bundle_id, field_id, description, **extra):
    """Helper to build an import record keyed like the CSV header."""
    record = {
        "Entity type": entity_type,
        "Bundle machine ID": bundle_id,
        "Field machine ID": field_id,
        "Description": description,
    }
    record.update(extra)
    return record


def counters(summary: ImportSummary):
    return (summary.processed, summary.added, summary.modified, summary.deleted)


class TestClassification:

    def test_modified(self, store):
        summary = import_descriptions([make_record("node", "article", "body", "New")], store)

        assert counters(summary) == (1, 0, 1, 0)
        assert store.description("node", "article", "body") == "New"

    def test_added(self, store):
        summary = import_descriptions([make_record("node", "article", "summary", "Hello")], store)

        assert counters(summary) == (1, 1, 0, 0)
        assert store.description("node", "article", "summary") == "Hello"

    def test_deleted(self, store):
        summary = import_descriptions([make_record("node", "page", "teaser", "")], store)

        assert counters(summary) == (1, 0, 0, 1)
        assert store.description("node", "page", "teaser") == ""

    def test_both_empty_is_not_saved(self, store):
        summary = import_descriptions([make_record("node", "article", "summary", "")], store)

        assert counters(summary) == (1, 0, 0, 0)
        assert store.saves == []

    def test_unchanged_is_not_saved(self, store):
        summary = import_descriptions([make_record("node", "article", "body", "Old")], store)

        assert counters(summary) == (1, 0, 0, 0)
        assert store.saves == []

    def test_mixed_file(self, store):
        records = [
            make_record("node", "article", "body", "New"),
            make_record("node", "article", "summary", "Hello"),
            make_record("node", "page", "teaser", ""),
            make_record("media", "image", "field_media_image", "The image file"),
        ]

        summary = import_descriptions(records, store)

        assert counters(summary) == (4, 1, 1, 1)
        assert store.saves == [
            ("node", "article", "body"),
            ("node", "article", "summary"),
            ("node", "page", "teaser"),
        ]

    def test_events_carry_evidence(self, store):
        summary = import_descriptions([make_record("node", "article", "body", "New")], store)

        assert len(summary.events) == 1
        event = summary.events[0]
        assert event.event_type == ChangeEventType.DESCRIPTION_MODIFIED
        assert event.key == ("node", "article", "body")
        assert event.from_value == "Old"
        assert event.to_value == "New"

    def test_extra_columns_are_ignored(self, store):
        record = make_record("node", "article", "body", "New", **{"Field label": "Body"})

        summary = import_descriptions([record], store)

        assert counters(summary) == (1, 0, 1, 0)


class TestLookup:

    def test_unknown_field_only_counts_processed(self, store):
        records = [
            make_record("node", "article", "no_such_field", "Text"),
            make_record("node", "no_such_bundle", "body", "Text"),
            make_record("no_such_type", "article", "body", ""),
        ]

        summary = import_descriptions(records, store)

        assert counters(summary) == (3, 0, 0, 0)
        assert store.saves == []

    def test_processed_counts_every_record(self, store):
        records = [make_record("node", "article", "body", "Old")] * 5

        summary = import_descriptions(records, store)

        assert summary.processed == 5


class TestValidation:

    def test_missing_column_rejects_whole_import(self, store):
        records = [
            {"Entity type": "node", "Bundle machine ID": "article", "Description": "New"},
        ]

        assert import_descriptions(records, store) is None
        assert store.saves == []
        assert store.description("node", "article", "body") == "Old"

    def test_only_first_record_is_checked(self):
        records = [
            make_record("node", "article", "body", "New"),
            {"Entity type": "node"},
        ]

        assert validate_import_records(records) == []

    def test_missing_columns_listed_in_header_order(self):
        records = [{"Description": "x"}]

        assert validate_import_records(records) == [
            "Entity type", "Bundle machine ID", "Field machine ID",
        ]

    def test_short_row_after_first_is_skipped(self, store):
        """A later row missing trailing columns is counted but never looked up."""
        records = [
            make_record("node", "article", "body", "New"),
            {"Entity type": "node", "Bundle machine ID": "page", "Field machine ID": "teaser"},
        ]

        summary = import_descriptions(records, store)

        assert counters(summary) == (2, 0, 1, 0)
        assert store.description("node", "page", "teaser") == "X"

    def test_empty_records_give_zero_summary(self, store):
        summary = import_descriptions([], store)

        assert counters(summary) == (0, 0, 0, 0)


class TestIdempotence:

    def test_second_run_changes_nothing(self, store):
        records = [
            make_record("node", "article", "body", "New"),
            make_record("node", "article", "summary", "Hello"),
            make_record("node", "page", "teaser", ""),
        ]

        first = import_descriptions(records, store)
        saves_after_first = len(store.saves)
        second = import_descriptions(records, store)

        assert counters(first) == (3, 1, 1, 1)
        assert counters(second) == (3, 0, 0, 0)
        assert len(store.saves) == saves_after_first


class TestSaveFailure:

    def test_failure_propagates_and_keeps_earlier_writes(self, store):
        store.fail_on = ("node", "article", "summary")
        records = [
            make_record("node", "article", "body", "New"),
            make_record("node", "article", "summary", "Hello"),
            make_record("node", "page", "teaser", ""),
        ]

        with pytest.raises(DescriptionSaveError):
            import_descriptions(records, store)

        assert store.description("node", "article", "body") == "New"
        assert store.description("node", "article", "summary") == ""
        assert store.description("node", "page", "teaser") == "X"


class TestRenderSummary:

    def test_renders_counters(self):
        summary = ImportSummary(processed=4, added=1, modified=2, deleted=1)

        assert render_import_summary(summary) == "Processed: 4, Added: 1, Modified: 2, Deleted: 1"

    def test_renders_error_for_rejected_file(self):
        assert render_import_summary(None) == "Error processing file"

    def test_to_dict(self, store):
        summary = import_descriptions([make_record("node", "article", "summary", "Hello")], store)

        data = summary.to_dict()

        assert data["processed"] == 1
        assert data["added"] == 1
        assert data["events"][0]["event_type"] == "DESCRIPTION_ADDED"
