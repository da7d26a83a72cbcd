"""Shared fixtures: an in-memory description store and CSV helpers."""

import csv
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pytest

# Add parent directory to path to import desckit
sys.path.insert(0, str(Path(__file__).parent.parent))

from desckit.ingest.store import (
    BundleDescription,
    DescriptionSaveError,
    DescriptionStore,
    EntityTypeInfo,
    FieldDescription,
)


class FakeDescriptionStore(DescriptionStore):
    """In-memory DescriptionStore that records every save."""

    def __init__(self):
        self.entity_types: Dict[str, EntityTypeInfo] = {}
        self.bundles: Dict[Tuple[str, str], BundleDescription] = {}
        self.fields: Dict[Tuple[str, str, str], FieldDescription] = {}
        self.saves: List[Tuple[str, str, str]] = []
        self.fail_on: Optional[Tuple[str, str, str]] = None

    def add_entity_type(self, entity_type, label=None, fieldable=True):
        self.entity_types[entity_type] = EntityTypeInfo(entity_type, label or entity_type, fieldable)

    def add_bundle(self, entity_type, bundle_entity_type, bundle_id, label=None, description=""):
        self.bundles[(entity_type, bundle_id)] = BundleDescription(
            entity_type=entity_type,
            bundle_entity_type=bundle_entity_type,
            bundle_id=bundle_id,
            label=label or bundle_id,
            description=description,
        )

    def add_field(self, entity_type, bundle_id, field_id, description="", label=None, base=False):
        self.fields[(entity_type, bundle_id, field_id)] = FieldDescription(
            entity_type=entity_type,
            bundle_id=bundle_id,
            field_id=field_id,
            description=description,
            label=label or field_id,
            target_bundle=None if base else bundle_id,
        )

    def description(self, entity_type, bundle_id, field_id) -> str:
        return self.fields[(entity_type, bundle_id, field_id)].description

    def list_entity_types(self):
        return [info for _, info in sorted(self.entity_types.items()) if info.fieldable]

    def list_bundles(self, entity_type):
        return [b for key, b in sorted(self.bundles.items()) if key[0] == entity_type]

    def list_bundle_configs(self, bundle_entity_type):
        return [b for _, b in sorted(self.bundles.items()) if b.bundle_entity_type == bundle_entity_type]

    def list_fields(self, entity_type, bundle_id):
        return [
            f for key, f in sorted(self.fields.items())
            if key[0] == entity_type and key[1] == bundle_id
        ]

    def find_field(self, entity_type, bundle_id, field_id):
        stored = self.fields.get((entity_type, bundle_id, field_id))
        if stored is None:
            return None
        # Hand out a copy, as a real backend would
        return FieldDescription(**vars(stored))

    def save_field_description(self, field):
        if field.key == self.fail_on:
            raise DescriptionSaveError(f"Simulated failure for {field.key}")
        self.fields[field.key].description = field.description
        self.saves.append(field.key)


@pytest.fixture
def store():
    """Store holding a small node/media content model."""
    s = FakeDescriptionStore()
    s.add_entity_type("node", "Content")
    s.add_entity_type("media", "Media")
    s.add_entity_type("path_alias", "URL alias", fieldable=False)

    s.add_bundle("node", "node_type", "article", "Article", "Time-sensitive content")
    s.add_bundle("node", "node_type", "page", "Basic page", "")
    s.add_bundle("media", "media_type", "image", "Image", "Uploaded pictures")

    s.add_field("node", "article", "body", "Old", label="Body")
    s.add_field("node", "article", "summary", "", label="Summary")
    s.add_field("node", "article", "title", "", label="Title", base=True)
    s.add_field("node", "page", "teaser", "X", label="Teaser")
    s.add_field("media", "image", "field_media_image", "The image file", label="Image")
    return s


@pytest.fixture
def make_csv(tmp_path):
    """Return a helper writing rows (header first) to a CSV file under tmp_path."""

    def _make_csv(rows: List[List[str]], name: str = "import.csv") -> Path:
        path = tmp_path / name
        with open(path, "w", newline="", encoding="utf-8") as f:
            csv.writer(f).writerows(rows)
        return path

    return _make_csv
