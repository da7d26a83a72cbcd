"""
Description store interface.

The store owns the content model (entity types, bundles, fields). This
package only reads it and rewrites the ``description`` of fields that
already exist; it never creates or deletes entries.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple


class DescriptionSaveError(RuntimeError):
    """Raised when the store cannot persist a description."""


@dataclass
class EntityTypeInfo:
    """An entity type known to the store."""
    entity_type: str
    label: str
    fieldable: bool = True


@dataclass
class BundleDescription:
    """
    A bundle (e.g. a content type) and its description.

    ``entity_type`` is the content entity type the bundle belongs to
    ("node"); ``bundle_entity_type`` is the config entity type that defines
    it ("node_type").
    """
    entity_type: str
    bundle_entity_type: str
    bundle_id: str
    label: str
    description: str = ""


@dataclass
class FieldDescription:
    """
    A field attached to a bundle, identified by (entity_type, bundle_id, field_id).

    ``target_bundle`` is empty for base fields shared by every bundle of the
    entity type; listings only include fields with a target bundle.
    """
    entity_type: str
    bundle_id: str
    field_id: str
    description: str = ""
    label: str = ""
    target_bundle: Optional[str] = None

    @property
    def key(self) -> Tuple[str, str, str]:
        return (self.entity_type, self.bundle_id, self.field_id)


class DescriptionStore:
    """
    Abstract description store interface.

    Implement this interface with your actual backend (see PostgresClient).
    Each save must be independent and immediately visible.
    """

    def list_entity_types(self) -> List[EntityTypeInfo]:
        """
        List fieldable entity types.

        Returns:
            EntityTypeInfo list, ordered by entity type ID
        """
        raise NotImplementedError

    def list_bundles(self, entity_type: str) -> List[BundleDescription]:
        """
        List the bundles of a content entity type.

        Args:
            entity_type: Content entity type ID (e.g. "node")

        Returns:
            BundleDescription list, ordered by bundle ID
        """
        raise NotImplementedError

    def list_bundle_configs(self, bundle_entity_type: str) -> List[BundleDescription]:
        """
        List the bundles defined by a bundle entity type.

        Args:
            bundle_entity_type: Bundle config entity type ID (e.g. "node_type")

        Returns:
            BundleDescription list, ordered by bundle ID (empty if unknown)
        """
        raise NotImplementedError

    def list_fields(self, entity_type: str, bundle_id: str) -> List[FieldDescription]:
        """
        List field definitions of a bundle, base fields included.

        Args:
            entity_type: Content entity type ID
            bundle_id: Bundle machine ID

        Returns:
            FieldDescription list, ordered by field ID
        """
        raise NotImplementedError

    def find_field(
        self,
        entity_type: str,
        bundle_id: str,
        field_id: str
    ) -> Optional[FieldDescription]:
        """
        Load a field configuration by its composite key.

        Returns:
            FieldDescription, or None if no such field exists
        """
        raise NotImplementedError

    def save_field_description(self, field: FieldDescription) -> None:
        """
        Persist ``field.description`` for an existing field.

        Raises:
            DescriptionSaveError: If the write fails or the field no longer exists
        """
        raise NotImplementedError

    def close(self) -> None:
        """Release backend resources."""
        pass
