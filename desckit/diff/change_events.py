"""
Change classification for description imports.

Decides, for one field, what an imported description does to the stored one:

    existing   new        outcome
    --------   --------   ---------------------
    empty      empty      no change
    empty      text       DESCRIPTION_ADDED
    text       empty      DESCRIPTION_DELETED
    text       same text  no change
    text       other      DESCRIPTION_MODIFIED

Comparison is exact (no whitespace or case folding). Rules are ordered and
the first match wins, so the table above is the whole contract.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Dict, Optional, Tuple


class ChangeEventType(Enum):
    """Kinds of description change an import can apply."""
    DESCRIPTION_ADDED = auto()     # Stored description empty, new one given
    DESCRIPTION_MODIFIED = auto()  # Both present and different
    DESCRIPTION_DELETED = auto()   # Stored description present, new one empty


@dataclass
class DescriptionDelta:
    """
    Facts about one stored/imported description pair.

    Classification rules interpret these facts; the delta itself decides
    nothing.
    """
    existing: str
    new: str

    @property
    def had_description(self) -> bool:
        return bool(self.existing)

    @property
    def has_description(self) -> bool:
        return bool(self.new)

    @property
    def differs(self) -> bool:
        return self.existing != self.new


@dataclass
class ChangeEvent:
    """
    One applied description change.

    Carries the field key and the from/to values as evidence.
    """
    entity_type: str
    bundle_id: str
    field_id: str
    event_type: ChangeEventType
    from_value: str
    to_value: str

    @property
    def key(self) -> Tuple[str, str, str]:
        return (self.entity_type, self.bundle_id, self.field_id)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary for JSON output."""
        return {
            "entity_type": self.entity_type,
            "bundle_id": self.bundle_id,
            "field_id": self.field_id,
            "event_type": self.event_type.name,
            "from_value": self.from_value,
            "to_value": self.to_value,
        }


# =============================================================================
# CLASSIFICATION RULES
# =============================================================================
# Each rule is a function: (DescriptionDelta) -> Optional[ChangeEventType]

def _classify_added(delta: DescriptionDelta) -> Optional[ChangeEventType]:
    """Rule: nothing stored, text imported."""
    if not delta.had_description and delta.has_description:
        return ChangeEventType.DESCRIPTION_ADDED
    return None


def _classify_deleted(delta: DescriptionDelta) -> Optional[ChangeEventType]:
    """Rule: text stored, empty value imported."""
    if delta.had_description and not delta.has_description:
        return ChangeEventType.DESCRIPTION_DELETED
    return None


def _classify_modified(delta: DescriptionDelta) -> Optional[ChangeEventType]:
    """Rule: text stored, different text imported."""
    if delta.had_description and delta.has_description and delta.differs:
        return ChangeEventType.DESCRIPTION_MODIFIED
    return None


# Order matters - first match wins
CLASSIFICATION_RULES = [
    _classify_added,
    _classify_deleted,
    _classify_modified,
]


def classify_change(existing: Optional[str], new: Optional[str]) -> Optional[ChangeEventType]:
    """
    Classify an imported description against the stored one.

    Args:
        existing: Description currently stored (None is treated as empty)
        new: Description from the import record (None is treated as empty)

    Returns:
        The ChangeEventType to apply, or None when nothing should be written
    """
    delta = DescriptionDelta(existing=existing or "", new=new or "")

    for rule in CLASSIFICATION_RULES:
        event_type = rule(delta)
        if event_type is not None:
            return event_type

    # Both empty, or identical text
    return None
