"""Description change classification module."""

from .change_events import (
    classify_change,
    ChangeEventType,
    ChangeEvent,
    DescriptionDelta,
)

__all__ = [
    "classify_change",
    "ChangeEventType",
    "ChangeEvent",
    "DescriptionDelta",
]
