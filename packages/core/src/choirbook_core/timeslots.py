"""Daily time slots used to group same-day practices for compact display."""
from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, List

from choirbook_core.models import Practice


class TimeSlot(Enum):
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    OTHER = "other"

    @property
    def label(self) -> str:
        return SLOT_LABELS[self]


# Display order for per-slot blocks.
SLOT_ORDER = (TimeSlot.MORNING, TimeSlot.AFTERNOON, TimeSlot.EVENING, TimeSlot.OTHER)

SLOT_LABELS = {
    TimeSlot.MORNING: "朝",
    TimeSlot.AFTERNOON: "昼",
    TimeSlot.EVENING: "夜",
    TimeSlot.OTHER: "他",
}


def bucket(start_time: str) -> TimeSlot:
    """Classify an ``HH:MM`` start time into its slot.

    morning [6,13), afternoon [13,17), evening [17,24), other [0,6).
    An unparseable hour falls into ``OTHER``.
    """
    try:
        hour = int(start_time.split(":", 1)[0])
    except (ValueError, AttributeError):
        return TimeSlot.OTHER
    if 6 <= hour < 13:
        return TimeSlot.MORNING
    if 13 <= hour < 17:
        return TimeSlot.AFTERNOON
    if 17 <= hour < 24:
        return TimeSlot.EVENING
    return TimeSlot.OTHER


def group_by_slot(practices: Iterable[Practice]) -> Dict[TimeSlot, List[Practice]]:
    groups: Dict[TimeSlot, List[Practice]] = {slot: [] for slot in SLOT_ORDER}
    for practice in practices:
        groups[bucket(practice.start_time)].append(practice)
    return groups


def has_overlap(practices: Iterable[Practice]) -> bool:
    return any(len(items) > 1 for items in group_by_slot(practices).values())


__all__ = ["TimeSlot", "SLOT_ORDER", "SLOT_LABELS", "bucket", "group_by_slot", "has_overlap"]
