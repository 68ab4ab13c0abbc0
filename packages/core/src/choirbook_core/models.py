"""Domain records and ORM models.

Reference data (teams, venues, songs) and scheduled events are plain frozen
dataclasses. Optional fields default to ``None`` and are never rendered when
absent. The only ORM table is the key-value blob store backing persisted
client state such as the audio bookmark list.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union

from sqlalchemy import Column, String, Text
from choirbook_core.db import Base


class StoredBlob(Base):
    __tablename__ = "stored_blobs"
    key = Column(String, primary_key=True)
    value = Column(Text)


@dataclass(frozen=True)
class ChoirTeam:
    id: str
    name: str
    abbreviation: str  # short label, at most 4 full-width characters
    color: str         # e.g. "#3B82F6"


@dataclass(frozen=True)
class Venue:
    id: str
    name: str
    abbreviation: str
    address: Optional[str] = None


@dataclass(frozen=True)
class Song:
    id: str
    title: str
    composer: Optional[str] = None
    lyricist: Optional[str] = None


@dataclass(frozen=True)
class Practice:
    id: str
    date: str        # "YYYY-MM-DD"
    start_time: str  # "HH:MM"
    end_time: str
    choir_team_id: str
    venue_id: str
    song_ids: Tuple[str, ...] = ()
    notes: Optional[str] = None


@dataclass(frozen=True)
class Performance:
    id: str
    date: str
    start_time: str
    end_time: str
    choir_team_id: str
    venue_id: str
    title: str
    song_ids: Tuple[str, ...] = ()
    notes: Optional[str] = None


Event = Union[Practice, Performance]


@dataclass(frozen=True)
class AudioBookmark:
    id: str
    name: str
    start_time: float  # seconds
    end_time: float
    file_name: str

    @property
    def is_point(self) -> bool:
        return self.end_time == self.start_time

    def to_record(self) -> Dict[str, Any]:
        """Serialized form stored under the bookmark key."""
        return {
            "id": self.id,
            "name": self.name,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "fileName": self.file_name,
        }

    @classmethod
    def from_record(cls, data: Dict[str, Any]) -> "AudioBookmark":
        """Build a bookmark from a stored record.

        Records written by the single-position player carry ``time`` instead
        of a range; they load as point bookmarks.
        """
        if "startTime" in data:
            start = float(data["startTime"])
            end = float(data.get("endTime", start))
        else:
            start = end = float(data["time"])
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            start_time=start,
            end_time=end,
            file_name=str(data["fileName"]),
        )


__all__ = [
    "StoredBlob",
    "ChoirTeam",
    "Venue",
    "Song",
    "Practice",
    "Performance",
    "Event",
    "AudioBookmark",
]
