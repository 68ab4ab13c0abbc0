"""Month calendar assembly: grid, per-day lookup, team filter, event detail."""
from __future__ import annotations

import calendar
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Set, Tuple, TypeVar

from choirbook_core.classifier import DayLayout, classify_day
from choirbook_core.models import ChoirTeam, Event, Performance, Practice, Song, Venue

logger = logging.getLogger("choirbook_core.schedule")

E = TypeVar("E", Practice, Performance)


@dataclass(frozen=True)
class EventDetail:
    """Resolved data shown when a single practice or performance is opened."""

    event: Event
    team: ChoirTeam
    venue: Venue
    songs: Tuple[Song, ...]

    @property
    def is_performance(self) -> bool:
        return isinstance(self.event, Performance)


def month_grid(year: int, month: int) -> List[Optional[int]]:
    """Cells of a Sunday-first month view: leading ``None`` blanks, then 1..N."""
    first_weekday, days_in_month = calendar.monthrange(year, month)
    # calendar counts Monday as 0; the grid starts on Sunday
    leading = (first_weekday + 1) % 7
    return [None] * leading + list(range(1, days_in_month + 1))


def date_key(year: int, month: int, day: int) -> str:
    return f"{year:04d}-{month:02d}-{day:02d}"


def events_on(date: str, events: Iterable[E]) -> List[E]:
    return [e for e in events if e.date == date]


def filter_by_teams(events: Iterable[E], team_ids: Optional[Iterable[str]]) -> List[E]:
    """Keep events of the selected teams; ``None`` means no filter."""
    if team_ids is None:
        return list(events)
    selected: Set[str] = set(team_ids)
    return [e for e in events if e.choir_team_id in selected]


def month_layouts(
    year: int,
    month: int,
    practices: Sequence[Practice],
    performances: Sequence[Performance],
    choir_teams: Sequence[ChoirTeam],
    venues: Sequence[Venue],
    team_ids: Optional[Iterable[str]] = None,
    include_performances_in_filter: bool = False,
) -> List[DayLayout]:
    """Classify every day of the month after applying the team filter.

    Performances are only filtered by team when
    ``include_performances_in_filter`` is set.
    """
    if team_ids is not None:
        team_ids = list(team_ids)
    shown_practices = filter_by_teams(practices, team_ids)
    shown_performances = filter_by_teams(performances, team_ids) if include_performances_in_filter else list(performances)

    layouts = []
    for day in month_grid(year, month):
        if day is None:
            continue
        key = date_key(year, month, day)
        layouts.append(classify_day(
            key,
            events_on(key, shown_practices),
            events_on(key, shown_performances),
            choir_teams,
            venues,
        ))
    logger.debug(
        "schedule.month %04d-%02d practices=%d performances=%d",
        year, month, len(shown_practices), len(shown_performances),
    )
    return layouts


def songs_for(event: Event, songs: Iterable[Song]) -> List[Song]:
    """Songs referenced by ``event`` in song-list order; unknown ids dropped."""
    wanted = set(event.song_ids)
    return [s for s in songs if s.id in wanted]


def event_detail(
    event: Event,
    choir_teams: Iterable[ChoirTeam],
    venues: Iterable[Venue],
    songs: Iterable[Song],
) -> Optional[EventDetail]:
    team = next((t for t in choir_teams if t.id == event.choir_team_id), None)
    venue = next((v for v in venues if v.id == event.venue_id), None)
    if team is None or venue is None:
        return None
    return EventDetail(event=event, team=team, venue=venue, songs=tuple(songs_for(event, songs)))


__all__ = [
    "EventDetail",
    "month_grid",
    "date_key",
    "events_on",
    "filter_by_teams",
    "month_layouts",
    "songs_for",
    "event_detail",
]
