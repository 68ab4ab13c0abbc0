"""Day event classifier.

Decides how one calendar day is drawn from the number of practices and
performances falling on it. Cases are checked in ``CASE_PRIORITY`` order and
the first match wins: full detail when it fits, counts when it does not.

Events whose team or venue cannot be resolved are dropped from the output
without error. The case is still decided from the raw counts.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple, TypeVar

from choirbook_core.models import ChoirTeam, Event, Performance, Practice, Venue
from choirbook_core.timeslots import SLOT_ORDER, TimeSlot, group_by_slot, has_overlap

logger = logging.getLogger("choirbook_core.classifier")

PERFORMANCE_PREFIX = "本番"


class DayCase(Enum):
    EMPTY = "empty"
    SINGLE_PRACTICE = "single_practice"
    SINGLE_PERFORMANCE = "single_performance"
    PERFORMANCE_PLUS_PRACTICES = "performance_plus_practices"
    MULTIPLE_PRACTICES_ONLY = "multiple_practices_only"
    MULTIPLE_MIXED = "multiple_mixed"


class ClickAction(Enum):
    PRACTICE_SELECTED = "practice-selected"
    PERFORMANCE_SELECTED = "performance-selected"
    MULTI_PRACTICE_SELECTED = "multi-practice-selected"


class BlockKind(Enum):
    PRACTICE = "practice"
    PERFORMANCE = "performance"
    SLOT = "slot"
    SUMMARY = "summary"


@dataclass(frozen=True)
class DayBlock:
    """One clickable block inside a calendar cell."""

    kind: BlockKind
    action: ClickAction
    lines: Tuple[str, ...]
    color: Optional[str] = None
    highlighted: bool = False
    event: Optional[Event] = None
    team: Optional[ChoirTeam] = None
    venue: Optional[Venue] = None
    slot: Optional[TimeSlot] = None
    practices: Tuple[Practice, ...] = ()


@dataclass(frozen=True)
class DayLayout:
    date: str
    case: DayCase
    blocks: Tuple[DayBlock, ...] = ()
    # Only meaningful for MULTIPLE_PRACTICES_ONLY
    slot_overlap: bool = False


# (case, predicate over (practice count, performance count)), checked in order.
CASE_PRIORITY: Tuple[Tuple[DayCase, Callable[[int, int], bool]], ...] = (
    (DayCase.EMPTY, lambda pr, pf: pr == 0 and pf == 0),
    (DayCase.SINGLE_PRACTICE, lambda pr, pf: pr == 1 and pf == 0),
    (DayCase.SINGLE_PERFORMANCE, lambda pr, pf: pr == 0 and pf == 1),
    (DayCase.PERFORMANCE_PLUS_PRACTICES, lambda pr, pf: pf == 1 and pr >= 1),
    (DayCase.MULTIPLE_PRACTICES_ONLY, lambda pr, pf: pr >= 2 and pf == 0),
    (DayCase.MULTIPLE_MIXED, lambda pr, pf: pr + pf > 1 and (pf > 1 or (pf >= 1 and pr > 1))),
)


def decide_case(practice_count: int, performance_count: int) -> DayCase:
    for case, matches in CASE_PRIORITY:
        if matches(practice_count, performance_count):
            return case
    # Every non-negative pair matches one of the rules above.
    raise ValueError(f"no day case for practices={practice_count} performances={performance_count}")


T = TypeVar("T", ChoirTeam, Venue)


def _index(items: Iterable[T]) -> Dict[str, T]:
    return {item.id: item for item in items}


def _resolve(event: Event, teams: Dict[str, ChoirTeam], venues: Dict[str, Venue]) -> Tuple[Optional[ChoirTeam], Optional[Venue]]:
    team = teams.get(event.choir_team_id)
    venue = venues.get(event.venue_id)
    if team is None or venue is None:
        logger.debug(
            "classifier.drop unresolved event=%s team=%s venue=%s",
            event.id, event.choir_team_id, event.venue_id,
        )
        return None, None
    return team, venue


def practice_count_label(count: int) -> str:
    return f"練習{count}件"


def mixed_summary_label(practice_count: int, performance_count: int) -> str:
    parts = []
    if practice_count > 0:
        parts.append(practice_count_label(practice_count))
    if performance_count > 0:
        parts.append(f"{PERFORMANCE_PREFIX}{performance_count}件")
    return " ".join(parts)


def _practice_block(practice: Practice, team: ChoirTeam, venue: Venue) -> DayBlock:
    return DayBlock(
        kind=BlockKind.PRACTICE,
        action=ClickAction.PRACTICE_SELECTED,
        lines=(practice.start_time, venue.abbreviation, team.abbreviation),
        color=team.color,
        event=practice,
        team=team,
        venue=venue,
    )


def _performance_block(performance: Performance, team: ChoirTeam, venue: Venue) -> DayBlock:
    return DayBlock(
        kind=BlockKind.PERFORMANCE,
        action=ClickAction.PERFORMANCE_SELECTED,
        lines=(f"{PERFORMANCE_PREFIX} {performance.start_time}", venue.abbreviation, team.abbreviation),
        color=team.color,
        highlighted=True,
        event=performance,
        team=team,
        venue=venue,
    )


def _summary_block(label: str, practices: Sequence[Practice]) -> DayBlock:
    return DayBlock(
        kind=BlockKind.SUMMARY,
        action=ClickAction.MULTI_PRACTICE_SELECTED,
        lines=(label,),
        practices=tuple(practices),
    )


def _slot_blocks(practices: Sequence[Practice], teams: Dict[str, ChoirTeam], venues: Dict[str, Venue]) -> List[DayBlock]:
    groups = group_by_slot(practices)
    blocks: List[DayBlock] = []
    for slot in SLOT_ORDER:
        if not groups[slot]:
            continue
        first = groups[slot][0]
        team, venue = _resolve(first, teams, venues)
        if team is None:
            continue
        blocks.append(DayBlock(
            kind=BlockKind.SLOT,
            action=ClickAction.PRACTICE_SELECTED,
            lines=(f"{slot.label}：{team.abbreviation}",),
            color=team.color,
            event=first,
            team=team,
            venue=venue,
            slot=slot,
        ))
    return blocks


def classify_day(
    date: str,
    practices: Sequence[Practice],
    performances: Sequence[Performance],
    choir_teams: Iterable[ChoirTeam],
    venues: Iterable[Venue],
) -> DayLayout:
    """Produce the rendering decision for one day.

    ``practices`` and ``performances`` must already be restricted to ``date``.
    """
    teams_by_id = _index(choir_teams)
    venues_by_id = _index(venues)
    practices = list(practices)
    performances = list(performances)
    case = decide_case(len(practices), len(performances))

    blocks: List[DayBlock] = []
    overlap = False
    if case is DayCase.SINGLE_PRACTICE:
        team, venue = _resolve(practices[0], teams_by_id, venues_by_id)
        if team is not None:
            blocks.append(_practice_block(practices[0], team, venue))
    elif case is DayCase.SINGLE_PERFORMANCE:
        team, venue = _resolve(performances[0], teams_by_id, venues_by_id)
        if team is not None:
            blocks.append(_performance_block(performances[0], team, venue))
    elif case is DayCase.PERFORMANCE_PLUS_PRACTICES:
        team, venue = _resolve(performances[0], teams_by_id, venues_by_id)
        if team is not None:
            blocks.append(_performance_block(performances[0], team, venue))
        blocks.append(_summary_block(practice_count_label(len(practices)), practices))
    elif case is DayCase.MULTIPLE_PRACTICES_ONLY:
        overlap = has_overlap(practices)
        if overlap:
            blocks.append(_summary_block(practice_count_label(len(practices)), practices))
        else:
            blocks.extend(_slot_blocks(practices, teams_by_id, venues_by_id))
    elif case is DayCase.MULTIPLE_MIXED:
        label = mixed_summary_label(len(practices), len(performances))
        blocks.append(_summary_block(label, practices))

    return DayLayout(date=date, case=case, blocks=tuple(blocks), slot_overlap=overlap)


__all__ = [
    "DayCase",
    "ClickAction",
    "BlockKind",
    "DayBlock",
    "DayLayout",
    "CASE_PRIORITY",
    "decide_case",
    "classify_day",
    "practice_count_label",
    "mixed_summary_label",
]
