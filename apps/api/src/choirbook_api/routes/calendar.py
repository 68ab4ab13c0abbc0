from fastapi import APIRouter, HTTPException, Query
import logging
from datetime import datetime
from typing import List, Optional
from choirbook_core import sample_data
from choirbook_core.classifier import classify_day
from choirbook_core.config import Settings
from choirbook_core.schedule import event_detail, events_on, filter_by_teams, month_grid, month_layouts

router = APIRouter(prefix="/calendar", tags=["calendar"])
log = logging.getLogger("choirbook_api")
settings = Settings()


def _filter_flag(include_performances: Optional[bool]) -> bool:
    if include_performances is None:
        return settings.include_performances_in_filter
    return include_performances


def _check_date(value: str) -> str:
    try:
        datetime.strptime(value, "%Y-%m-%d")
        if len(value) != 10:
            raise ValueError(value)
    except ValueError:
        raise HTTPException(status_code=400, detail="Date must be YYYY-MM-DD")
    return value


@router.get("/day/{date}")
def get_day(
    date: str,
    team_ids: Optional[List[str]] = Query(None),
    include_performances: Optional[bool] = None,
):
    _check_date(date)
    practices = filter_by_teams(events_on(date, sample_data.SAMPLE_PRACTICES), team_ids)
    performances = events_on(date, sample_data.SAMPLE_PERFORMANCES)
    if _filter_flag(include_performances):
        performances = filter_by_teams(performances, team_ids)
    return classify_day(date, practices, performances, sample_data.SAMPLE_CHOIR_TEAMS, sample_data.SAMPLE_VENUES)


@router.get("/day/{date}/practices")
def get_day_practices(date: str, team_ids: Optional[List[str]] = Query(None)):
    """Practice list for one day, as opened from a summary block."""
    _check_date(date)
    practices = filter_by_teams(events_on(date, sample_data.SAMPLE_PRACTICES), team_ids)
    details = [
        event_detail(p, sample_data.SAMPLE_CHOIR_TEAMS, sample_data.SAMPLE_VENUES, sample_data.SAMPLE_SONGS)
        for p in practices
    ]
    return {"date": date, "practices": [d for d in details if d is not None]}


def _detail_or_404(events, event_id: str, label: str):
    event = next((e for e in events if e.id == event_id), None)
    detail = event and event_detail(
        event, sample_data.SAMPLE_CHOIR_TEAMS, sample_data.SAMPLE_VENUES, sample_data.SAMPLE_SONGS
    )
    if not detail:
        log.warning("calendar.detail not_found %s id=%s", label, event_id)
        raise HTTPException(status_code=404, detail=f"{label.capitalize()} not found")
    return {
        "event": detail.event,
        "team": detail.team,
        "venue": detail.venue,
        "songs": detail.songs,
        "is_performance": detail.is_performance,
    }


@router.get("/practices/{practice_id}")
def get_practice(practice_id: str):
    return _detail_or_404(sample_data.SAMPLE_PRACTICES, practice_id, "practice")


@router.get("/performances/{performance_id}")
def get_performance(performance_id: str):
    return _detail_or_404(sample_data.SAMPLE_PERFORMANCES, performance_id, "performance")


@router.get("/{year}/{month}")
def get_month(
    year: int,
    month: int,
    team_ids: Optional[List[str]] = Query(None),
    include_performances: Optional[bool] = None,
):
    if not (1 <= month <= 12):
        raise HTTPException(status_code=400, detail="Month must be 1-12")
    if not (1 <= year <= 9999):
        raise HTTPException(status_code=400, detail="Year out of range")
    days = month_layouts(
        year,
        month,
        sample_data.SAMPLE_PRACTICES,
        sample_data.SAMPLE_PERFORMANCES,
        sample_data.SAMPLE_CHOIR_TEAMS,
        sample_data.SAMPLE_VENUES,
        team_ids=team_ids,
        include_performances_in_filter=_filter_flag(include_performances),
    )
    log.info("calendar.month %04d-%02d teams=%s", year, month, ",".join(team_ids) if team_ids else "*")
    return {"year": year, "month": month, "grid": month_grid(year, month), "days": days}
