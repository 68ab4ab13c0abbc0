from fastapi import APIRouter
from choirbook_core import sample_data

router = APIRouter(prefix="/reference", tags=["reference"])


@router.get("/teams")
def list_teams():
    return sample_data.SAMPLE_CHOIR_TEAMS


@router.get("/venues")
def list_venues():
    return sample_data.SAMPLE_VENUES


@router.get("/songs")
def list_songs():
    return sample_data.SAMPLE_SONGS
