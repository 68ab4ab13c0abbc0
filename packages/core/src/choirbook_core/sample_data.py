"""Static reference data and sample schedule served by the API."""
from choirbook_core.models import ChoirTeam, Performance, Practice, Song, Venue

SAMPLE_CHOIR_TEAMS = [
    ChoirTeam(id="1", name="合唱団001", abbreviation="団001", color="#3B82F6"),
    ChoirTeam(id="2", name="合唱団002", abbreviation="団002", color="#EF4444"),
    ChoirTeam(id="3", name="合唱団003", abbreviation="団003", color="#10B981"),
]

SAMPLE_VENUES = [
    Venue(id="1", name="サンプル会館A", abbreviation="会館A", address="サンプル市サンプル区1-1-1"),
    Venue(id="2", name="サンプル文化センターB", abbreviation="文化B", address="サンプル市サンプル区2-2-2"),
    Venue(id="3", name="サンプル体育館C", abbreviation="体育C", address="サンプル市サンプル区3-3-3"),
    Venue(id="4", name="サンプルホールD", abbreviation="ホールD", address="サンプル市サンプル区4-4-4"),
]

SAMPLE_SONGS = [
    Song(id="1", title="サンプル楽曲A", composer="作曲者A", lyricist="作詞者A"),
    Song(id="2", title="サンプル楽曲B", composer="作曲者B"),
    Song(id="3", title="サンプル楽曲C", composer="作曲者C", lyricist="作詞者C"),
    Song(id="4", title="サンプル楽曲D", composer="作曲者D"),
    Song(id="5", title="サンプル楽曲E", composer="作曲者E", lyricist="作詞者E"),
    Song(id="6", title="サンプル楽曲F", composer="作曲者F"),
]

SAMPLE_PRACTICES = [
    Practice(id="1", date="2025-08-07", start_time="19:00", end_time="21:00",
             choir_team_id="1", venue_id="1", song_ids=("1", "2"), notes="サンプル練習メモ1"),
    Practice(id="2", date="2025-08-08", start_time="18:30", end_time="20:30",
             choir_team_id="2", venue_id="2", song_ids=("3", "4"), notes="サンプル練習メモ2"),
    Practice(id="3", date="2025-08-08", start_time="19:00", end_time="21:00",
             choir_team_id="3", venue_id="4", song_ids=("5", "6"), notes="サンプル練習メモ3"),
    Practice(id="4", date="2025-08-10", start_time="14:00", end_time="17:00",
             choir_team_id="1", venue_id="3", song_ids=("1", "2", "4"), notes="サンプル練習メモ4"),
    Practice(id="5", date="2025-08-15", start_time="18:00", end_time="20:00",
             choir_team_id="2", venue_id="1", song_ids=("3",), notes="サンプル練習メモ5"),
    Practice(id="6", date="2025-08-20", start_time="19:00", end_time="21:00",
             choir_team_id="1", venue_id="2", song_ids=("1", "6"), notes="サンプル練習メモ6"),
    Practice(id="7", date="2025-08-20", start_time="10:00", end_time="12:00",
             choir_team_id="3", venue_id="4", song_ids=("5",), notes="サンプル練習メモ7"),
    Practice(id="8", date="2025-08-25", start_time="15:00", end_time="18:00",
             choir_team_id="2", venue_id="3", song_ids=("3", "4"), notes="サンプル練習メモ8"),
]

SAMPLE_PERFORMANCES = [
    Performance(id="1", date="2025-08-10", start_time="18:00", end_time="20:00",
                choir_team_id="1", venue_id="4", title="サンプル定期演奏会", song_ids=("1", "2", "4")),
    Performance(id="2", date="2025-08-31", start_time="14:00", end_time="16:00",
                choir_team_id="3", venue_id="4", title="サンプル合同コンサート", song_ids=("5", "6"),
                notes="サンプル本番メモ"),
]

__all__ = [
    "SAMPLE_CHOIR_TEAMS",
    "SAMPLE_VENUES",
    "SAMPLE_SONGS",
    "SAMPLE_PRACTICES",
    "SAMPLE_PERFORMANCES",
]
