import sys, os, tempfile, pytest

# Always force tests to use an isolated SQLite database file under a temp dir.
# Do this before importing any choirbook_core modules (especially choirbook_core.db).
if "CHOIRBOOK_DB_URL" not in os.environ and "CHOIRBOOK_DATABASE_URL" not in os.environ:
    _test_db_dir = tempfile.mkdtemp(prefix="choirbook_test_db_")
    os.environ["CHOIRBOOK_DB_URL"] = f"sqlite:///{os.path.join(_test_db_dir, 'test_choirbook.db')}"
# Ensure core and api src roots are on sys.path for imports
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
for _src in (ROOT, os.path.join(ROOT, 'packages', 'core', 'src'), os.path.join(ROOT, 'apps', 'api', 'src')):
    if _src not in sys.path:
        sys.path.insert(0, _src)

from choirbook_core.models import ChoirTeam, Venue, Song, Practice, Performance


@pytest.fixture
def teams():
    return [
        ChoirTeam(id='1', name='テスト合唱団A', abbreviation='団A', color='#3B82F6'),
        ChoirTeam(id='2', name='テスト合唱団B', abbreviation='団B', color='#EF4444'),
    ]


@pytest.fixture
def venues():
    return [
        Venue(id='1', name='テスト会館A', abbreviation='会館A'),
        Venue(id='2', name='テスト会館B', abbreviation='会館B', address='テスト市テスト区1-1-1'),
    ]


@pytest.fixture
def songs():
    return [
        Song(id='1', title='テスト楽曲1', composer='作曲者1'),
        Song(id='2', title='テスト楽曲2'),
        Song(id='3', title='テスト楽曲3', composer='作曲者3', lyricist='作詞者3'),
    ]


def make_practice(pid, start='19:00', team='1', venue='1', date='2025-08-15', **kw):
    return Practice(id=pid, date=date, start_time=start, end_time=kw.pop('end', '21:00'),
                    choir_team_id=team, venue_id=venue, **kw)


def make_performance(pid, start='14:00', team='1', venue='1', date='2025-08-15', **kw):
    return Performance(id=pid, date=date, start_time=start, end_time=kw.pop('end', '16:00'),
                       choir_team_id=team, venue_id=venue, title=kw.pop('title', 'テストコンサート'), **kw)


@pytest.fixture
def clean_store():
    from choirbook_core.db import Base, SessionLocal, engine
    from choirbook_core.models import StoredBlob
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        session.query(StoredBlob).delete()
        session.commit()
    finally:
        session.close()
    yield


@pytest.fixture
def api_client(clean_store):
    from fastapi.testclient import TestClient
    from choirbook_api.main import app
    with TestClient(app) as client:
        yield client
