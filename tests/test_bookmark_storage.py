import json
from choirbook_core.db import SessionLocal
from choirbook_core.models import AudioBookmark, StoredBlob
from choirbook_core.storage import SqlBookmarkRepository


def _put_raw(key, value):
    session = SessionLocal()
    try:
        session.merge(StoredBlob(key=key, value=value))
        session.commit()
    finally:
        session.close()


def _get_raw(key):
    session = SessionLocal()
    try:
        blob = session.get(StoredBlob, key)
        return blob.value if blob else None
    finally:
        session.close()


def test_missing_key_loads_empty(clean_store):
    assert SqlBookmarkRepository().load() == []


def test_save_overwrites_whole_list(clean_store):
    repo = SqlBookmarkRepository()
    a = AudioBookmark(id='1', name='イントロ', start_time=0.0, end_time=12.5, file_name='song.mp3')
    b = AudioBookmark(id='2', name='サビ', start_time=60.0, end_time=75.0, file_name='song.mp3')
    repo.save([a, b])
    assert repo.load() == [a, b]
    repo.save([b])
    assert repo.load() == [b]
    stored = json.loads(_get_raw('audioBookmarks'))
    assert stored == [{'id': '2', 'name': 'サビ', 'startTime': 60.0, 'endTime': 75.0, 'fileName': 'song.mp3'}]


def test_corrupt_blob_is_cleared(clean_store):
    _put_raw('audioBookmarks', '{not json')
    repo = SqlBookmarkRepository()
    assert repo.load() == []
    assert _get_raw('audioBookmarks') is None


def test_wrong_shape_is_cleared(clean_store):
    _put_raw('audioBookmarks', json.dumps({'id': '1'}))
    assert SqlBookmarkRepository().load() == []
    _put_raw('audioBookmarks', json.dumps([{'name': 'no id'}]))
    assert SqlBookmarkRepository().load() == []
    assert _get_raw('audioBookmarks') is None


def test_point_bookmarks_from_older_records_load(clean_store):
    _put_raw('audioBookmarks', json.dumps([{'id': '9', 'name': '旧', 'time': 42.0, 'fileName': 'old.mp3'}]))
    (bookmark,) = SqlBookmarkRepository().load()
    assert bookmark.start_time == bookmark.end_time == 42.0
    assert bookmark.is_point


def test_keys_are_independent(clean_store):
    SqlBookmarkRepository(key='other').save(
        [AudioBookmark(id='1', name='x', start_time=0, end_time=2, file_name='a.mp3')]
    )
    assert SqlBookmarkRepository().load() == []
    assert len(SqlBookmarkRepository(key='other').load()) == 1
