import os
from choirbook_core.config import Settings

def test_settings_repo_root_is_directory():
    s = Settings()
    root = s.repo_root()
    assert os.path.isdir(root)
    assert os.path.isfile(os.path.join(root, 'pyproject.toml'))


def test_effective_data_dir_resolves_relative_to_repo(tmp_path, monkeypatch):
    s = Settings(data_dir='data')
    monkeypatch.setattr(s, 'repo_root', lambda: str(tmp_path))
    assert s.effective_data_dir() == str(tmp_path / 'data')


def test_absolute_data_dir_is_kept(tmp_path):
    s = Settings(data_dir=str(tmp_path))
    assert s.effective_data_dir() == str(tmp_path)


def test_defaults():
    s = Settings()
    assert s.bookmark_storage_key == 'audioBookmarks'
    assert s.include_performances_in_filter in (True, False)


def test_load_backend_env(tmp_path, monkeypatch):
    env_dir = tmp_path / 'config' / 'env'
    env_dir.mkdir(parents=True)
    (env_dir / '.env.backend').write_text('CHOIRBOOK_TEST_MARKER=from-file\n', encoding='utf-8')
    monkeypatch.delenv('CHOIRBOOK_TEST_MARKER', raising=False)
    s = Settings()
    monkeypatch.setattr(s, 'repo_root', lambda: str(tmp_path))
    s.load_backend_env()
    assert os.environ['CHOIRBOOK_TEST_MARKER'] == 'from-file'
    monkeypatch.delenv('CHOIRBOOK_TEST_MARKER')


def test_new_settings_pick_up_backend_env_file(tmp_path, monkeypatch):
    env_dir = tmp_path / 'config' / 'env'
    env_dir.mkdir(parents=True)
    (env_dir / '.env.backend').write_text(
        'CHOIRBOOK_BOOKMARK_KEY=fromDotenv\nCHOIRBOOK_FILTER_PERFORMANCES=true\nCHOIRBOOK_API_PORT=9100\n',
        encoding='utf-8',
    )
    for name in ('CHOIRBOOK_BOOKMARK_KEY', 'CHOIRBOOK_FILTER_PERFORMANCES', 'CHOIRBOOK_API_PORT'):
        # set then delete so monkeypatch restores the variable as absent on teardown
        monkeypatch.setenv(name, 'placeholder')
        monkeypatch.delenv(name)
    loader = Settings()
    monkeypatch.setattr(loader, 'repo_root', lambda: str(tmp_path))
    loader.load_backend_env()
    fresh = Settings()
    assert fresh.bookmark_storage_key == 'fromDotenv'
    assert fresh.include_performances_in_filter is True
    assert fresh.api_port == 9100
