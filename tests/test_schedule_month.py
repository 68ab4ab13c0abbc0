from choirbook_core.classifier import DayCase
from choirbook_core.schedule import event_detail, filter_by_teams, month_grid, month_layouts, songs_for
from conftest import make_practice, make_performance


def test_month_grid_august_2025_starts_on_friday():
    grid = month_grid(2025, 8)
    assert grid[:5] == [None] * 5
    assert grid[5] == 1
    assert grid[-1] == 31
    assert len([d for d in grid if d]) == 31


def test_month_grid_sunday_start_has_no_blanks():
    # 2025-06-01 is a Sunday
    assert month_grid(2025, 6)[0] == 1
    assert len(month_grid(2024, 2)) == 4 + 29


def test_filter_by_teams():
    practices = [make_practice('1', team='1'), make_practice('2', team='2')]
    assert [p.id for p in filter_by_teams(practices, ['2'])] == ['2']
    assert filter_by_teams(practices, []) == []
    assert filter_by_teams(practices, None) == practices


def test_month_layouts_one_entry_per_day(teams, venues):
    practices = [
        make_practice('1', date='2025-08-07'),
        make_practice('2', date='2025-08-08', start='10:00'),
        make_practice('3', date='2025-08-08', start='19:00', team='2'),
    ]
    performances = [make_performance('p1', date='2025-08-10')]
    layouts = month_layouts(2025, 8, practices, performances, teams, venues)
    assert len(layouts) == 31
    by_date = {l.date: l for l in layouts}
    assert by_date['2025-08-07'].case is DayCase.SINGLE_PRACTICE
    assert by_date['2025-08-08'].case is DayCase.MULTIPLE_PRACTICES_ONLY
    assert by_date['2025-08-10'].case is DayCase.SINGLE_PERFORMANCE
    assert by_date['2025-08-01'].case is DayCase.EMPTY


def test_team_filter_leaves_performances_unless_enabled(teams, venues):
    practices = [make_practice('1', date='2025-08-07', team='2')]
    performances = [make_performance('p1', date='2025-08-10', team='2')]
    layouts = {l.date: l for l in month_layouts(2025, 8, practices, performances, teams, venues, team_ids=['1'])}
    assert layouts['2025-08-07'].case is DayCase.EMPTY
    assert layouts['2025-08-10'].case is DayCase.SINGLE_PERFORMANCE
    layouts = {l.date: l for l in month_layouts(
        2025, 8, practices, performances, teams, venues, team_ids=['1'], include_performances_in_filter=True,
    )}
    assert layouts['2025-08-10'].case is DayCase.EMPTY


def test_songs_for_keeps_song_list_order_and_drops_unknown(songs):
    practice = make_practice('1', song_ids=('3', '1', '99'))
    assert [s.id for s in songs_for(practice, songs)] == ['1', '3']


def test_event_detail(teams, venues, songs):
    performance = make_performance('p1', team='2', venue='2', song_ids=('2',))
    detail = event_detail(performance, teams, venues, songs)
    assert detail.is_performance
    assert detail.team is teams[1] and detail.venue is venues[1]
    assert [s.title for s in detail.songs] == ['テスト楽曲2']
    assert event_detail(make_practice('1', venue='nope'), teams, venues, songs) is None
