import pytest

from katvan.recentfiles import MAX_RECENT_FILES, SETTING_RECENT_FILES, RecentFiles
from katvan.settings import Settings
from katvan.utils import format_file_path


@pytest.fixture
def settings():
    return Settings()


def test_add_recent_puts_newest_first(settings):
    recents = RecentFiles(settings)
    recents.add_recent("/a.typ")
    recents.add_recent("/b.typ")
    assert recents.files == ["/b.typ", "/a.typ"]


def test_add_recent_moves_existing_to_front(settings):
    recents = RecentFiles(settings)
    for name in ("/a.typ", "/b.typ", "/c.typ"):
        recents.add_recent(name)
    recents.add_recent("/a.typ")
    assert recents.files == ["/a.typ", "/c.typ", "/b.typ"]


def test_list_is_capped(settings):
    recents = RecentFiles(settings)
    paths = [f"/doc{i}.typ" for i in range(MAX_RECENT_FILES + 3)]
    for path in paths:
        recents.add_recent(path)
    assert len(recents.files) == MAX_RECENT_FILES
    assert recents.files == list(reversed(paths))[:MAX_RECENT_FILES]


def test_changes_are_saved_to_settings(settings):
    recents = RecentFiles(settings)
    recents.add_recent("/a.typ")
    assert settings.value(SETTING_RECENT_FILES) == ["/a.typ"]


def test_restore_recents(tmp_path):
    path = tmp_path / "s.json"
    RecentFiles(Settings(path)).add_recent("/x.typ")
    restored = RecentFiles(Settings(path))
    restored.restore_recents()
    assert restored.files == ["/x.typ"]


def test_restore_without_setting_keeps_list(settings):
    recents = RecentFiles(settings)
    recents.restore_recents()
    assert recents.files == []


def test_remove_file(settings):
    recents = RecentFiles(settings)
    recents.add_recent("/a.typ")
    recents.add_recent("/b.typ")
    recents.remove_file("/a.typ")
    assert recents.files == ["/b.typ"]
    assert settings.value(SETTING_RECENT_FILES) == ["/b.typ"]


def test_remove_unknown_file_does_not_touch_settings(settings):
    recents = RecentFiles(settings)
    recents.remove_file("/nothing.typ")
    assert not settings.contains(SETTING_RECENT_FILES)


def test_clear(settings):
    recents = RecentFiles(settings)
    recents.add_recent("/a.typ")
    recents.clear()
    assert recents.files == []
    assert settings.value(SETTING_RECENT_FILES) == []


def test_menu_entries_with_files(settings):
    recents = RecentFiles(settings)
    recents.add_recent("dir/a.typ")
    entries = recents.menu_entries()
    assert [e.file_path for e in entries] == ["dir/a.typ", None, None]
    assert entries[0].label == format_file_path("dir/a.typ")
    assert entries[1].separator is True
    assert entries[2].label == "Clear"
    assert entries[2].enabled is True


def test_menu_entries_empty(settings):
    entries = RecentFiles(settings).menu_entries()
    assert len(entries) == 1
    assert entries[0].label == "Clear"
    assert entries[0].enabled is False


def test_menu_entries_right_to_left(settings):
    recents = RecentFiles(settings)
    recents.right_to_left = True
    recents.add_recent("a.typ")
    assert recents.menu_entries()[0].label == format_file_path("a.typ", True)


def test_select_invokes_callback(settings):
    selected = []
    recents = RecentFiles(settings, selected.append)
    recents.select("/chosen.typ")
    assert selected == ["/chosen.typ"]