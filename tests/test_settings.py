import pytest

from katvan.settings import Settings


def test_value_returns_default_when_missing():
    settings = Settings()
    assert settings.value("missing", "fallback") == "fallback"
    assert settings.value("missing") is None
    assert not settings.contains("missing")


def test_set_and_get_round_trip():
    settings = Settings()
    settings.set_value("editor/mode", "indent-mode smart;")
    assert settings.contains("editor/mode")
    assert settings.value("editor/mode") == "indent-mode smart;"


def test_persisted_across_instances(tmp_path):
    path = tmp_path / "conf" / "katvan.json"
    first = Settings(path)
    first.set_value("recentFiles", ["/a.typ", "/b.typ"])
    first.set_value("preview/zoom", 1.25)

    second = Settings(path)
    assert second.value("recentFiles") == ["/a.typ", "/b.typ"]
    assert second.value("preview/zoom") == 1.25


def test_remove_deletes_key_and_children(tmp_path):
    path = tmp_path / "s.json"
    settings = Settings(path)
    settings.set_value("compilertmp/x", "1")
    settings.set_value("compilertmp/y", "2")
    settings.set_value("compilertmpz", "3")
    settings.remove("compilertmp")
    assert settings.keys() == ["compilertmpz"]
    assert Settings(path).keys() == ["compilertmpz"]


def test_remove_single_key():
    settings = Settings()
    settings.set_value("a", 1)
    settings.set_value("b", 2)
    settings.remove("a")
    assert not settings.contains("a")
    assert settings.value("b") == 2


def test_stored_lists_are_not_aliased():
    settings = Settings()
    original = ["one"]
    settings.set_value("list", original)
    original.append("two")
    fetched = settings.value("list")
    fetched.append("three")
    assert settings.value("list") == ["one"]


def test_corrupt_file_is_treated_as_empty(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    settings = Settings(path)
    assert settings.keys() == []
    settings.set_value("k", True)
    assert Settings(path).value("k") is True


@pytest.mark.parametrize("value", [0, False, "", [], {"x": [1, 2]}])
def test_falsy_and_nested_values_survive(tmp_path, value):
    path = tmp_path / "v.json"
    Settings(path).set_value("key", value)
    reloaded = Settings(path)
    assert reloaded.contains("key")
    assert reloaded.value("key", "default") == value