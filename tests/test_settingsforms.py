import os

import pytest

from katvan.settings import Settings
from katvan.settingsforms import (
    AllowedPaths,
    CompilerSettings,
    cache_size_text,
    font_size_choices,
    format_data_size,
)
from katvan.utils import LRI_MARK, PDI_MARK


def _lookup(table):
    return lambda family: table.get(family, [])


def test_font_sizes_for_known_family():
    values, index = font_size_choices("Mono", _lookup({"Mono": [8, 10, 12]}), [6, 7], "10")
    assert values == ["8", "10", "12"]
    assert index == 1


def test_font_sizes_fall_back_to_family_without_style():
    values, index = font_size_choices(
        "Mono Bold", _lookup({"Mono": [9, 11]}), [6, 7], "13"
    )
    assert values == ["9", "11"]
    assert index is None


def test_font_sizes_fall_back_to_standard():
    values, index = font_size_choices("Unknown", _lookup({}), [6, 7, 8], "7")
    assert values == ["6", "7", "8"]
    assert index == 1


def test_font_sizes_no_split_on_leading_space_only():
    calls = []

    def lookup(family):
        calls.append(family)
        return []

    values, _ = font_size_choices("Single", lookup, [5], "")
    assert calls == ["Single"]
    assert values == ["5"]


def test_format_data_size_bytes():
    assert format_data_size(0) == "0 bytes"
    assert format_data_size(1023) == "1023 bytes"


def test_format_data_size_kib():
    assert format_data_size(1024) == "1.00 KiB"


def test_format_data_size_units_increase():
    assert format_data_size(5 * 1024 * 1024).endswith("MiB")
    assert format_data_size(3 * 1024 ** 3).endswith("GiB")


def test_cache_size_text_orders_arguments():
    text = cache_size_text(3, 7, 1024)
    assert text == f"7 distinct versions of 3 packages (total {format_data_size(1024)})"


def test_compiler_settings_round_trip(tmp_path):
    path = tmp_path / "s.json"
    settings = Settings(path)
    CompilerSettings(True, ["/a", "/b"]).save(settings)
    loaded = CompilerSettings.load(Settings(path))
    assert loaded == CompilerSettings(True, ["/a", "/b"])


def test_compiler_settings_defaults():
    loaded = CompilerSettings.load(Settings())
    assert loaded.allow_preview_packages is False
    assert loaded.allowed_paths == []


def test_allowed_paths_add_skips_duplicates():
    paths = AllowedPaths(["/x"])
    assert paths.add("/y") is True
    assert paths.add("/x") is False
    assert paths.add("") is False
    assert paths.paths == ["/x", "/y"]


def test_allowed_paths_remove():
    paths = AllowedPaths(["/x", "/y", "/z"])
    assert paths.remove(1) is True
    assert paths.paths == ["/x", "/z"]
    assert paths.remove(5) is False
    assert paths.remove(None) is False
    assert len(paths) == 2


def test_allowed_paths_display_entries():
    paths = AllowedPaths(["/x/y"])
    [(display, tip)] = paths.display_entries(right_to_left=True)
    assert tip == "/x/y"
    assert display == LRI_MARK + "/x/y".replace("/", os.sep) + PDI_MARK
    [(plain, _)] = paths.display_entries()
    assert plain == "/x/y".replace("/", os.sep)


@pytest.mark.parametrize("size", [1, 1000, 2048, 10 ** 9])
def test_format_data_size_number_prefix(size):
    number, unit = format_data_size(size).split(" ")
    assert unit in {"bytes", "KiB", "MiB", "GiB"}
    assert float(number) > 0