# katvan

The non-graphical core of a Typst editor shell that handles right-to-left text well.
It keeps the editor's state and bookkeeping apart from any GUI toolkit, so each
piece can be used and tested by itself:

- `katvan.settings` – a small persistent key/value store (`Settings`). Keys are
  `/`-separated. With a path, every change is written to a JSON file at once.
  Without one, the values live in memory only.
- `katvan.recentfiles` – the most-recently-used file list (`RecentFiles`). It keeps at
  most ten entries, newest first, and `menu_entries()` describes the menu.
- `katvan.backup` – periodic backups of unsaved text to a hidden `.katvan_*.typ`
  file (`BackupHandler`). `reset_source_file()` returns the backup file that an
  earlier session left behind without closing cleanly.
- `katvan.search` – find and replace over plain text (`SearchSession`, `SearchOptions`,
  `MatchType`). It has normal, whole-word and regular-expression modes,
  case-sensitive or not, can search within the selection, and replacements may
  use `\1`-style back references (`expand_replacement`).
- `katvan.previewer` – the preview zoom state (`PreviewState`, `ZoomMode`,
  `round_factor`, `zoom_text`).
- `katvan.settingsforms` – compiler settings (`CompilerSettings`), the allowed paths
  list (`AllowedPaths`), font size choices (`font_size_choices`) and the
  download cache size text (`cache_size_text`, `format_data_size`).
- `katvan.status` – status bar text for compilation status, cursor position, font
  zoom and cursor movement style, and the choice of spelling dictionary.
- `katvan.compileroutput` – column widths for the diagnostics list (`column_widths`).
- `katvan.infobar` – the notification strip state with its buttons (`InfoBar`).
- `katvan.utils` – path display formatting for right-to-left layouts
  (`format_file_path`), the application directory (`application_dir`) and the
  suggested PDF export path (`pdf_export_default_path`).

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from katvan.search import SearchOptions, SearchSession, MatchType

session = SearchSession("one two one", SearchOptions(match_type=MatchType.WHOLE_WORDS))
count = session.replace_all("one", "three")
print(count, session.text)   # 2 three two three
```

## What this package does not do

This is a library only. It has no command to start an editor and no windows or
widgets. It does not open, save or watch document files for you. It compiles
nothing, and it does not restore a leftover backup into a document.
`BackupHandler` finds and writes backups, but comparing a backup with the saved
file and asking whether to recover it is up to the caller.