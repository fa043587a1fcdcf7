"""Path formatting and location helpers used throughout the shell."""

from __future__ import annotations

import os
import sys
from pathlib import Path

LRI_MARK = "\u2066"
PDI_MARK = "\u2069"


def format_file_path(path: str, right_to_left: bool = False) -> str:
    """Format a path for display, isolating it as left-to-right in RTL layouts."""
    native = path.replace("/", os.sep)
    if right_to_left:
        return LRI_MARK + native + PDI_MARK
    return native


def application_dir(executable: str | None = None) -> tuple[str, bool]:
    """Return the application's directory and whether it counts as installed.

    On macOS the directory holding the application bundle is returned, and
    the application is installed when that is ``/Applications`` or
    ``~/Applications``. Elsewhere the executable's directory is returned and
    the application is never considered installed.
    """
    exe = Path(executable if executable is not None else sys.argv[0])
    exe_dir = exe.parent

    if sys.platform != "darwin":
        return str(exe_dir), False

    bundle = next((p for p in (exe, *exe.parents) if p.suffix == ".app"), None)
    app_dir = str(bundle.parent if bundle is not None else exe_dir)
    home_apps = str(Path.home() / "Applications")
    return app_dir, app_dir in ("/Applications", home_apps)


def pdf_export_default_path(source_file_path: str) -> str | None:
    """Suggest where to export a PDF for ``source_file_path``.

    The suggestion sits next to the source and is named after the part of
    the file name before its first dot. Returns None for an unsaved file.
    """
    if not source_file_path:
        return None
    source = Path(os.path.abspath(source_file_path))
    base_name = source.name.split(".", 1)[0]
    return str(source.parent / f"{base_name}.pdf")