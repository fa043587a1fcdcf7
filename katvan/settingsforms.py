"""State and helpers behind the editor and compiler settings forms."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable

from katvan.settings import Settings
from katvan.utils import format_file_path

SETTING_ALLOW_PREVIEW_PACKAGES = "compiler/allow-preview-packages"
SETTING_ALLOWED_PATHS = "compiler/allowed-paths"

_IEC_UNITS = ("bytes", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB")


def font_size_choices(
    family: str,
    point_sizes_lookup: Callable[[str], Iterable[int]],
    standard_sizes: Iterable[int],
    current_text: str = "",
) -> tuple[list[str], int | None]:
    """Offer font sizes for ``family`` and locate the current size among them.

    When the family has no sizes of its own, the part of its name before the
    last space is tried, since that may be a style folded into the name.
    Failing that, ``standard_sizes`` are used. Returns the size labels and
    the index of ``current_text`` among them, or None if it is absent.
    """
    sizes = list(point_sizes_lookup(family))
    if not sizes:
        pos = family.rfind(" ")
        if pos > 0:
            sizes = list(point_sizes_lookup(family[:pos].strip()))
    if not sizes:
        sizes = list(standard_sizes)

    values = [str(size) for size in sizes]
    current_index = None
    for index, value in enumerate(values):
        if value == current_text:
            current_index = index
    return values, current_index


def format_data_size(size: int) -> str:
    """Format a byte count with binary (IEC) units and two decimals."""
    power = abs(size).bit_length() - 1
    power = power // 10 if power > 0 else 0
    power = min(power, len(_IEC_UNITS) - 1)
    if power == 0:
        return f"{size} {_IEC_UNITS[0]}"
    precision = min(2, 3 * power)
    return f"{size / (1024 ** power):.{precision}f} {_IEC_UNITS[power]}"


def cache_size_text(num_packages: int, num_versions: int, total_size: int) -> str:
    """Describe the contents of the package download cache."""
    return (
        f"{num_versions} distinct versions of {num_packages} packages "
        f"(total {format_data_size(total_size)})"
    )


@dataclass
class CompilerSettings:
    """Compiler options edited on the compiler tab."""

    allow_preview_packages: bool = False
    allowed_paths: list[str] = field(default_factory=list)

    @classmethod
    def load(cls, settings: Settings) -> CompilerSettings:
        paths = settings.value(SETTING_ALLOWED_PATHS, []) or []
        return cls(
            allow_preview_packages=bool(settings.value(SETTING_ALLOW_PREVIEW_PACKAGES, False)),
            allowed_paths=[str(p) for p in paths],
        )

    def save(self, settings: Settings) -> None:
        settings.set_value(SETTING_ALLOW_PREVIEW_PACKAGES, self.allow_preview_packages)
        settings.set_value(SETTING_ALLOWED_PATHS, list(self.allowed_paths))


class AllowedPaths:
    """Ordered list of extra directories the compiler may read from."""

    def __init__(self, paths: Iterable[str] = ()) -> None:
        self._paths = list(paths)

    @property
    def paths(self) -> list[str]:
        return list(self._paths)

    def __len__(self) -> int:
        return len(self._paths)

    def add(self, path: str) -> bool:
        """Append ``path`` unless it is empty or already listed."""
        if not path or path in self._paths:
            return False
        self._paths.append(path)
        return True

    def remove(self, index: int | None) -> bool:
        """Remove the entry at ``index``; nothing happens for an invalid index."""
        if index is None or not 0 <= index < len(self._paths):
            return False
        del self._paths[index]
        return True

    def display_entries(self, right_to_left: bool = False) -> list[tuple[str, str]]:
        """Pairs of (display text, tool tip) for each path."""
        return [(format_file_path(path, right_to_left), path) for path in self._paths]