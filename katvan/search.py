"""Find and replace over a plain-text document made of newline-separated blocks."""

from __future__ import annotations

import bisect
import enum
import re
from dataclasses import dataclass


class MatchType(enum.Enum):
    NORMAL = "normal"
    REGEX = "regex"
    WHOLE_WORDS = "whole-words"


@dataclass
class SearchOptions:
    match_type: MatchType = MatchType.NORMAL
    match_case: bool = False
    find_in_selection: bool = False


@dataclass(frozen=True)
class Match:
    """A match in the document: its span and the captured groups (group 0 first)."""

    start: int
    end: int
    captures: tuple[str, ...] = ()

    @property
    def text(self) -> str:
        return self.captures[0] if self.captures else ""


def build_pattern(term: str, options: SearchOptions) -> re.Pattern[str]:
    """Compile the search term according to the options.

    Raises ``re.error`` for an invalid regular expression.
    """
    if options.match_type is MatchType.REGEX:
        source = term
    else:
        source = re.escape(term)
        if options.match_type is MatchType.WHOLE_WORDS:
            source = rf"\b{source}\b"
    flags = 0 if options.match_case else re.IGNORECASE
    return re.compile(source, flags)


def is_valid_regex(term: str) -> bool:
    try:
        re.compile(term)
    except re.error:
        return False
    return True


def process_tool_tip(template: str, shortcut: str | None) -> str:
    """Fill ``%1`` with the shortcut, or drop ``(%1)`` when there is none."""
    if shortcut:
        return template.replace("%1", shortcut)
    return template.replace("(%1)", "").strip()


def expand_replacement(template: str, captures: tuple[str, ...] | list[str], regex_mode: bool) -> str:
    r"""Substitute ``\N`` back references with captured text in regex mode.

    A reference to a group that does not exist expands to nothing; a
    backslash not followed by digits is kept as is.
    """
    if not regex_mode:
        return template

    parts: list[str] = []
    i = 0
    size = len(template)
    while i < size:
        ch = template[i]
        if ch != "\\":
            parts.append(ch)
            i += 1
            continue

        i += 1
        digits_end = i
        while digits_end < size and template[digits_end].isdecimal():
            digits_end += 1

        if digits_end > i:
            num = int(template[i:digits_end])
            if num < len(captures):
                parts.append(captures[num])
            i = digits_end
        else:
            parts.append(ch)
    return "".join(parts)


def _captures(m: re.Match[str]) -> tuple[str, ...]:
    return tuple(g if g is not None else "" for g in (m.group(0), *m.groups()))


def _last_match(pattern: re.Pattern[str], line: str, offset: int) -> re.Match[str] | None:
    for start in range(min(offset, len(line)), -1, -1):
        m = pattern.match(line, start)
        if m is not None:
            return m
    return None


class SearchSession:
    """Search state over a document: cursor selection, search range and last match."""

    def __init__(self, text: str = "", options: SearchOptions | None = None) -> None:
        self.text = text
        self.options = options if options is not None else SearchOptions()
        self.cursor: tuple[int, int] = (0, 0)
        self.last_match: Match | None = None
        self._range: tuple[int, int] = (0, len(text))
        self.reset_search_range()

    @property
    def search_range(self) -> tuple[int, int]:
        return self._range

    def set_search_range(self, start: int, end: int) -> None:
        if not 0 <= start <= end <= len(self.text):
            raise ValueError(f"invalid search range {start}..{end}")
        self._range = (start, end)

    def reset_search_range(self) -> None:
        """Search within the selection when asked to and one exists, else everywhere."""
        start, end = self.cursor
        if start != end and self.options.find_in_selection:
            self._range = (start, end)
        else:
            self._range = (0, len(self.text))

    def _move_cursor(self, start: int, end: int | None) -> None:
        if end is None:
            end = start
        start, end = sorted((start, end))
        if not 0 <= start <= end <= len(self.text):
            raise ValueError(f"invalid cursor {start}..{end}")
        old = self.cursor
        if (start, end) == old:
            return
        self.cursor = (start, end)
        if start != end or old[0] != old[1]:
            self.reset_search_range()

    def _find_from(
        self, pattern: re.Pattern[str], sel_start: int, sel_end: int, forward: bool
    ) -> Match | None:
        pos = sel_end if forward else sel_start - 1
        if pos < 0:
            return None

        lines = self.text.split("\n")
        starts: list[int] = []
        offset_total = 0
        for line in lines:
            starts.append(offset_total)
            offset_total += len(line) + 1

        index = bisect.bisect_right(starts, pos) - 1
        offset = pos - starts[index]

        while 0 <= index < len(lines):
            line = lines[index]
            m = pattern.search(line, offset) if forward else _last_match(pattern, line, offset)
            if m is not None:
                base = starts[index]
                return Match(base + m.start(), base + m.end(), _captures(m))
            if forward:
                index += 1
                offset = 0
            else:
                index -= 1
                offset = len(lines[index]) if index >= 0 else 0
        return None

    def _in_range(self, found: Match | None) -> bool:
        return found is not None and self._range[0] <= found.end <= self._range[1]

    def _find_impl(self, pattern: re.Pattern[str], forward: bool) -> Match | None:
        found = self._find_from(pattern, *self.cursor, forward)
        if self._in_range(found):
            return found

        edge = self._range[0] if forward else self._range[1]
        found = self._find_from(pattern, edge, edge, forward)
        if self._in_range(found):
            return found
        return None

    def find(
        self,
        term: str,
        cursor_start: int | None = None,
        cursor_end: int | None = None,
        forward: bool = True,
    ) -> Match | None:
        """Find the next (or previous) match, wrapping within the search range.

        A given cursor replaces the current selection first. On success the
        match becomes both the selection and the last match.
        """
        if cursor_start is not None:
            self._move_cursor(cursor_start, cursor_end)

        self.last_match = None
        if not term:
            return None

        pattern = build_pattern(term, self.options)
        found = self._find_impl(pattern, forward)
        if found is not None:
            self.last_match = found
            self.cursor = (found.start, found.end)
        return found

    def _replace(self, start: int, end: int, new_text: str) -> None:
        self.text = self.text[:start] + new_text + self.text[end:]
        inserted_end = start + len(new_text)
        delta = len(new_text) - (end - start)

        def adjust(p: int) -> int:
            if p < start:
                return p
            if p <= end:
                return inserted_end
            return p + delta

        self.cursor = (adjust(self.cursor[0]), adjust(self.cursor[1]))
        self._range = (adjust(self._range[0]), adjust(self._range[1]))
        self.last_match = None

    def _regex_mode(self) -> bool:
        return self.options.match_type is MatchType.REGEX

    def replace_next(self, term: str, replacement: str) -> Match | None:
        """Replace the last match, if any, then find the next one."""
        if self.last_match is not None:
            m = self.last_match
            new_text = expand_replacement(replacement, m.captures, self._regex_mode())
            self._replace(m.start, m.end, new_text)
        return self.find(term, forward=True)

    def replace_all(self, term: str, replacement: str) -> int:
        """Replace every match within the search range; return how many were replaced."""
        if not term:
            return 0

        pattern = build_pattern(term, self.options)
        count = 0
        pos = self._range[0]
        while True:
            found = self._find_from(pattern, pos, pos, True)
            if not self._in_range(found):
                break
            assert found is not None
            new_text = expand_replacement(replacement, found.captures, self._regex_mode())
            self._replace(found.start, found.end, new_text)
            count += 1
            pos = found.start + len(new_text)
            if found.start == found.end:
                pos += 1
        return count