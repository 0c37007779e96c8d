"""
Scanner: pulls keyword entries out of the keyword sections of a grammar.

A section starts at a line such as ``reserved_keyword:`` and runs until
the next empty line. Every non-empty line in between names one keyword
token, e.g. ``  ABORT`` or ``| ABSOLUTE``.
"""

import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from .categories import CATEGORIES

# "xxx_keyword:" at the start of a line opens a section.
RE_HEADER = re.compile(r".*_keyword:")

# First uppercase-led run on a keyword line is the token identifier.
# Trailing whitespace is not part of the token.
RE_TOKEN = re.compile(r"[A-Z].*")


class KeywordError(Exception):
    """Base class for fatal keyword generator errors."""
    pass


class UnknownCategoryError(KeywordError):
    """Raised when a section header is not in the category table."""

    def __init__(self, header: str, line: int):
        super().__init__(f"Line {line}: unknown keyword type: {header}")
        self.header = header
        self.line = line


class InputReadError(KeywordError):
    """Raised when the grammar input cannot be read."""
    pass


class RenderError(KeywordError):
    """Raised when an entry cannot be rendered into Go source."""
    pass


@dataclass(frozen=True)
class KeywordEntry:
    lower: str      # map key, e.g. "select"
    match: str      # token identifier as written in the grammar, e.g. "SELECT"
    category: str   # one of C, U, T, R


def _chomp(raw: str) -> str:
    """Drop one line terminator: "\\n" or "\\r\\n", or a lone final "\\r"."""
    if raw.endswith("\n"):
        raw = raw[:-1]
    if raw.endswith("\r"):
        raw = raw[:-1]
    return raw


def scan_keywords(lines: Iterable[str],
                  categories: Optional[Dict[str, str]] = None) -> List[KeywordEntry]:
    """
    Collect keyword entries from the grammar lines in order of appearance.

    The first section that mentions a token decides its category; later
    mentions are skipped. Raises UnknownCategoryError for a header missing
    from ``categories`` and InputReadError if iterating ``lines`` fails.
    """
    if categories is None:
        categories = CATEGORIES

    in_section = False
    category = ""
    seen = set()
    entries: List[KeywordEntry] = []

    try:
        for lineno, raw in enumerate(lines, start=1):
            line = _chomp(raw)

            header = RE_HEADER.match(line)
            if header:
                in_section = True
                category = categories.get(header.group(0), "")
                if not category:
                    raise UnknownCategoryError(header.group(0), lineno)
            elif line == "":
                in_section = False
            elif in_section:
                m = RE_TOKEN.search(line)
                token = m.group(0).rstrip() if m else ""
                if token and token not in seen:
                    seen.add(token)
                    entries.append(KeywordEntry(lower=token.lower(),
                                                match=token,
                                                category=category))
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(f"reading input: {e}") from e

    return entries


def sort_entries(entries: Iterable[KeywordEntry]) -> List[KeywordEntry]:
    """Return the entries ordered by token identifier."""
    return sorted(entries, key=lambda e: e.match)
