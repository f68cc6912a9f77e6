"""Vocabulary text format.

One record per line, UTF-8:

    word<TAB>translation1|translation2|...<TAB>count

Example:
    cat     kitty|tomcat    3
    dog     puppy           1

Words and translations are runs of word characters only (no spaces,
apostrophes, hyphens or separators). The count is a signed integer: entries
whose count was decreased to zero or below are written and read back as is.

Lines that do not match the shape are not records; readers drop them so
a partially corrupt file still loads.
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from .errors import VocabularyIOError

FIELD_SEPARATOR = "\t"
TRANSLATION_SEPARATOR = "|"

# \w is Unicode-aware, so Cyrillic and umlauts are word characters.
TOKEN_PATTERN = re.compile(r"\w+")
RECORD_PATTERN = re.compile(r"\w+\t\w+(?:\|\w+)*\t-?[0-9]+")


@dataclass(frozen=True)
class Entry:
    """A parsed vocabulary record."""

    word: str
    translations: frozenset[str]
    occurrences: int


def parse_line(line: str) -> Optional[Entry]:
    """Parse one record.

    Args:
        line: Raw line, with or without its line terminator.

    Returns:
        Entry, or None if the line is not a valid record.
    """
    line = line.rstrip("\r\n")
    if not RECORD_PATTERN.fullmatch(line):
        return None

    word, translations, count = line.split(FIELD_SEPARATOR)
    return Entry(
        word=word,
        translations=frozenset(translations.split(TRANSLATION_SEPARATOR)),
        occurrences=int(count),
    )


def is_token(text: object) -> bool:
    """Check that `text` can be stored as a word or translation field."""
    return isinstance(text, str) and TOKEN_PATTERN.fullmatch(text) is not None


def read_lines(filepath: Path | str) -> list[str]:
    """Read a whole UTF-8 text file into a list of lines.

    Raises:
        VocabularyIOError: If the file cannot be opened or decoded.
    """
    filepath = Path(filepath)
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            return f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise VocabularyIOError(f"Cannot read {filepath}: {e}") from e


def format_entry(word: str, translations: Iterable[str], occurrences: int) -> str:
    """Format one record without the trailing newline.

    Translations are sorted so the same entry always renders the same way.
    """
    return FIELD_SEPARATOR.join(
        (word, TRANSLATION_SEPARATOR.join(sorted(translations)), str(occurrences))
    )
