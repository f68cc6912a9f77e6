"""Word list counter.

Simple format: one word per line. Blank lines are ignored and surrounding
whitespace is stripped.

A WordList keeps words in order of first appearance together with the
number of times each one was seen. Appending the same source twice doubles
every count; use import_from_source() to start over.
"""

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Union

from .formats import read_lines

logger = logging.getLogger(__name__)

WordSource = Union[Path, str, Iterable[str]]


def _load(source: WordSource) -> list[str]:
    """Materialize a source into a list of raw lines."""
    if isinstance(source, (str, Path)):
        return read_lines(source)
    return list(source)


class WordList:
    """Ordered word list with occurrence counts."""

    def __init__(self, source: Optional[WordSource] = None):
        """Initialize word list.

        Args:
            source: Optional file path or iterable of lines to append.
        """
        self._words: list[str] = []
        self._occurrences: dict[str, int] = {}

        if source is not None:
            self.append(source)

    @classmethod
    def from_file(cls, filepath: Path | str) -> "WordList":
        """Create a word list from a text file."""
        return cls(Path(filepath))

    def append(self, source: WordSource) -> int:
        """Count words from a file or lines into this list.

        Args:
            source: Path to a text file, or an iterable of lines.

        Returns:
            Number of words counted.

        Raises:
            VocabularyIOError: If the file cannot be read. The list is left
                unchanged in that case.
        """
        lines = _load(source)

        counted = 0
        for line in lines:
            word = line.strip()
            if not word:
                continue

            if word in self._occurrences:
                self._occurrences[word] += 1
            else:
                self._words.append(word)
                self._occurrences[word] = 1
            counted += 1

        logger.debug(
            "Counted %d words, %d distinct in list", counted, len(self._words)
        )
        return counted

    def import_from_source(self, source: WordSource) -> int:
        """Replace the list with the words of `source`."""
        lines = _load(source)
        self.clear()
        return self.append(lines)

    def sort(self) -> None:
        """Sort words in ascending order. Counts are kept."""
        self._words.sort()

    def clear(self) -> None:
        self._words.clear()
        self._occurrences.clear()

    def count(self, word: str) -> int:
        """Occurrences of `word`, 0 if it was never seen."""
        return self._occurrences.get(word, 0)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._occurrences

    def __iter__(self):
        return iter(tuple(self._words))

    @property
    def words(self) -> tuple[str, ...]:
        """Snapshot of the words in list order."""
        return tuple(self._words)

    @property
    def occurrences(self) -> Mapping[str, int]:
        """Read-only view of word counts."""
        return MappingProxyType(self._occurrences)

    def clone_words(self) -> list[str]:
        return list(self._words)

    def clone_occurrences(self) -> dict[str, int]:
        return dict(self._occurrences)

    def items(self) -> list[tuple[str, int]]:
        """(word, count) pairs in list order."""
        return [(w, self._occurrences[w]) for w in self._words]

    def __repr__(self) -> str:
        total = sum(self._occurrences.values())
        return f"WordList({len(self._words)} words, {total} occurrences)"
