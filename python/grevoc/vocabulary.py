"""Bilingual vocabulary.

Core concept:
    - A vocabulary is bound to one (source, target) language pair
    - Each word has an occurrence count and a set of translations
    - Merging adds counts and unions translation sets

Example:
    "cat" seen 3 times, translated as {"кошка", "кот"}
    merged with "cat" seen 2 times, translated as {"кошка"}
    gives "cat" seen 5 times, translated as {"кошка", "кот"}

Mutating methods return True when they changed something and False when the
call was rejected or had nothing to do. Structural faults (missing word,
bad language pair, None keys) raise. No method applies a change partially.

Words and translations must be storable record fields (see formats.is_token):
no spaces, apostrophes, hyphens or "|". Anything else is rejected with False
so every accepted entry survives an export and re-import.
"""

import logging
import os
import tempfile
from pathlib import Path
from types import MappingProxyType
from typing import AbstractSet, Iterable, Iterator, Mapping, Optional, Union

from .errors import InvalidArgumentError, NotFoundError, VocabularyIOError
from .formats import format_entry, is_token, parse_line, read_lines
from .languages import DEFAULT_REGISTRY, LanguagePair, LanguagePairRegistry

logger = logging.getLogger(__name__)

Translations = Union[AbstractSet[str], str]


def vocabularies_match_languages(v1: "Vocabulary", v2: "Vocabulary") -> bool:
    """Check that two vocabularies share source and target languages."""
    if v1 is None:
        raise InvalidArgumentError("Vocabulary 1 must not be None")
    if v2 is None:
        raise InvalidArgumentError("Vocabulary 2 must not be None")
    return v1.language_pair == v2.language_pair


class Vocabulary:
    """Words with occurrence counts and translations for one language pair."""

    def __init__(
        self,
        source_language: str,
        target_language: str,
        registry: Optional[LanguagePairRegistry] = None,
    ):
        """Initialize an empty vocabulary.

        Args:
            source_language: Language code of the words (e.g., "en").
            target_language: Language code of the translations (e.g., "ru").
            registry: Supported pairs; defaults to DEFAULT_REGISTRY.

        Raises:
            InvalidArgumentError: If a code is None or empty, both codes are
                equal, or the pair is not supported.
        """
        self.registry = registry if registry is not None else DEFAULT_REGISTRY

        pair = LanguagePair(source_language, target_language)
        if not self.registry.is_supported(pair.source, pair.target):
            raise InvalidArgumentError(f"Unsupported language pair: {pair}")
        self._pair = pair

        self._words: list[str] = []
        self._occurrences: dict[str, int] = {}
        self._translations: dict[str, set[str]] = {}

    @classmethod
    def from_file(
        cls,
        filepath: Path | str,
        source_language: str,
        target_language: str,
        registry: Optional[LanguagePairRegistry] = None,
    ) -> "Vocabulary":
        """Create a vocabulary and import entries from a file."""
        vocabulary = cls(source_language, target_language, registry=registry)
        vocabulary.import_from_file(filepath)
        return vocabulary

    # -- identity -----------------------------------------------------------

    @property
    def language_pair(self) -> LanguagePair:
        return self._pair

    @property
    def source_language(self) -> str:
        return self._pair.source

    @property
    def target_language(self) -> str:
        return self._pair.target

    def matches_languages(self, other: "Vocabulary") -> bool:
        return vocabularies_match_languages(self, other)

    # -- entry mutation -----------------------------------------------------

    def add_entry(
        self, word: str, translations: Translations, occurrences: int
    ) -> bool:
        """Add a new word.

        Args:
            word: Word to add; must not be present yet.
            translations: Non-empty set of translations, or one translation.
            occurrences: Positive occurrence count.

        Returns:
            True if the entry was added, False if it was rejected.
        """
        if not word:
            raise InvalidArgumentError("Word must be a non empty string")
        if translations is None:
            raise InvalidArgumentError("Translations must not be None")

        if isinstance(translations, str):
            if not translations:
                logger.warning("Translation is empty string")
                return False
            new_translations = {translations}
        else:
            new_translations = set(translations)

        if word in self._occurrences:
            logger.warning("Entry is already present: %r", word)
            return False
        if not is_token(word):
            logger.warning("Word %r cannot be stored in a vocabulary file", word)
            return False
        if not new_translations:
            logger.warning("Translations set is empty for %r", word)
            return False
        if not all(new_translations):
            logger.warning("Empty translation provided for %r", word)
            return False
        if not self._storable(word, new_translations):
            return False
        if occurrences <= 0:
            logger.warning("Occurrences must be positive, got %d", occurrences)
            return False

        self._words.append(word)
        self._translations[word] = new_translations
        self._occurrences[word] = occurrences
        logger.debug("New entry [%s] added", self.entry_to_string(word))
        return True

    put = add_entry

    def append_entry(
        self,
        key: str,
        translations: Optional[Iterable[str]],
        occurrences: int,
    ) -> bool:
        """Merge translations and occurrences into an existing entry.

        Args:
            key: Existing word.
            translations: Translations to union in; None counts as empty.
            occurrences: Non-negative count to add.

        Returns:
            False if occurrences is negative, if a translation cannot be
            stored, or if no translation was new and occurrences is zero.
            True otherwise.

        Raises:
            NotFoundError: If `key` is not in the vocabulary.
        """
        self._require_word(key)

        if occurrences < 0:
            logger.warning("Negative occurrence count provided: %d", occurrences)
            return False
        if translations is None:
            logger.warning("None translations for %r replaced with empty set", key)
            translations = set()
        elif isinstance(translations, str):
            translations = {translations}

        given = {t for t in translations if t}
        if not self._storable(key, given):
            return False
        fresh = given - self._translations[key]

        if not fresh and occurrences == 0:
            logger.warning(
                "Neutral arguments for %r (no new translations and zero occurrences)",
                key,
            )
            return False
        if not fresh:
            logger.debug("No new translations for %r", key)
        if occurrences == 0:
            logger.debug("Occurrences count is zero for %r", key)

        self._translations[key] |= fresh
        self._occurrences[key] += occurrences
        return True

    def add_translation(self, key: str, translation: Optional[str]) -> bool:
        """Add a single translation to an existing word."""
        self._require_word(key)

        if not translation:
            logger.warning("Translation is not provided (None or empty)")
            return False
        if not self._storable(key, {translation}):
            return False
        if translation in self._translations[key]:
            logger.warning("Translation %r already present for %r", translation, key)
            return False

        self._translations[key].add(translation)
        return True

    def add_translations(self, word: str, translations: Translations) -> bool:
        """Union translations into an existing word.

        A single string is taken as one translation.

        Returns:
            False if a translation cannot be stored or every given
            translation is already present.

        Raises:
            InvalidArgumentError: If `translations` is None.
            NotFoundError: If `word` is not in the vocabulary.
        """
        self._require_word(word)
        if translations is None:
            raise InvalidArgumentError("Translations must not be None")
        if isinstance(translations, str):
            translations = {translations}

        given = {t for t in translations if t}
        if not self._storable(word, given):
            return False
        fresh = given - self._translations[word]
        if not fresh:
            logger.warning("Provided translations are already included for %r", word)
            return False

        self._translations[word] |= fresh
        return True

    def decrease_occurrences(self, key: str, amount: int) -> bool:
        """Subtract `amount` from the count of `key`.

        The result is not clamped and the entry is kept even when the count
        drops to zero or below.
        """
        self._require_word(key)

        if amount <= 0:
            logger.warning(
                "Occurrences decrease must be positive, got %d; no changes", amount
            )
            return False

        self._occurrences[key] -= amount
        return True

    def remove_entry(self, word: str) -> bool:
        """Remove a word with its count and translations."""
        if word not in self._occurrences:
            logger.warning("No such word %r in vocabulary", word)
            return False

        self._words.remove(word)
        del self._translations[word]
        del self._occurrences[word]
        return True

    def remove_translation(self, word: str, translation: str) -> bool:
        """Remove one translation. The last translation of a word is kept."""
        if not translation:
            logger.warning("Provided translation is empty: %r", translation)
            return False
        if word not in self._translations:
            logger.warning("No such word %r in vocabulary", word)
            return False
        if translation not in self._translations[word]:
            logger.warning(
                "No translation %r to remove in entry %r", translation, word
            )
            return False
        if len(self._translations[word]) == 1:
            logger.warning(
                "Refusing to remove the last translation of %r; use remove_entry",
                word,
            )
            return False

        self._translations[word].discard(translation)
        return True

    def remove_translations(self, word: str, translations: Iterable[str]) -> bool:
        """Remove the given translations from `word`.

        Returns:
            False if none of them was present, or if removing them would
            leave the word without translations.
        """
        if word not in self._translations:
            logger.warning("No such word %r in vocabulary", word)
            return False

        to_remove = set(translations or ()) & self._translations[word]
        if not to_remove:
            logger.warning("No translations to remove in entry %r", word)
            return False
        if to_remove == self._translations[word]:
            logger.warning(
                "Refusing to remove every translation of %r; use remove_entry",
                word,
            )
            return False

        self._translations[word] -= to_remove
        return True

    # -- merging ------------------------------------------------------------

    def append(self, other: Union["Vocabulary", Path, str]) -> None:
        """Merge another vocabulary, or a vocabulary file, into this one.

        New words are added; words already present get their counts summed
        and their translation sets united. Words are visited in the order
        of `other`.

        Raises:
            InvalidArgumentError: If the language pairs differ.
            VocabularyIOError: If `other` is a file that cannot be read.
        """
        if other is None:
            raise InvalidArgumentError("Vocabulary to append must not be None")

        if isinstance(other, (str, Path)):
            other = Vocabulary.from_file(
                other,
                self.source_language,
                self.target_language,
                registry=self.registry,
            )

        if not self.matches_languages(other):
            raise InvalidArgumentError(
                f"Vocabularies' languages don't match: "
                f"{self.language_pair} vs {other.language_pair}"
            )

        added = 0
        appended = 0
        skipped = 0
        for word in other.words:
            translations = other._translations[word]
            occurrences = other._occurrences[word]
            if word not in self._occurrences:
                changed = self.add_entry(word, translations, occurrences)
                added += changed
            else:
                changed = self.append_entry(word, translations, occurrences)
                appended += changed
            if not changed:
                skipped += 1
                logger.warning(
                    "Skipped %r while merging (count %d, translations %s)",
                    word, occurrences, sorted(translations),
                )

        logger.info(
            "Merged %d words (%d new, %d updated, %d skipped) into %s vocabulary",
            len(other), added, appended, skipped, self.language_pair,
        )

    # -- import / export ----------------------------------------------------

    def import_from_file(self, filepath: Path | str) -> int:
        """Replace the whole vocabulary with the records of a file.

        Malformed lines are skipped. A word repeated in the file keeps its
        first position; its translations are united and counts summed.

        Returns:
            Number of entries loaded.

        Raises:
            VocabularyIOError: If the file cannot be read. The vocabulary is
                left unchanged in that case.
        """
        lines = read_lines(filepath)

        words: list[str] = []
        occurrences: dict[str, int] = {}
        translations: dict[str, set[str]] = {}
        skipped = 0

        for line_num, line in enumerate(lines, start=1):
            if not line.strip():
                continue

            entry = parse_line(line)
            if entry is None:
                skipped += 1
                logger.debug("Skipping malformed line %d in %s", line_num, filepath)
                continue

            if entry.occurrences <= 0:
                logger.warning(
                    "Entry %r on line %d of %s has non-positive count %d",
                    entry.word, line_num, filepath, entry.occurrences,
                )

            if entry.word in occurrences:
                occurrences[entry.word] += entry.occurrences
                translations[entry.word] |= entry.translations
            else:
                words.append(entry.word)
                occurrences[entry.word] = entry.occurrences
                translations[entry.word] = set(entry.translations)

        self._words = words
        self._occurrences = occurrences
        self._translations = translations

        if skipped:
            logger.warning("Skipped %d malformed lines in %s", skipped, filepath)
        logger.info("Imported %d entries from %s", len(words), filepath)
        return len(words)

    def iter_lines(self) -> Iterator[str]:
        """Yield formatted records in word order."""
        for word in self._words:
            yield self.entry_to_string(word)

    def export(self, filepath: Path | str) -> None:
        """Write the vocabulary to a file, one record per line.

        The records are written to a temporary file in the same directory
        and moved over `filepath` once complete. The result keeps the mode
        of the file it replaces, or gets the umask default for a new file.

        Raises:
            VocabularyIOError: If the file cannot be written.
        """
        filepath = Path(filepath)
        tmp_path: Optional[str] = None
        try:
            filepath.parent.mkdir(parents=True, exist_ok=True)
            mode = _target_mode(filepath)
            fd, tmp_path = tempfile.mkstemp(
                dir=filepath.parent, prefix=f".{filepath.name}.", suffix=".tmp"
            )
            try:
                f = open(fd, "w", encoding="utf-8", newline="\n")
            except BaseException:
                os.close(fd)
                raise
            with f:
                for line in self.iter_lines():
                    f.write(line + "\n")
            os.chmod(tmp_path, mode)
            os.replace(tmp_path, filepath)
            tmp_path = None
        except OSError as e:
            logger.error("Failed to export to file %s: %s", filepath, e)
            raise VocabularyIOError(f"Cannot write {filepath}: {e}") from e
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)

        logger.info("Exported %d entries to %s", len(self._words), filepath)

    # -- views and copies ---------------------------------------------------

    @property
    def words(self) -> tuple[str, ...]:
        """Snapshot of words in insertion order."""
        return tuple(self._words)

    @property
    def occurrences(self) -> Mapping[str, int]:
        """Read-only view of word counts."""
        return MappingProxyType(self._occurrences)

    @property
    def translations(self) -> Mapping[str, frozenset[str]]:
        """Snapshot of translation sets."""
        return MappingProxyType(
            {w: frozenset(t) for w, t in self._translations.items()}
        )

    def get_translations(self, word: str) -> frozenset[str]:
        self._require_word(word)
        return frozenset(self._translations[word])

    def get_occurrences(self, word: str) -> int:
        self._require_word(word)
        return self._occurrences[word]

    def clone_words(self) -> list[str]:
        return list(self._words)

    def clone_occurrences(self) -> dict[str, int]:
        return dict(self._occurrences)

    def clone_translations(self) -> dict[str, set[str]]:
        return {w: set(t) for w, t in self._translations.items()}

    def copy(self) -> "Vocabulary":
        """Independent copy with the same language pair and entries."""
        clone = Vocabulary(
            self.source_language, self.target_language, registry=self.registry
        )
        clone._words = self.clone_words()
        clone._occurrences = self.clone_occurrences()
        clone._translations = self.clone_translations()
        return clone

    def entry_to_string(self, word: str) -> str:
        """Format one entry as a file record."""
        self._require_word(word)
        return format_entry(word, self._translations[word], self._occurrences[word])

    def __contains__(self, word: object) -> bool:
        return word in self._occurrences

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._words))

    def __repr__(self) -> str:
        return f"Vocabulary({self.language_pair}: {len(self._words)} words)"

    def _require_word(self, word: str) -> None:
        if word is None:
            raise InvalidArgumentError("Key must not be None")
        if word not in self._occurrences:
            raise NotFoundError(word)

    @staticmethod
    def _storable(word: str, translations: AbstractSet[str]) -> bool:
        bad = sorted(t for t in translations if not is_token(t))
        if bad:
            logger.warning(
                "Translations %s for %r cannot be stored in a vocabulary file",
                bad, word,
            )
            return False
        return True


def _target_mode(filepath: Path) -> int:
    """Permission bits for an exported file."""
    try:
        return filepath.stat().st_mode & 0o777
    except FileNotFoundError:
        pass
    # The umask can only be read by setting it.
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask
