"""Vocabulary builder.

Turns counted word lists into vocabulary entries by asking a translator for
every word the vocabulary does not know yet. Known words only get their
counts increased, so an online provider is never billed twice for the same
word.

Words that cannot be stored in a vocabulary file are rejected before any
translator call. Translations that cannot be stored are dropped.
"""

import logging
from dataclasses import dataclass, field

from .errors import InvalidArgumentError, ProviderError
from .formats import is_token
from .translators.base import Translator
from .vocabulary import Vocabulary
from .wordlist import WordList

logger = logging.getLogger(__name__)


@dataclass
class BuildStats:
    """Statistics from a build operation."""

    total_words: int = 0
    added: int = 0
    appended: int = 0
    untranslated: int = 0
    rejected: int = 0
    failed: int = 0
    failed_words: list[str] = field(default_factory=list)

    def __repr__(self) -> str:
        return (
            f"BuildStats({self.total_words} words: {self.added} added, "
            f"{self.appended} appended, {self.untranslated} untranslated, "
            f"{self.rejected} rejected, {self.failed} failed)"
        )


class VocabularyBuilder:
    """Fills a vocabulary from word lists through a translator."""

    def __init__(self, vocabulary: Vocabulary, translator: Translator):
        """Initialize builder.

        Args:
            vocabulary: Vocabulary receiving the entries.
            translator: Provider for words missing from the vocabulary.

        Raises:
            InvalidArgumentError: If the translator works on another pair.
        """
        if (
            translator.source_language != vocabulary.source_language
            or translator.target_language != vocabulary.target_language
        ):
            raise InvalidArgumentError(
                f"Translator {translator!r} does not match "
                f"vocabulary pair {vocabulary.language_pair}"
            )
        self.vocabulary = vocabulary
        self.translator = translator

    def add_wordlist(self, wordlist: WordList, stop_on_error: bool = False) -> BuildStats:
        """Add every word of `wordlist` to the vocabulary.

        Args:
            wordlist: Counted words.
            stop_on_error: Re-raise the first ProviderError instead of
                recording the word as failed.

        Returns:
            BuildStats for this word list.
        """
        stats = BuildStats()

        for word, count in wordlist.items():
            stats.total_words += 1

            if word in self.vocabulary:
                if self.vocabulary.append_entry(word, set(), count):
                    stats.appended += 1
                continue

            if not is_token(word):
                logger.warning("Word %r cannot be stored in a vocabulary file", word)
                stats.rejected += 1
                continue

            try:
                translations = self.translator.translate(word)
            except ProviderError as e:
                if stop_on_error:
                    raise
                logger.error("Translation of %r failed: %s", word, e)
                stats.failed += 1
                stats.failed_words.append(word)
                continue

            storable = {t for t in translations if is_token(t)}
            if len(storable) < len(translations):
                logger.debug(
                    "Dropped unstorable translations for %r: %s",
                    word, sorted(set(translations) - storable),
                )
            translations = storable

            if not translations:
                logger.warning("No translations for %r", word)
                stats.untranslated += 1
                continue

            if self.vocabulary.add_entry(word, translations, count):
                stats.added += 1
            else:
                stats.untranslated += 1

        logger.info("Built vocabulary: %r", stats)
        return stats
