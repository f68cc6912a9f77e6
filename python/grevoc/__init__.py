"""grevoc - bilingual vocabulary builder.

A toolkit for building vocabularies of source-language words with their
occurrence counts and candidate translations.

Core concepts:
    - A word list counts how often each raw word was seen
    - A vocabulary is bound to one language pair (e.g., en -> ru)
    - Each vocabulary word has a count and a set of translations
    - Merging vocabularies adds counts and unions translations

Example:
    "cat" x3 {"кошка"} + "cat" x2 {"кот"} -> "cat" x5 {"кошка", "кот"}

Usage:
    from grevoc import Vocabulary, WordList, VocabularyBuilder
    from grevoc.translators import construct

    # Count raw words
    wordlist = WordList.from_file("words.txt")

    # Translate them into a vocabulary
    vocabulary = Vocabulary("en", "ru")
    translator = construct("debug", "en", "ru")
    VocabularyBuilder(vocabulary, translator).add_wordlist(wordlist)

    # Merge with a previous run and save
    vocabulary.append("en_ru.voc")
    vocabulary.export("en_ru.voc")
"""

from .builder import BuildStats, VocabularyBuilder
from .errors import (
    ConfigurationError,
    GrevocError,
    InvalidArgumentError,
    NotFoundError,
    ProviderError,
    VocabularyIOError,
)
from .languages import DEFAULT_REGISTRY, LanguagePair, LanguagePairRegistry
from .vocabulary import Vocabulary
from .wordlist import WordList

__version__ = "0.1.0"

__all__ = [
    "BuildStats",
    "VocabularyBuilder",
    "ConfigurationError",
    "GrevocError",
    "InvalidArgumentError",
    "NotFoundError",
    "ProviderError",
    "VocabularyIOError",
    "DEFAULT_REGISTRY",
    "LanguagePair",
    "LanguagePairRegistry",
    "Vocabulary",
    "WordList",
]
