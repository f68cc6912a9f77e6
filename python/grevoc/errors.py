"""Exception types for grevoc.

Rejected-but-harmless mutations (duplicate word, nothing new to add) are not
exceptions: mutators return False for those. The classes below cover faults
the caller has to deal with.
"""


class GrevocError(Exception):
    """Base class for all grevoc errors."""
    pass


class InvalidArgumentError(GrevocError, ValueError):
    """Null, empty or mismatched input (language codes, keys, pairs)."""
    pass


class NotFoundError(GrevocError, LookupError):
    """Operation references a word that is not in the vocabulary."""

    def __init__(self, word: str):
        super().__init__(f"No such entry in vocabulary: {word!r}")
        self.word = word


class VocabularyIOError(GrevocError, OSError):
    """Reading or writing a vocabulary or word list file failed."""
    pass


class ProviderError(GrevocError):
    """A translation provider could not produce a result."""
    pass


class ConfigurationError(GrevocError):
    """Configuration file is missing or malformed."""
    pass
