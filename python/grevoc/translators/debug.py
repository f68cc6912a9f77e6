"""Debug translator for tests and offline runs.

Produces pseudo translations: the upper-cased word plus a few random
permutations of its characters.
"""

import random
from typing import Optional

from ..languages import DEFAULT_REGISTRY
from .base import Translator

MAX_PERMUTATIONS = 8


class DebugTranslator(Translator):
    """Offline translator producing pseudo translations."""

    ENGINE_NAME = "_debug"

    def __init__(
        self,
        source_language: str,
        target_language: str,
        seed: Optional[int] = None,
    ):
        super().__init__(source_language, target_language)
        self._random = random.Random(seed)

    def get_languages(self) -> set[str]:
        return DEFAULT_REGISTRY.codes()

    def translate(self, word: str) -> set[str]:
        translations = {word.upper()}

        characters = list(word)
        for _ in range(self._random.randint(0, MAX_PERMUTATIONS)):
            if self._random.random() < 0.5:
                self._random.shuffle(characters)
                translations.add("".join(characters))

        return translations
