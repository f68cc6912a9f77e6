"""Supported source/target language pairs.

A Vocabulary can only be built for a pair listed in a registry. The default
registry mirrors the pairs the project ships vocabularies for; callers that
need other pairs build their own LanguagePairRegistry and inject it.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from .errors import InvalidArgumentError


@dataclass(frozen=True)
class LanguagePair:
    """Ordered (source, target) language codes."""

    source: str
    target: str

    def __post_init__(self):
        if not self.source:
            raise InvalidArgumentError("Source language has to be non empty")
        if not self.target:
            raise InvalidArgumentError("Target language has to be non empty")
        if self.source == self.target:
            raise InvalidArgumentError(
                f"Languages have to differ: sl={self.source} tl={self.target}"
            )

    def __str__(self) -> str:
        return f"{self.source}-{self.target}"


def _require_code(code: Optional[str], role: str) -> str:
    if code is None:
        raise InvalidArgumentError(f"{role} language must not be None")
    return code


class LanguagePairRegistry:
    """Read-only table of supported language pairs."""

    def __init__(self, pairs: Iterable[LanguagePair]):
        self._pairs: tuple[LanguagePair, ...] = tuple(pairs)

    @property
    def pairs(self) -> tuple[LanguagePair, ...]:
        return self._pairs

    def __iter__(self) -> Iterator[LanguagePair]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __contains__(self, pair: object) -> bool:
        return pair in self._pairs

    def is_supported(self, sl: Optional[str], tl: Optional[str]) -> bool:
        """Check if the exact (sl, tl) pair is in the table."""
        sl = _require_code(sl, "Source")
        tl = _require_code(tl, "Target")
        return any(p.source == sl and p.target == tl for p in self._pairs)

    def targets_for(self, sl: Optional[str]) -> list[str]:
        """Target codes paired with source `sl`, empty if none."""
        sl = _require_code(sl, "Source")
        return [p.target for p in self._pairs if p.source == sl]

    def sources_for(self, tl: Optional[str]) -> list[str]:
        """Source codes paired with target `tl`, empty if none."""
        tl = _require_code(tl, "Target")
        return [p.source for p in self._pairs if p.target == tl]

    def has_source(self, code: Optional[str]) -> bool:
        code = _require_code(code, "Source")
        return any(p.source == code for p in self._pairs)

    def has_target(self, code: Optional[str]) -> bool:
        code = _require_code(code, "Target")
        return any(p.target == code for p in self._pairs)

    def codes(self) -> set[str]:
        """Every code appearing on either side of a pair."""
        return {p.source for p in self._pairs} | {p.target for p in self._pairs}

    def format_pairs(self) -> list[str]:
        """Pairs as "sl-tl" strings, in table order."""
        return [str(p) for p in self._pairs]


SUPPORTED_LANGUAGE_PAIRS: tuple[LanguagePair, ...] = (
    LanguagePair("en", "ru"),
    LanguagePair("de", "ru"),
)

DEFAULT_REGISTRY = LanguagePairRegistry(SUPPORTED_LANGUAGE_PAIRS)
