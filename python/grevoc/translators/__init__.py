"""Translation providers.

Provides pluggable translators behind one interface:
- debug: offline pseudo translations
- deepl: DeepL API
- lingvanex: Lingvanex API

Usage:
    from grevoc.translators import construct

    translator = construct("debug", "en", "ru")
    translator.translate("cat")
"""

from typing import Optional

from ..config import Configuration
from ..errors import InvalidArgumentError
from .base import HttpTranslator, Translator
from .debug import DebugTranslator
from .deepl import DeeplTranslator
from .lingvanex import LingvanexTranslator

# Register available translators
TRANSLATORS: dict[str, type[Translator]] = {
    "debug": DebugTranslator,
    "deepl": DeeplTranslator,
    "lingvanex": LingvanexTranslator,
}


def get_translator(name: str) -> type[Translator]:
    """Get translator class by name."""
    if name not in TRANSLATORS:
        raise InvalidArgumentError(
            f"Unknown translator: {name}. Available: {list(TRANSLATORS.keys())}"
        )
    return TRANSLATORS[name]


def register_translator(name: str, translator_cls: type[Translator]) -> None:
    """Register a custom translator."""
    TRANSLATORS[name] = translator_cls


def construct(
    name: str,
    source_language: str,
    target_language: str,
    config: Optional[Configuration] = None,
) -> Translator:
    """Build a translator by name.

    Providers that need an API key read it from `config` under their
    registered name.
    """
    translator_cls = get_translator(name)
    if not translator_cls.REQUIRES_API_KEY:
        return translator_cls(source_language, target_language)

    config = config or Configuration()
    if not config.allow_online:
        raise InvalidArgumentError(
            f"Online translator {name!r} requested but allow_online is off"
        )
    return translator_cls(
        source_language, target_language, api_key=config.get_api_key(name)
    )


__all__ = [
    "Translator",
    "HttpTranslator",
    "DebugTranslator",
    "DeeplTranslator",
    "LingvanexTranslator",
    "TRANSLATORS",
    "get_translator",
    "register_translator",
    "construct",
]
