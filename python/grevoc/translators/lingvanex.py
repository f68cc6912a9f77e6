"""Lingvanex (lingvanex.com) translator.

The API knows languages by a two letter code ("en") and a full locale code
("en_US"). Several locales share a two letter code; PRIORITY_FULL_CODES
picks the one used when only the short code is given.
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Optional

import requests

from ..errors import InvalidArgumentError, ProviderError
from .base import HttpTranslator

logger = logging.getLogger(__name__)

LINGVANEX_API_URL = "https://api-b2b.backenster.com/b1/api/v3/"

PRIORITY_FULL_CODES = {
    "ar": "ar_AE",
    "en": "en_US",
    "es": "es_ES",
    "fr": "fr_FR",
    "pt": "pt_PT",
}

ALPHA1_PATTERN = re.compile(r"[a-z]{2}")
FULL_CODE_PATTERN = re.compile(r"[a-z]{2}_[A-Z]{2}")


def is_alpha1_code(code: str) -> bool:
    return bool(ALPHA1_PATTERN.fullmatch(code))


def is_full_code(code: str) -> bool:
    return bool(FULL_CODE_PATTERN.fullmatch(code))


@dataclass(frozen=True, order=True)
class ServerLanguage:
    """A language as listed by the Lingvanex API."""

    full_code: str
    code_alpha_1: str
    name: str

    @classmethod
    def from_dict(cls, data: dict) -> "ServerLanguage":
        return cls(
            full_code=data["full_code"],
            code_alpha_1=data["code_alpha_1"],
            name=data.get("englishName", ""),
        )


def find_language(
    code: str, languages: Iterable[ServerLanguage]
) -> Optional[ServerLanguage]:
    """Look a language up by alpha-1 or full code."""
    languages = list(languages)

    if is_alpha1_code(code):
        if code in PRIORITY_FULL_CODES:
            code = PRIORITY_FULL_CODES[code]
        else:
            return next((l for l in languages if l.code_alpha_1 == code), None)

    if is_full_code(code):
        return next((l for l in languages if l.full_code == code), None)

    logger.warning("Language code is neither alpha-1 nor full: [%s]", code)
    return None


class LingvanexTranslator(HttpTranslator):
    """Translator for the Lingvanex B2B API."""

    ENGINE_NAME = "lingvanex"
    base_url = LINGVANEX_API_URL

    def __init__(
        self,
        source_language: str,
        target_language: str,
        api_key: str,
        timeout: float = 10,
        session: Optional[requests.Session] = None,
    ):
        super().__init__(source_language, target_language, api_key, timeout, session)
        self._server_languages: set[ServerLanguage] = set()
        self.load_languages()

        source = find_language(source_language, self._server_languages)
        target = find_language(target_language, self._server_languages)
        if source is None or target is None:
            raise InvalidArgumentError(
                f"Lingvanex does not support pair {source_language}-{target_language}"
            )
        if source == target:
            raise InvalidArgumentError("Source and target resolve to the same language")
        self.source = source
        self.target = target

    def _call(self, method: str, path: str, **kwargs) -> dict:
        """Send a request and unwrap the {"err": ..., "result": ...} envelope."""
        data = self._request(method, path, **kwargs)
        if not isinstance(data, dict):
            raise ProviderError(f"Unexpected Lingvanex response: {data!r}")
        if data.get("err"):
            raise ProviderError(f"Lingvanex error: {data['err']}")
        return data

    def load_languages(self) -> None:
        logger.info("Loading Lingvanex languages")
        data = self._call("GET", "getLanguages", params={"platform": "api"})
        try:
            self._server_languages = {
                ServerLanguage.from_dict(item) for item in data["result"]
            }
        except (AttributeError, KeyError, TypeError) as e:
            raise ProviderError(f"Unexpected Lingvanex languages response: {e}") from e

    @property
    def server_languages(self) -> list[ServerLanguage]:
        return sorted(self._server_languages)

    def is_supported_language(self, code: str) -> bool:
        return find_language(code, self._server_languages) is not None

    def get_languages(self) -> set[str]:
        return {l.code_alpha_1 for l in self._server_languages}

    def translate(self, word: str) -> set[str]:
        logger.debug("Translating word: [%s]", word)
        data = self._call(
            "POST",
            "translate",
            json={
                "platform": "api",
                "from": self.source.full_code,
                "to": self.target.full_code,
                "data": word,
                "translateMode": "html",
            },
        )
        result = data.get("result")
        if not result:
            return set()
        return {result.strip()}
