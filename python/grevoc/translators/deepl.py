"""DeepL (deepl.com) translator.

Uses the v2 REST API. Keys issued for the free plan end in ":fx" and are
served from a separate host.
"""

import logging
from typing import Optional

import requests

from ..errors import InvalidArgumentError, ProviderError
from .base import HttpTranslator

logger = logging.getLogger(__name__)

DEEPL_API_URL = "https://api.deepl.com/v2/"
DEEPL_FREE_API_URL = "https://api-free.deepl.com/v2/"


def primary_code(code: str) -> str:
    """Lower-cased primary subtag, e.g. EN-GB -> en."""
    return code.split("-")[0].lower()


class DeeplTranslator(HttpTranslator):
    """Translator for the DeepL API."""

    ENGINE_NAME = "deepl"

    def __init__(
        self,
        source_language: str,
        target_language: str,
        api_key: str,
        timeout: float = 10,
        session: Optional[requests.Session] = None,
    ):
        super().__init__(source_language, target_language, api_key, timeout, session)
        self.base_url = (
            DEEPL_FREE_API_URL if api_key.endswith(":fx") else DEEPL_API_URL
        )
        self._languages: set[str] = set()
        self.load_languages()

        for code in (source_language, target_language):
            if code not in self._languages:
                raise InvalidArgumentError(f"DeepL does not support language: {code}")

    def auth_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"DeepL-Auth-Key {self.api_key}",
            "Accept": "application/json",
        }

    def load_languages(self) -> None:
        """Fetch codes usable both as source and as target."""
        logger.info("Loading DeepL languages")
        sources = self._request("GET", "languages", params={"type": "source"})
        targets = self._request("GET", "languages", params={"type": "target"})

        try:
            source_codes = {primary_code(lang["language"]) for lang in sources}
            target_codes = {primary_code(lang["language"]) for lang in targets}
        except (KeyError, TypeError) as e:
            raise ProviderError(f"Unexpected DeepL languages response: {e}") from e
        self._languages = source_codes & target_codes
        logger.debug("DeepL supports %d languages", len(self._languages))

    def get_languages(self) -> set[str]:
        return set(self._languages)

    def translate(self, word: str) -> set[str]:
        logger.debug("Translating word: [%s]", word)
        result = self._request(
            "POST",
            "translate",
            data={
                "text": word,
                "source_lang": self.source_language.upper(),
                "target_lang": self.target_language.upper(),
            },
        )
        try:
            return {t["text"] for t in result["translations"] if t.get("text")}
        except (KeyError, TypeError) as e:
            raise ProviderError(f"Unexpected DeepL response: {result!r}") from e
