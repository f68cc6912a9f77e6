"""Base translator interface.

All translators inherit from Translator and implement get_languages() and
translate(). A vocabulary builder only depends on this interface, never on
a concrete provider.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

import requests

from ..errors import InvalidArgumentError, ProviderError

logger = logging.getLogger(__name__)


class Translator(ABC):
    """Base class for translation providers.

    Subclasses must implement:
        - get_languages() -> set of supported language codes
        - translate(word) -> set of translations

    Online engines bill per translated word, so ENGINE_NAME identifies the
    engine across instances.
    """

    ENGINE_NAME: str = ""
    REQUIRES_API_KEY: bool = False

    def __init__(self, source_language: str, target_language: str):
        """Initialize translator.

        Args:
            source_language: Language code to translate from.
            target_language: Language code to translate to.

        Raises:
            InvalidArgumentError: If a code is empty or both are equal.
        """
        if not source_language or not target_language:
            raise InvalidArgumentError("Source and target languages must be non empty")
        if source_language == target_language:
            raise InvalidArgumentError(
                f"Source language is the same as target [{source_language}={target_language}]"
            )
        self._source_language = source_language
        self._target_language = target_language

    @property
    def source_language(self) -> str:
        return self._source_language

    @property
    def target_language(self) -> str:
        return self._target_language

    @abstractmethod
    def get_languages(self) -> set[str]:
        """Return codes of the languages this translator supports."""
        pass

    @abstractmethod
    def translate(self, word: str) -> set[str]:
        """Translate a single word.

        Args:
            word: Word in the source language.

        Returns:
            Set of translations, possibly empty.

        Raises:
            ProviderError: If the provider failed.
        """
        pass

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(sl={self._source_language}, "
            f"tl={self._target_language})"
        )


class HttpTranslator(Translator):
    """Translator backed by a JSON HTTP API."""

    REQUIRES_API_KEY = True
    base_url: str = ""

    def __init__(
        self,
        source_language: str,
        target_language: str,
        api_key: str,
        timeout: float = 10,
        session: Optional[requests.Session] = None,
    ):
        super().__init__(source_language, target_language)
        if not api_key:
            raise InvalidArgumentError(f"{self.ENGINE_NAME} requires an API key")
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()

    def auth_headers(self) -> dict[str, str]:
        """Headers sent with every request."""
        return {"Authorization": self.api_key, "Accept": "application/json"}

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        """Send a request to the provider and decode the JSON body."""
        url = self.base_url + path
        headers = self.auth_headers()
        headers.update(kwargs.pop("headers", {}))

        logger.debug("%s %s %s", self.ENGINE_NAME, method, url)
        try:
            response = self.session.request(
                method, url, headers=headers, timeout=self.timeout, **kwargs
            )
            response.raise_for_status()
            return response.json()
        except requests.exceptions.ConnectionError as e:
            raise ProviderError(f"Could not connect to {self.ENGINE_NAME}: {e}") from e
        except requests.exceptions.RequestException as e:
            raise ProviderError(f"{self.ENGINE_NAME} request failed: {e}") from e
        except ValueError as e:
            raise ProviderError(f"{self.ENGINE_NAME} returned invalid JSON: {e}") from e
