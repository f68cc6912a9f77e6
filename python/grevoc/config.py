"""Configuration loader for grevoc.

Reads grevoc.ini from the project root or the working directory, with
hardcoded fallbacks.

Format:
    [general]
    allow_online = false
    source_language = en
    target_language = ru
    translator = debug

    [api_keys]
    deepl = 0000-0000:fx
    lingvanex = a_0000
"""

import configparser
import logging
from pathlib import Path
from typing import Any, Optional

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "grevoc.ini"
API_KEYS_SECTION = "api_keys"
GENERAL_SECTION = "general"

# Hardcoded fallback defaults
FALLBACK_DEFAULTS = {
    "allow_online": False,
    "source_language": "en",
    "target_language": "ru",
    "translator": "debug",
}

_config: Optional["Configuration"] = None


def find_config() -> Path | None:
    """Find grevoc.ini by walking up from the current file."""
    paths = [
        Path(__file__).parent.parent.parent / CONFIG_FILENAME,  # python/grevoc -> root
        Path(__file__).parent.parent / CONFIG_FILENAME,
        Path.cwd() / CONFIG_FILENAME,
        Path.cwd().parent / CONFIG_FILENAME,
    ]
    for path in paths:
        if path.exists():
            return path
    return None


class Configuration:
    """General settings plus provider API keys."""

    def __init__(self):
        self.allow_online: bool = FALLBACK_DEFAULTS["allow_online"]
        self._defaults: dict[str, Any] = dict(FALLBACK_DEFAULTS)
        self._api_keys: dict[str, str] = {}

    @classmethod
    def load(cls, filepath: Path | str | None = None) -> "Configuration":
        """Load configuration from `filepath` or the first grevoc.ini found.

        A missing file gives the fallback defaults.
        """
        config = cls()
        path = Path(filepath) if filepath is not None else find_config()
        if path is None or not path.exists():
            logger.debug("No %s found, using defaults", CONFIG_FILENAME)
            return config

        config.read_from_ini(path)
        return config

    def set_default_values(self) -> None:
        self.allow_online = FALLBACK_DEFAULTS["allow_online"]
        self._defaults = dict(FALLBACK_DEFAULTS)
        self._api_keys.clear()

    def read_from_ini(self, filepath: Path | str) -> None:
        """Merge the [general] and [api_keys] sections of an INI file.

        Raises:
            ConfigurationError: If the file is missing or cannot be parsed.
        """
        filepath = Path(filepath)
        parser = configparser.ConfigParser()
        try:
            with open(filepath, "r", encoding="utf-8") as f:
                parser.read_file(f)
        except OSError as e:
            logger.error("Cannot read configuration %s: %s", filepath, e)
            raise ConfigurationError(f"Cannot read {filepath}: {e}") from e
        except configparser.Error as e:
            logger.error("Malformed configuration %s: %s", filepath, e)
            raise ConfigurationError(f"Malformed {filepath}: {e}") from e

        if parser.has_section(GENERAL_SECTION):
            general = parser[GENERAL_SECTION]
            try:
                self.allow_online = general.getboolean(
                    "allow_online", fallback=self.allow_online
                )
            except ValueError as e:
                raise ConfigurationError(f"Bad allow_online value: {e}") from e
            for key in ("source_language", "target_language", "translator"):
                if key in general:
                    self._defaults[key] = general[key]
            self._defaults["allow_online"] = self.allow_online

        if parser.has_section(API_KEYS_SECTION):
            for name, key in parser[API_KEYS_SECTION].items():
                self._api_keys[name] = key

        logger.debug(
            "Loaded %s with %d API keys", filepath, len(self._api_keys)
        )

    def save(self, filepath: Path | str) -> None:
        """Write the configuration to an INI file."""
        filepath = Path(filepath)
        parser = configparser.ConfigParser()
        parser[GENERAL_SECTION] = {
            "allow_online": str(self.allow_online).lower(),
            "source_language": self._defaults["source_language"],
            "target_language": self._defaults["target_language"],
            "translator": self._defaults["translator"],
        }
        parser[API_KEYS_SECTION] = dict(self._api_keys)

        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w", encoding="utf-8") as f:
            parser.write(f)

    def get_default(self, key: str, fallback: Any = None) -> Any:
        """Get a [general] value."""
        return self._defaults.get(key, fallback)

    def get_api_key(self, translator_name: Optional[str]) -> str:
        """API key for a provider, "" if unknown."""
        if not translator_name:
            logger.warning("Empty translator name provided")
            return ""
        if translator_name not in self._api_keys:
            logger.warning("No API key specified for translator %r", translator_name)
            return ""
        return self._api_keys[translator_name]

    def set_api_key(self, translator_name: Optional[str], api_key: Optional[str]) -> bool:
        """Set a provider API key.

        Returns:
            False for blank input or when the key is unchanged.
        """
        if not translator_name or not api_key:
            logger.warning("Translator name or API key is empty")
            return False
        if self._api_keys.get(translator_name) == api_key:
            logger.warning("API key for %r unchanged, nothing to do", translator_name)
            return False

        self._api_keys[translator_name] = api_key
        return True

    @property
    def translator_names(self) -> list[str]:
        return sorted(self._api_keys)


def load() -> Configuration:
    """Load the project configuration once and cache it."""
    global _config
    if _config is not None:
        return _config
    _config = Configuration.load()
    return _config


# Convenience accessors
def default_source_language() -> str:
    return load().get_default("source_language", FALLBACK_DEFAULTS["source_language"])


def default_target_language() -> str:
    return load().get_default("target_language", FALLBACK_DEFAULTS["target_language"])


def default_translator() -> str:
    return load().get_default("translator", FALLBACK_DEFAULTS["translator"])
