"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from grevoc.vocabulary import Vocabulary


@pytest.fixture
def sample_vocabulary_content():
    """Two valid vocabulary records."""
    return "cat\tkitty|tomcat\t3\ndog\tpuppy\t1\n"


@pytest.fixture
def sample_wordlist_content():
    """Plain word list with repeats."""
    return """cat
dog
cat
bird
cat
dog
"""


@pytest.fixture
def write_file(tmp_path):
    """Write text to a file under tmp_path and return its path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def vocabulary():
    """en-ru vocabulary with two entries."""
    v = Vocabulary("en", "ru")
    v.add_entry("cat", {"kitty", "tomcat"}, 3)
    v.add_entry("dog", "puppy", 1)
    return v
