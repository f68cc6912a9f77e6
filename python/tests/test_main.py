"""Tests for the command line front end."""

import logging

import pytest

from grevoc.main import build_parser, main
from grevoc.vocabulary import Vocabulary


@pytest.fixture(autouse=True)
def restore_logging():
    """main() reconfigures the root logger; put it back afterwards."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


class TestParser:
    """Tests for argument parsing."""

    def test_requires_command(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_build_arguments(self):
        args = build_parser().parse_args(
            ["build", "a.txt", "b.txt", "-o", "out.voc", "-s", "de", "-t", "ru"]
        )
        assert args.command == "build"
        assert [str(p) for p in args.wordlists] == ["a.txt", "b.txt"]
        assert args.source == "de"
        assert not args.append


class TestCommands:
    """End-to-end runs of the subcommands."""

    def test_pairs(self, capsys):
        assert main(["pairs"]) == 0
        out = capsys.readouterr().out
        assert "en-ru" in out
        assert "de-ru" in out

    def test_count(self, capsys, write_file, sample_wordlist_content):
        path = write_file("words.txt", sample_wordlist_content)
        assert main(["count", str(path), "--sort"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == ["bird\t1", "cat\t3", "dog\t2"]

    def test_build_and_append(self, tmp_path, write_file, sample_wordlist_content):
        words = write_file("words.txt", sample_wordlist_content)
        output = tmp_path / "en_ru.voc"
        argv = ["build", str(words), "-o", str(output), "-s", "en", "-t", "ru",
                "--translator", "debug"]

        assert main(argv) == 0
        assert Vocabulary.from_file(output, "en", "ru").get_occurrences("cat") == 3

        assert main(argv + ["--append"]) == 0
        assert Vocabulary.from_file(output, "en", "ru").get_occurrences("cat") == 6

    def test_merge(self, tmp_path, write_file, sample_vocabulary_content):
        part = write_file("part.voc", sample_vocabulary_content)
        output = tmp_path / "merged.voc"

        assert main(["merge", str(output), str(part), str(part), "-s", "en", "-t", "ru"]) == 0

        merged = Vocabulary.from_file(output, "en", "ru")
        assert merged.get_occurrences("cat") == 6
        assert merged.get_occurrences("dog") == 2

    def test_show(self, capsys, write_file, sample_vocabulary_content):
        path = write_file("en_ru.voc", sample_vocabulary_content)
        assert main(["show", str(path), "-s", "en", "-t", "ru"]) == 0
        assert capsys.readouterr().out == sample_vocabulary_content

    def test_error_exit_code(self, capsys, tmp_path):
        assert main(["count", str(tmp_path / "missing.txt")]) == 1
        assert "ERROR" in capsys.readouterr().err

    def test_unsupported_pair(self, capsys, write_file, sample_vocabulary_content):
        path = write_file("en_ru.voc", sample_vocabulary_content)
        assert main(["show", str(path), "-s", "ru", "-t", "en"]) == 1
