"""grevoc CLI - bilingual vocabulary builder.

Usage:
    python -m grevoc.main pairs
    python -m grevoc.main count words.txt --sort
    python -m grevoc.main build words.txt -o en_ru.voc -s en -t ru --translator debug
    python -m grevoc.main merge en_ru.voc part1.voc part2.voc
    python -m grevoc.main show en_ru.voc
"""

import argparse
import logging
import sys
from pathlib import Path

from . import config as cfg
from .builder import VocabularyBuilder
from .errors import GrevocError
from .languages import DEFAULT_REGISTRY
from .logging_config import setup_logging
from .translators import TRANSLATORS, construct
from .vocabulary import Vocabulary
from .wordlist import WordList

logger = logging.getLogger(__name__)


def _add_language_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--source",
        "-s",
        type=str,
        default=cfg.default_source_language(),
        help=f"Source language (default: {cfg.default_source_language()})",
    )
    parser.add_argument(
        "--target",
        "-t",
        type=str,
        default=cfg.default_target_language(),
        help=f"Target language (default: {cfg.default_target_language()})",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="grevoc - bilingual vocabulary builder"
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        help="Path to grevoc.ini (default: searched near the project)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("pairs", help="List supported language pairs")

    count = subparsers.add_parser("count", help="Count words of word lists")
    count.add_argument("wordlists", nargs="+", type=Path)
    count.add_argument("--sort", action="store_true", help="Sort words alphabetically")

    build = subparsers.add_parser("build", help="Translate word lists into a vocabulary")
    build.add_argument("wordlists", nargs="+", type=Path)
    build.add_argument("--output", "-o", type=Path, required=True)
    _add_language_args(build)
    build.add_argument(
        "--translator",
        type=str,
        choices=sorted(TRANSLATORS),
        default=cfg.default_translator(),
        help=f"Translation provider (default: {cfg.default_translator()})",
    )
    build.add_argument(
        "--append",
        "-a",
        action="store_true",
        help="Merge into an existing output vocabulary",
    )

    merge = subparsers.add_parser("merge", help="Merge vocabulary files")
    merge.add_argument("output", type=Path)
    merge.add_argument("inputs", nargs="+", type=Path)
    _add_language_args(merge)

    show = subparsers.add_parser("show", help="Print a vocabulary file")
    show.add_argument("vocabulary", type=Path)
    _add_language_args(show)

    return parser


def cmd_pairs(args: argparse.Namespace, config: cfg.Configuration) -> int:
    for pair in DEFAULT_REGISTRY.format_pairs():
        print(pair)
    return 0


def cmd_count(args: argparse.Namespace, config: cfg.Configuration) -> int:
    wordlist = WordList()
    for path in args.wordlists:
        wordlist.append(path)
    if args.sort:
        wordlist.sort()

    for word, count in wordlist.items():
        print(f"{word}\t{count}")
    return 0


def cmd_build(args: argparse.Namespace, config: cfg.Configuration) -> int:
    print("=" * 60)
    print("grevoc - Vocabulary Builder")
    print("=" * 60)
    print(f"Languages: {args.source}-{args.target}")
    print(f"Translator: {args.translator}")
    print(f"Output: {args.output}")
    print()

    print("[1/3] Counting words...")
    wordlist = WordList()
    for path in args.wordlists:
        counted = wordlist.append(path)
        print(f"  {path}: {counted:,} words")
    print(f"  Distinct: {len(wordlist):,}")

    vocabulary = Vocabulary(args.source, args.target)
    if args.append and args.output.exists():
        vocabulary.import_from_file(args.output)
        print(f"  Existing entries: {len(vocabulary):,}")

    print("\n[2/3] Translating...")
    translator = construct(args.translator, args.source, args.target, config=config)
    stats = VocabularyBuilder(vocabulary, translator).add_wordlist(wordlist)
    print(f"  Added: {stats.added:,}")
    print(f"  Appended: {stats.appended:,}")
    print(f"  Untranslated: {stats.untranslated:,}")
    print(f"  Rejected: {stats.rejected:,}")
    print(f"  Failed: {stats.failed:,}")

    print("\n[3/3] Exporting...")
    vocabulary.export(args.output)
    print(f"  Entries written: {len(vocabulary):,}")

    print("\n" + "=" * 60)
    print("Done!")
    print("=" * 60)
    return 0


def cmd_merge(args: argparse.Namespace, config: cfg.Configuration) -> int:
    vocabulary = Vocabulary(args.source, args.target)
    if args.output.exists():
        vocabulary.import_from_file(args.output)

    for path in args.inputs:
        vocabulary.append(path)
        print(f"  {path}: merged, {len(vocabulary):,} entries")

    vocabulary.export(args.output)
    return 0


def cmd_show(args: argparse.Namespace, config: cfg.Configuration) -> int:
    vocabulary = Vocabulary.from_file(args.vocabulary, args.source, args.target)
    for line in vocabulary.iter_lines():
        print(line)
    return 0


COMMANDS = {
    "pairs": cmd_pairs,
    "count": cmd_count,
    "build": cmd_build,
    "merge": cmd_merge,
    "show": cmd_show,
}


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(level=logging.WARNING, debug=args.verbose)

    try:
        config = cfg.Configuration.load(args.config)
        return COMMANDS[args.command](args, config)
    except GrevocError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"ERROR - {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
