"""
Command line interface for korrektor

Examples:
    korrektor sort "G‘ozal estafeta chilonzor o'zbek chiroyli"
    korrektor number "12.5 kg, 1024 so‘m"
    korrektor translit --script cyr "g'ozal geliy"
    echo "2022-йил 12 yanvar" | korrektor correct
    korrektor check --lang lat "chroyli"
    korrektor check --json "chroyli"

Configuration (only needed for check) is read from config.ini (see config.example.ini).
"""
import argparse
import json
from configparser import ConfigParser
import logging
from os.path import abspath, join
import sys
from typing import List, Optional

from korrektor.engine import Korrektor
from korrektor.error import KorrektorError


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments

    Returns:
        parsed arguments (command and text)
    """
    log_levels: List[str] = ['debug', 'info', 'warning', 'error']

    parser = argparse.ArgumentParser(prog="korrektor", description="Normalization tools for Uzbek texts")
    parser.add_argument("-c", "--config", help="Path to config file (default: config.ini in working directory)")
    parser.add_argument("-l", "--loglevel", choices=log_levels, default="warning", help="set loglevel for the script")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("sort", help="Sort words in Uzbek alphabetical order")
    subparsers.add_parser("number", help="Convert numbers to Uzbek words")
    translit = subparsers.add_parser("translit", help="Transliterate between Latin and Cyrillic")
    translit.add_argument("-s", "--script", choices=["cyr", "lat"],
                          help="Target alphabet (default: as configured, otherwise lat)")
    subparsers.add_parser("correct", help="Correct apostrophes, dates and fixed expressions")
    check = subparsers.add_parser("check", help="Show spelling suggestions")
    check.add_argument("--lang", choices=["cyr", "lat"], default="lat", help="Alphabet of the text")
    check.add_argument("--json", action="store_true", help="Print the suggestions as JSON")
    subparsers.add_parser("syllables", help="Split words into syllables")

    for subparser in subparsers.choices.values():
        subparser.add_argument("text", nargs="?", help="Text to process (read from stdin if omitted)")
    return parser.parse_args(argv)


def setup_logging(loglevel: str) -> None:
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    sh = logging.StreamHandler(sys.stdout)
    fformatter = logging.Formatter('%(levelname)s: %(message)s')
    sh.setFormatter(fformatter)
    numeric_level = getattr(logging, loglevel.upper(), None)
    assert isinstance(numeric_level, int)
    sh.setLevel(numeric_level)
    root.addHandler(sh)


def run(korrektor: Korrektor, args: argparse.Namespace, text: str) -> str:
    """Execute the command given in args on text and return the output to print"""
    if args.command == "sort":
        return korrektor.sort(text)
    if args.command == "number":
        return korrektor.numbers_to_word(text)
    if args.command == "translit":
        return korrektor.transliterate(text, args.script)
    if args.command == "correct":
        return korrektor.correct(text)
    if args.command == "syllables":
        return korrektor.syllables(text)
    if args.command == "check":
        bad_words = korrektor.check(text, args.lang)
        if args.json:
            return json.dumps([bad_word.to_dict() for bad_word in bad_words], ensure_ascii=False)
        lines: List[str] = []
        for bad_word in bad_words:
            lines.append(f"{bad_word.position}: {bad_word.misspelled} -> {', '.join(bad_word.suggestions)}")
        return "\n".join(lines)
    raise ValueError(f"Unknown command {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_arguments(argv)
    setup_logging(args.loglevel)

    config = ConfigParser()
    config.read(args.config if args.config is not None else join(abspath("."), "config.ini"))

    text: str = args.text if args.text is not None else sys.stdin.read().rstrip("\n")
    try:
        print(run(Korrektor(config), args, text))
    except KorrektorError as err:
        print(err, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
