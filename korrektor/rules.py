"""
Rule pipeline: ordered pattern -> replacement tables

A RuleSet is applied rule by rule, each rule working on the complete output of the rules before it.
So the order of rules is significant: e.g. the modifier letters g‘ and o‘ need to be replaced before
a broader rule for all remaining apostrophes runs.

Rule sets are built once (at import time of the module defining them) and are read-only afterwards.
"""
from enum import Enum
import re
from typing import Dict, Final, Iterable, Iterator, Match, Pattern, Tuple

from korrektor.error import RuleError


class PatternRule:
    """One regular expression with its replacement template (like r'\\1-\\2')

    This data structure is meant to be read-only after creation.
    """
    __slots__ = ['pattern', 'replacement', 'regex']

    def __init__(self, pattern: str, replacement: str, flags: int = 0):
        """
        @param pattern: regular expression (lookarounds are allowed)
        @param replacement: replacement template as understood by re.sub()
        @param flags: flags for re.compile()
        Raises RuleError if pattern can't be compiled
        """
        try:
            self.regex: Final[Pattern] = re.compile(pattern, flags)
        except re.error as err:
            raise RuleError(f"Invalid pattern {pattern!r}: {err}") from err
        self.pattern: Final[str] = pattern
        self.replacement: Final[str] = replacement

    def apply(self, text: str) -> str:
        return self.regex.sub(self.replacement, text)

    def __str__(self) -> str:
        return f"{self.pattern} -> {self.replacement}"


class RuleSet:
    """Immutable, ordered sequence of PatternRules"""
    __slots__ = ['name', '_rules']

    def __init__(self, name: str, pairs: Iterable[Tuple[str, str]], flags: int = 0):
        """
        @param name: used in log and error messages
        @param pairs: (pattern, replacement) tuples in the order they should be applied
        """
        self.name: Final[str] = name
        self._rules: Final[Tuple[PatternRule, ...]] = tuple(PatternRule(pattern, replacement, flags)
                                                              for pattern, replacement in pairs)

    def apply(self, text: str) -> str:
        """Apply all rules one after the other"""
        for rule in self._rules:
            text = rule.apply(text)
        return text

    def __iter__(self) -> Iterator[PatternRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __str__(self) -> str:
        return f"RuleSet {self.name} ({len(self._rules)} rules)"


def apply(text: str, rule_set: RuleSet) -> str:
    """Apply rule_set to text: rule N sees the cumulative result of rules 1..N-1"""
    return rule_set.apply(text)


class Casing(Enum):
    LOWER = "lower"
    UPPER = "upper"
    TITLE = "title"
    MIXED = "mixed"


def detect_casing(word: str) -> Casing:
    """Classify the casing of a matched word

    Only the first character decides about title case: "G‘ozal" is TITLE even though
    str.istitle() would say otherwise because of the apostrophe.
    """
    if word == word.lower():
        return Casing.LOWER
    if word == word.upper():
        return Casing.UPPER
    if word[:1] == word[:1].upper() and word[1:] == word[1:].lower():
        return Casing.TITLE
    # Also every title-cased match of several words ("Nuqtayi Nazar"): the replacement is used as it is
    return Casing.MIXED


def apply_casing(casing: Casing, replacement: str) -> str:
    """Transform replacement so that it has the given casing (MIXED: take it literally)"""
    if casing == Casing.UPPER:
        return replacement.upper()
    if casing == Casing.TITLE:
        return replacement[:1].upper() + replacement[1:]
    return replacement


def replace_preserving_case(text: str, rule_set: RuleSet) -> str:
    """Casing-aware variant of apply(), used for lists of whole words

    The rules of rule_set should be compiled with re.IGNORECASE and have lowercase replacements.
    For every match we check if it is lowercase, uppercase or title case and apply the same
    casing to the replacement, so "geliy", "GELIY" and "Geliy" are all found by one rule.
    """
    for rule in rule_set:
        def replace_match(match: Match, rule: PatternRule = rule) -> str:
            return apply_casing(detect_casing(match.group(0)), match.expand(rule.replacement))
        text = rule.regex.sub(replace_match, text)
    return text


def replace_letters(text: str, table: Dict[str, str]) -> str:
    """Replace single letters according to table (e.g. the last step of transliteration)"""
    return text.translate(str.maketrans(table))
