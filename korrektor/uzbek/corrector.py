"""
Orthographic corrections and spelling suggestions

correct() fixes mistakes that can be found with rules (apostrophes, date formats, ...).
get_correction_suggestions() asks a spell checker about all parts of a text that
are not protected (emails, URLs, usernames, phone numbers and IP addresses).
"""
import logging
from typing import Final, List

from korrektor.rules import RuleSet
from korrektor.spellchecker import LANGUAGE_CYRILLIC, LANGUAGE_LATIN, SpellChecker
from korrektor.uzbek.constants import correction
from korrektor.uzbek.wrappers import iter_segments, protect, wrap, OPEN_BRACKET, CLOSE_BRACKET

logger = logging.getLogger('korrektor.uzbek.corrector')

CORRECT: Final[RuleSet] = RuleSet("CORRECT", correction.CORRECT)
MODIFIERS: Final[RuleSet] = RuleSet("MODIFIERS", correction.MODIFIERS)


class BadWord:
    """
    A misspelled word with its position in the original text and suggestions for correcting it

    This data structure is meant to be read-only after creation.
    """
    __slots__ = ['misspelled', 'position', 'suggestions']

    def __init__(self, misspelled: str, position: int, suggestions: List[str]):
        self.misspelled: Final[str] = misspelled
        self.position: Final[int] = position
        self.suggestions: Final[List[str]] = suggestions

    def __eq__(self, other) -> bool:
        if not isinstance(other, BadWord):
            return NotImplemented
        return (self.misspelled, self.position, self.suggestions) == \
            (other.misspelled, other.position, other.suggestions)

    def __repr__(self) -> str:
        return f"BadWord({self.misspelled!r}, {self.position}, {self.suggestions!r})"

    def to_dict(self) -> dict:
        return {"misspelled": self.misspelled, "position": self.position, "suggestions": self.suggestions}


def correct(text: str) -> str:
    """Fix apostrophes, date formats, fixed expressions and multiple spaces.
    Emails, URLs etc. are not changed"""
    return protect(text, CORRECT.apply)


def remove_modifiers(text: str) -> str:
    """
    Prepare text for spell checking: remove abbreviations and particles (-ku, -chi, ...)
    and replace remaining hyphens with spaces.

    Example: remove_modifiers("stul- stul-ku") == "stul  stul"
    """
    return MODIFIERS.apply(text)


def get_language(lang: str) -> str:
    """Language tag for the spell checker: "cyr" -> "uz-cyr", everything else -> "uz-lat" """
    return LANGUAGE_CYRILLIC if lang == "cyr" else LANGUAGE_LATIN


def get_correction_suggestions(text: str, lang: str, spellchecker: SpellChecker) -> List[BadWord]:
    """
    Check spelling of all parts of text that are not protected

    The spell checker is called once for every unprotected segment.
    @param lang: "cyr" or "lat" (everything else is taken as "lat")
    @return misspelled words with their position in text (not in the segment)
    """
    language = get_language(lang)
    result: List[BadWord] = []
    position = 0    # position in the original (unwrapped) text
    for segment, is_protected in iter_segments(wrap(text)):
        if is_protected:
            position += len(segment) - segment.count(OPEN_BRACKET) - segment.count(CLOSE_BRACKET)
            continue
        for misspelling in spellchecker.check(segment, language):
            result.append(BadWord(misspelling.word, position + misspelling.offset, misspelling.suggestions))
        position += len(segment)
    logger.debug(f"Found {len(result)} misspelled words")
    return result
