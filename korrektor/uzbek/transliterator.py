"""
Transliteration between the Latin and Cyrillic alphabets of Uzbek

Examples:
    to_cyrillic("g'ozal G'OZAL G'ozal geliy") == "ғозал ҒОЗАЛ Ғозал гелий"
    to_latin("ғозал ҒОЗАЛ Ғозал гелий") == "g‘ozal GʼOZAL Gʼozal geliy"

to_cyrillic() and to_latin() transliterate everything they get. Use to() for texts
that may contain emails, URLs etc.: these will be left untouched.
"""
import logging
import re
from typing import Final

from korrektor.rules import RuleSet, replace_letters, replace_preserving_case
from korrektor.uzbek.constants import transliteration as tables
from korrektor.uzbek.wrappers import protect

logger = logging.getLogger('korrektor.uzbek.transliterator')

CYR_APOSTROPHES: Final[RuleSet] = RuleSet("CYR_APOSTROPHES", tables.CYR_APOSTROPHES)
CYR_QUOTES: Final[RuleSet] = RuleSet("CYR_QUOTES", tables.CYR_QUOTES)
RETRANSLIT: Final[RuleSet] = RuleSet("RETRANSLIT", ((r"\b" + word, replacement)
                                                   for word, replacement in tables.RETRANSLIT), re.IGNORECASE)
CYR_CONTEXT: Final[RuleSet] = RuleSet("CYR_CONTEXT", tables.CYR_CONTEXT)
CYR_CORRECT: Final[RuleSet] = RuleSet("CYR_CORRECT", tables.CYR_CORRECT)

LAT_QUOTES: Final[RuleSet] = RuleSet("LAT_QUOTES", tables.LAT_QUOTES)
LAT_CONTEXT: Final[RuleSet] = RuleSet("LAT_CONTEXT", tables.LAT_CONTEXT)
LAT_CORRECT: Final[RuleSet] = RuleSet("LAT_CORRECT", tables.LAT_CORRECT)

CYRILLIC: Final[str] = "cyr"
LATIN: Final[str] = "lat"


def to_cyrillic(text: str) -> str:
    """Transliterate Latin text to Cyrillic"""
    text = CYR_APOSTROPHES.apply(text)
    text = CYR_QUOTES.apply(text)
    text = replace_preserving_case(text, RETRANSLIT)
    text = CYR_CONTEXT.apply(text)
    text = replace_letters(text, tables.LATIN_TO_CYRILLIC)
    return CYR_CORRECT.apply(text)


def to_latin(text: str) -> str:
    """Transliterate Cyrillic text to Latin"""
    text = LAT_QUOTES.apply(text)
    text = LAT_CONTEXT.apply(text)
    text = replace_letters(text, tables.CYRILLIC_TO_LATIN)
    return LAT_CORRECT.apply(text)


def to(text: str, script: str) -> str:
    """
    Transliterate text, leaving emails, URLs, usernames, phone numbers and IP addresses as they are

    @param script: "cyr" for Cyrillic, everything else means Latin
    """
    if script == CYRILLIC:
        return protect(text, to_cyrillic)
    if script != LATIN:
        logger.info(f"Unknown script {script}, transliterating to Latin")
    return protect(text, to_latin)
