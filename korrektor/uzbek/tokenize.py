"""
Split Uzbek words into syllables (for hyphenation)

Each syllable has exactly one vowel. Consonants between two vowels are distributed like this:
* no consonant: split between the vowels (mai-shat is an exception)
* one consonant: it starts the next syllable (o-na)
* two consonants: split between them (bol-ta)
* three or more: only the last one starts the next syllable (mart-ta)
g‘, o‘, sh and ch are single letters.

Example: tokenize("O‘zbekiston chiroyli") == "O‘z-be-kis-ton chi-roy-li"
"""
import re
from typing import Final, List, Pattern

from korrektor.rules import apply_casing, detect_casing
from korrektor.uzbek.constants.collation import APOSTROPHES
from korrektor.uzbek.constants.syllables import EXCEPTIONS, GRAPHEME, VOWELS
from korrektor.uzbek.wrappers import protect

GRAPHEMES: Final[Pattern] = re.compile(GRAPHEME)
WORD: Final[Pattern] = re.compile(f"[^\\W\\d_]+(?:[{APOSTROPHES}][^\\W\\d_]*)*")
HYPHEN: Final[str] = "-"


def _is_vowel(grapheme: str) -> bool:
    return grapheme.lower() in VOWELS


def split_syllables(word: str) -> List[str]:
    """
    Returns the syllables of word

    A word without vowels (or with only one) is returned as one syllable.
    """
    exception = EXCEPTIONS.get(word.lower())
    if exception is not None:
        return apply_casing(detect_casing(word), exception).split(HYPHEN)

    graphemes: List[str] = GRAPHEMES.findall(word)
    vowels: List[int] = [index for index, grapheme in enumerate(graphemes) if _is_vowel(grapheme)]
    if len(vowels) < 2:
        return [word]

    boundaries: List[int] = [0]
    for current, following in zip(vowels, vowels[1:]):
        consonants = following - current - 1
        if consonants == 0:
            boundaries.append(following)
        elif consonants <= 2:
            boundaries.append(current + consonants)
        else:
            boundaries.append(following - 1)
    boundaries.append(len(graphemes))

    return ["".join(graphemes[start:end]) for start, end in zip(boundaries, boundaries[1:])]


def hyphenate(word: str) -> str:
    return HYPHEN.join(split_syllables(word))


def _hyphenate_words(text: str) -> str:
    return WORD.sub(lambda match: hyphenate(match.group(0)), text)


def tokenize(text: str) -> str:
    """Replace every word in text by its syllables joined with hyphens"""
    return protect(text, _hyphenate_words)
