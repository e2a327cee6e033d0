"""
Sort Uzbek words in alphabetical order

Both Latin and Cyrillic words can be sorted. The Uzbek Latin alphabet has letters consisting of
two characters (sh, ch, g‘, o‘) and its own order (... x y z o‘ g‘ sh ch ʼ), so we can't
rely on Python's default string comparison.

Example:
    sort("G‘ozal estafeta chilonzor o'zbek chiroyli") == "estafeta o‘zbek chilonzor chiroyli G‘ozal"
"""
from enum import Enum
from typing import Dict, Final, Iterable, List, Mapping

from korrektor.error import InvalidChar, RuleError
from korrektor.rules import RuleSet
from korrektor.uzbek.constants import collation


class Ordering(Enum):
    LESS = -1
    EQUAL = 0
    GREATER = 1

    def reverse(self) -> "Ordering":
        return Ordering(-self.value)


class CollationTable:
    """
    Everything needed for comparing words: the alphabet order and the rule sets
    for converting words into their sortable form and back.

    This data structure is meant to be read-only after creation.
    """
    __slots__ = ['to_sort', 'from_sort', '_ranks']

    def __init__(self, char_order: Iterable[str], exceptional_ranks: Mapping[str, int],
                 to_sort: RuleSet, from_sort: RuleSet):
        """
        Raises RuleError if a character appears twice in char_order or if a placeholder
        of the sortable form has no rank
        """
        ranks: Dict[str, int] = {}
        for position, char in enumerate(char_order):
            if char in ranks:
                raise RuleError(f"Character {char} appears twice in the collation alphabet")
            ranks[char] = position
        for char, rank in exceptional_ranks.items():
            if char in ranks:
                raise RuleError(f"Exceptional character {char} is also part of the collation alphabet")
            ranks[char] = rank
        for rule in from_sort:
            if rule.pattern not in ranks:
                raise RuleError(f"Placeholder {rule.pattern} of {from_sort.name} has no rank")
        self.to_sort: Final[RuleSet] = to_sort
        self.from_sort: Final[RuleSet] = from_sort
        self._ranks: Final[Dict[str, int]] = ranks

    def rank(self, char: str) -> int:
        """Position of char in the alphabet. Raises InvalidChar for unknown characters"""
        try:
            return self._ranks[char]
        except KeyError:
            raise InvalidChar(char) from None


UZBEK_COLLATION: Final[CollationTable] = CollationTable(
    collation.CHAR_ORDER,
    collation.EXCEPTIONAL_RANKS,
    RuleSet("TO_SORT", collation.TO_SORT),
    RuleSet("FROM_SORT", collation.FROM_SORT),
)


def to_sortable(text: str, table: CollationTable = UZBEK_COLLATION) -> str:
    """Replace letters of two characters with their single-character placeholders"""
    return table.to_sort.apply(text)


def from_sortable(text: str, table: CollationTable = UZBEK_COLLATION) -> str:
    """Replace placeholders with the original letters"""
    return table.from_sort.apply(text)


def compare_sortable(word1: str, word2: str, table: CollationTable = UZBEK_COLLATION) -> Ordering:
    """Compare two words which are already in sortable form"""
    for char1, char2 in zip(word1[:min(len(word1), len(word2)) - 1], word2):
        rank1 = table.rank(char1)
        rank2 = table.rank(char2)
        if rank1 < rank2:
            return Ordering.LESS
        if rank1 > rank2:
            return Ordering.GREATER

    if len(word1) < len(word2):
        return Ordering.LESS
    if len(word1) > len(word2):
        return Ordering.GREATER
    return Ordering.EQUAL


def compare(word1: str, word2: str, table: CollationTable = UZBEK_COLLATION) -> Ordering:
    """
    Compare two Uzbek words

    We walk through both words up to the length of the shorter word minus one,
    the first character with a different position in the alphabet decides.
    If all those characters are the same, the shorter word comes first.
    Raises InvalidChar if a character doesn't belong to the Uzbek alphabets.
    """
    return compare_sortable(to_sortable(word1, table), to_sortable(word2, table), table)


def sort_words(words: List[str], table: CollationTable = UZBEK_COLLATION) -> List[str]:
    """Bubble sort of words in sortable form (returns a new list, stable)

    Quadratic in the worst case, which is fine for the short word lists we're dealing with.
    """
    result = list(words)
    unsorted_length = len(result)
    swapped = True
    while swapped:
        swapped = False
        for i in range(unsorted_length - 1):
            if compare_sortable(result[i], result[i + 1], table) == Ordering.GREATER:
                result[i], result[i + 1] = result[i + 1], result[i]
                swapped = True
        unsorted_length -= 1
    return result


def sort(text: str, table: CollationTable = UZBEK_COLLATION) -> str:
    """
    Sort whitespace-separated words in ascending alphabetical order

    Returns the sorted words separated by a single space. Apostrophe variants are normalized
    on the way (o'zbek -> o‘zbek).
    Raises InvalidChar if a word contains characters outside the Uzbek alphabets.
    """
    sortable: List[str] = to_sortable(text, table).split()
    # compare_sortable() doesn't look at every character, so check all of them first
    for word in sortable:
        for char in word:
            table.rank(char)
    return from_sortable(" ".join(sort_words(sortable, table)), table)
