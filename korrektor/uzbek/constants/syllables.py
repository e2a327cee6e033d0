"""Tables for splitting Uzbek words into syllables"""
from typing import Dict, Final, FrozenSet

from korrektor.uzbek.constants.collation import APOSTROPHES

# Letters written with two characters count as one letter
GRAPHEME: Final[str] = f"[GgOo][{APOSTROPHES}]|[Ss][Hh]|[Cc][Hh]|."

VOWELS: Final[FrozenSet[str]] = frozenset([
    "a", "e", "i", "o", "u",
    *(f"o{apostrophe}" for apostrophe in APOSTROPHES),
    "а", "о", "у", "э", "и", "я", "ё", "ю", "е", "ў",
])

# Words where the general rules give a wrong result (ng stays together)
EXCEPTIONS: Final[Dict[str, str]] = {
    "singil": "si-ngil",
    "dengiz": "de-ngiz",
    "peshayvon": "pe-shayvon",
    "peshona": "pe-shona",
    "maishat": "mai-shat",
    "ishingizni": "ishi-ngiz-ni",
    "ishingizda": "ishi-ngiz-da",
}
