"""
Tables for sorting Uzbek words

Letters consisting of more than one character (g‘, o‘, sh, ch) get replaced by a single
placeholder character before comparing, so that each letter has exactly one position in CHAR_ORDER.
"""
from typing import Dict, Final, Tuple

APOSTROPHES: Final[str] = "ʻʼ'‘’‛′ʽ`"

TO_SORT: Final[Tuple[Tuple[str, str], ...]] = (
    (f"g[{APOSTROPHES}]", "ğ"),
    (f"G[{APOSTROPHES}]", "Ğ"),
    (f"o[{APOSTROPHES}]", "ŏ"),
    (f"O[{APOSTROPHES}]", "Ŏ"),
    (f"[{APOSTROPHES}]", "ʼ"),
    ("sh", "š"),
    ("Sh", "Š"),
    ("SH", "Ö"),
    ("ch", "č"),
    ("Ch", "Č"),
    ("CH", "Ü"),
)

FROM_SORT: Final[Tuple[Tuple[str, str], ...]] = (
    ("ğ", "g‘"),
    ("Ğ", "G‘"),
    ("ŏ", "o‘"),
    ("Ŏ", "O‘"),
    ("š", "sh"),
    ("Š", "Sh"),
    ("Ö", "SH"),
    ("č", "ch"),
    ("Č", "Ch"),
    ("Ü", "CH"),
)

LATIN_LOWER: Final[Tuple[str, ...]] = (
    "a", "b", "d", "e", "f", "g", "h", "i", "j", "k", "l", "m", "n", "o", "p", "q", "r", "s", "t", "u", "v",
    "x", "y", "z", "ŏ", "ğ", "š", "č", "ʼ",
)

LATIN_UPPER: Final[Tuple[str, ...]] = (
    "A", "B", "D", "E", "F", "G", "H", "I", "J", "K", "L", "M", "N", "O", "P", "Q", "R", "S", "T", "U", "V",
    "X", "Y", "Z", "Ŏ", "Ğ", "Š", "Č",
)

CYRILLIC_LOWER: Final[Tuple[str, ...]] = (
    "а", "б", "в", "г", "д", "е", "ё", "ж", "з", "и", "й", "к", "л", "м", "н", "о", "п", "р", "с", "т", "у",
    "ф", "х", "ц", "ч", "ш", "ъ", "ь", "э", "ю", "я", "ў", "қ", "ғ", "ҳ",
)

CYRILLIC_UPPER: Final[Tuple[str, ...]] = (
    "А", "Б", "В", "Г", "Д", "Е", "Ё", "Ж", "З", "И", "Й", "К", "Л", "М", "Н", "О", "П", "Р", "С", "Т", "У",
    "Ф", "Х", "Ц", "Ч", "Ш", "Ъ", "Ь", "Э", "Ю", "Я", "Ў", "Қ", "Ғ", "Ҳ",
)

CHAR_ORDER: Final[Tuple[str, ...]] = LATIN_LOWER + LATIN_UPPER + CYRILLIC_LOWER + CYRILLIC_UPPER

# SH and CH in capitals have no place in CHAR_ORDER and sort like Sh and Ch
EXCEPTIONAL_RANKS: Final[Dict[str, int]] = {
    "Ö": 55,
    "Ü": 56,
}
