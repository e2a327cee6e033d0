"""Rule tables for orthographic corrections of Uzbek texts (both alphabets)"""
from typing import Final, Tuple

from korrektor.uzbek.constants.collation import APOSTROPHES
from korrektor.uzbek.constants.transliteration import MONTHS_CYRILLIC, MONTHS_LATIN

Rules = Tuple[Tuple[str, str], ...]

CORRECT: Final[Rules] = (
    # g‘ and o‘ are written with ‘, the tutuq belgisi inside of words with ʼ
    (f"([GgOo])[{APOSTROPHES.replace('‘', '')}]", r"\1‘"),
    (f"(?<=\\w)(?<![GgOo])[{APOSTROPHES.replace('ʼ', '')}](?=\\w)", "ʼ"),
    # Dates: 12-yanvar, 2022-yil but 12 январ, 2022 йил
    (rf"(\d+) ({MONTHS_LATIN})", r"\1-\2"),
    (rf"(\d+) (yil)\b", r"\1-\2"),
    (rf"(\d+)-({MONTHS_CYRILLIC}|{MONTHS_CYRILLIC.upper()})", r"\1 \2"),
    (r"(\d+)-(йил|ЙИЛ|й\.)", r"\1 \2"),
    (r"\bnuqtai nazar", "nuqtayi nazar"),
    (r"\btarjimai hol", "tarjimayi hol"),
    (" {2,}", " "),
)

# Abbreviations (UzMU, BMT, ...) can't be checked
ABBREVIATIONS: Final[str] = r"\b[A-Z]+[a-z]+[A-Z]+[a-z]*\b|\b[A-Z]{2,}[a-z]*\b"

# Particles attached to a word with a hyphen: stul-ku, kelgan-da
MODIFIERS: Final[Rules] = (
    (ABBREVIATIONS, ""),
    (r"-(a|ku|yu|u|da|ya|chi)\b", ""),
    ("-", " "),
)
