"""
Rule tables for transliteration between the Uzbek Latin and Cyrillic alphabets

All tables are (pattern, replacement) pairs applied in the given order.
"""
from typing import Dict, Final, List, Tuple

from korrektor.uzbek.constants.collation import APOSTROPHES

Rules = Tuple[Tuple[str, str], ...]

LATIN_UPPER: Final[str] = "A-ZË"
LATIN_LOWER: Final[str] = "a-zë"
CYRILLIC_UPPER: Final[str] = "А-ЯЁЎҚҒҲ"
CYRILLIC_LOWER: Final[str] = "а-яёўқғҳ"
UPPER: Final[str] = f"[{LATIN_UPPER}{CYRILLIC_UPPER}]"
LOWER: Final[str] = f"[{LATIN_LOWER}{CYRILLIC_LOWER}]"

LATIN_VOWELS: Final[str] = "aeiouAEIOU"
CYRILLIC_VOWELS_LOWER: Final[str] = "аоуэияёюеў"
CYRILLIC_VOWELS_UPPER: Final[str] = "АОУЭИЯЁЮЕЎ"
CYRILLIC_VOWELS: Final[str] = CYRILLIC_VOWELS_LOWER + CYRILLIC_VOWELS_UPPER

MONTHS_LATIN: Final[str] = "yanvar|fevral|mart|aprel|may|iyun|iyul|avgust|sentabr|oktabr|noyabr|dekabr"
MONTHS_CYRILLIC: Final[str] = "январ|феврал|март|апрел|май|июн|июл|август|сентябр|октябр|ноябр|декабр"


######################################
# Latin -> Cyrillic
######################################

# g‘ and o‘ are written with many different apostrophe characters: normalize them first.
# Every other apostrophe is the tutuq belgisi ʼ (becomes ъ)
CYR_APOSTROPHES: Final[Rules] = (
    (f"([GgOo])[{APOSTROPHES}]", r"\1‘"),
    (f"(?<![GgOo])[{APOSTROPHES.replace('ʼ', '')}]", "ʼ"),
)

CYR_QUOTES: Final[Rules] = (
    ("([a-zA-Zа-яА-ЯёЁўқғҳЎҚҒҲʼ‘?!.0-9])[“”\"]", r"\1»"),
    ("[“”\"„]", "«"),
)

# Words that can't be transliterated letter by letter. They are matched at the beginning
# of a word (so also inflected forms like sirkda are found), regardless of casing
RETRANSLIT: Final[Rules] = (
    ("sirk", "цирк"),
    ("konsert", "концерт"),
    ("sentr", "центр"),
    ("sement", "цемент"),
    ("aksiya", "акция"),
    ("stansiya", "станция"),
    ("funksiya", "функция"),
    ("revolyutsiya", "революция"),
    ("obyekt", "объект"),
    ("subyekt", "субъект"),
    ("podyezd", "подъезд"),
    ("syezd", "съезд"),
    ("kompyuter", "компьютер"),
    ("intervyu", "интервью"),
    ("pavilyon", "павильон"),
    ("batalyon", "батальон"),
    ("mo‘tabar", "мўътабар"),
    ("mo‘tadil", "мўътадил"),
    ("mo‘jiza", "мўъжиза"),
    ("nuqtayi nazar", "нуқтаи назар"),
    ("tarjimayi hol", "таржимаи ҳол"),
    ("isʼhoq", "исҳоқ"),
    ("sentabr", "сентябр"),
    ("oktabr", "октябр"),
)

_AFTER_VOWEL: Final[str] = f"(?<=[{LATIN_VOWELS}{CYRILLIC_VOWELS}])"

# Letters depending on their context. Order is important: g‘ and o‘ must be gone before yo is replaced
CYR_CONTEXT: Final[Rules] = (
    (r"\bE", "Э"),
    (r"\be", "э"),
    (f"{_AFTER_VOWEL}E", "Э"),
    (f"{_AFTER_VOWEL}e", "э"),
    ("G‘", "Ғ"),
    ("g‘", "ғ"),
    ("O‘", "Ў"),
    ("o‘", "ў"),
    ("S[Hh]", "Ш"),
    ("sh", "ш"),
    ("C[Hh]", "Ч"),
    ("ch", "ч"),
    ("Y[Ee]", "Е"),
    ("y[Ee]", "е"),
    ("Y[Oo]", "Ё"),
    ("yo", "ё"),
    ("Y[Uu]", "Ю"),
    ("yu", "ю"),
    ("Y[Aa]", "Я"),
    ("ya", "я"),
)

_LATIN_TO_CYRILLIC_LOWER: Final[Dict[str, str]] = {
    "a": "а", "b": "б", "d": "д", "e": "е", "f": "ф", "g": "г", "h": "ҳ", "i": "и", "j": "ж", "k": "к",
    "l": "л", "m": "м", "n": "н", "o": "о", "p": "п", "q": "қ", "r": "р", "s": "с", "t": "т", "u": "у",
    "v": "в", "x": "х", "y": "й", "z": "з", "c": "с", "w": "в",
}

LATIN_TO_CYRILLIC: Final[Dict[str, str]] = {
    **_LATIN_TO_CYRILLIC_LOWER,
    **{latin.upper(): cyrillic.upper() for latin, cyrillic in _LATIN_TO_CYRILLIC_LOWER.items()},
    "ʼ": "ъ",
}

_CYRILLIC_UPPER_CLASS: Final[str] = f"[A-Z{CYRILLIC_UPPER}]"

CYR_CORRECT: Final[Rules] = (
    (f"ъ(?={_CYRILLIC_UPPER_CLASS})", "Ъ"),
    (f"(?<={_CYRILLIC_UPPER_CLASS})ъ", "Ъ"),
    ("(?<=[Мм])ў(?=ж)", "ўъ"),
    ("(?<=М)Ў(?=Ж)", "ЎЪ"),
    (r"(?<=\w)-(да|ДА)", r"\1"),
    (rf"(\d+)-({MONTHS_CYRILLIC})", r"\1 \2"),
    (rf"(\d+)-({MONTHS_CYRILLIC.upper()})", r"\1 \2"),
    (r"(\d+)-(йил|ЙИЛ)", r"\1 \2"),
)


######################################
# Cyrillic -> Latin
######################################

LAT_QUOTES: Final[Rules] = (
    ("«", "“"),
    ("»", "”"),
    ('"([^"]*)"', r"“\1”"),
    ("„", "“"),
)


def _cased_rules(letters: str, latin: str, before: str = "", upper_before: str = "") -> List[Tuple[str, str]]:
    """
    Rules for a Cyrillic capital letter that becomes more than one Latin letter (Ш -> Sh / SH)

    If the next letter is a capital or the letter stands after a capital (and isn't followed
    by a lowercase letter) the whole word is written in capitals: ШАҲАР -> SHAHAR.
    Otherwise only the first Latin letter is a capital: Шаҳар -> Shahar, Ш -> Sh
    @param letters: regex character class content with the capital letter(s)
    @param latin: the Latin lowercase equivalent ("sh")
    @param before: lookbehind condition the letter must fulfill (empty: always)
    @param upper_before: lookbehind used instead of "any capital" for the second rule
    """
    if not upper_before:
        upper_before = f"(?<={UPPER})"
    return [
        (f"{before}[{letters}](?={UPPER})", latin.upper()),
        (f"{upper_before}[{letters}](?!{LOWER})", latin.upper()),
        (f"{before}[{letters}]", latin.capitalize()),
    ]


# е is ye at the beginning of a word, after a vowel and after ъ/ь
_YE_CONTEXT: Final[str] = rf"(?:\b|(?<=[{CYRILLIC_VOWELS}ъьЪЬ]))"
_AFTER_CYRILLIC_VOWEL: Final[str] = f"(?<=[{CYRILLIC_VOWELS}])"

LAT_CONTEXT: Final[Rules] = tuple(
    [(f"{_YE_CONTEXT}е", "ye")]
    + _cased_rules("Е", "ye", _YE_CONTEXT, f"(?<=[{CYRILLIC_VOWELS_UPPER}ЪЬ])")
    + [("[ъЪ](?=[ёюяЁЮЯ]|[yY][eE])", "")]
    + [(f"{_AFTER_CYRILLIC_VOWEL}ц", "ts")]
    + _cased_rules("Ц", "ts", _AFTER_CYRILLIC_VOWEL, f"(?<=[{CYRILLIC_VOWELS_UPPER}])")
    + _cased_rules("ЁË", "yo")
    + _cased_rules("Ю", "yu")
    + _cased_rules("Я", "ya")
    + _cased_rules("ШЩ", "sh")
    + _cased_rules("Ч", "ch")
)

_CYRILLIC_TO_LATIN_LOWER: Final[Dict[str, str]] = {
    "а": "a", "б": "b", "в": "v", "г": "g", "д": "d", "е": "e", "ё": "yo", "ж": "j", "з": "z", "и": "i",
    "й": "y", "к": "k", "л": "l", "м": "m", "н": "n", "о": "o", "п": "p", "р": "r", "с": "s", "т": "t",
    "у": "u", "ф": "f", "х": "x", "ц": "s", "ч": "ch", "ш": "sh", "щ": "sh", "ы": "i", "э": "e",
    "ю": "yu", "я": "ya", "қ": "q", "ҳ": "h", "ë": "yo",
}

CYRILLIC_TO_LATIN: Final[Dict[str, str]] = {
    **_CYRILLIC_TO_LATIN_LOWER,
    **{cyrillic.upper(): latin.capitalize() for cyrillic, latin in _CYRILLIC_TO_LATIN_LOWER.items()},
    "ъ": "ʼ",
    "Ъ": "ʼ",
    "ь": "",
    "Ь": "",
    "ў": "o‘",
    "Ў": "Oʼ",
    "ғ": "g‘",
    "Ғ": "Gʼ",
}

LAT_CORRECT: Final[Rules] = (
    ("([Ss])entyabr", r"\1entabr"),
    ("([Oo])ktyabr", r"\1ktabr"),
    (rf"(\d+) ({MONTHS_LATIN})", r"\1-\2"),
    (r"(\d+) (yil)\b", r"\1-\2"),
    (r"\bnuqtai nazar", "nuqtayi nazar"),
    (r"\btarjimai hol", "tarjimayi hol"),
)
