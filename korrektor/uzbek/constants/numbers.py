"""Number words of the Uzbek language (Latin script)"""
from typing import Dict, Final, Tuple

# index 0 is "bir" (1), index 18 is "o‘n to‘qqiz" (19)
NUM_1_TO_19: Final[Tuple[str, ...]] = (
    "bir", "ikki", "uch", "to‘rt", "besh", "olti", "yetti", "sakkiz", "to‘qqiz", "o‘n",
    "o‘n bir", "o‘n ikki", "o‘n uch", "o‘n to‘rt", "o‘n besh", "o‘n olti", "o‘n yetti", "o‘n sakkiz",
    "o‘n to‘qqiz",
)

# index 0 is "yigirma" (20), index 7 is "to‘qson" (90)
TENS: Final[Tuple[str, ...]] = (
    "yigirma", "o‘ttiz", "qirq", "ellik", "oltmish", "yetmish", "sakson", "to‘qson",
)

ZERO: Final[str] = "nol"

# power of ten -> scale word
SCALES: Final[Dict[int, str]] = {
    2: "yuz",
    3: "ming",
    6: "million",
    9: "milliard",
    12: "trillion",
    15: "kvadrillion",
    18: "kvintillion",
    21: "sekstillion",
    24: "septillion",
}

# The fraction 0.75 is spoken "yuzdan yetmish besh" (seventy five of a hundred):
# the prefix depends on the number of digits after the decimal point (index 0: one digit)
FLOAT_PREFIX: Final[Tuple[str, ...]] = (
    "o‘ndan", "yuzdan", "mingdan",
    "o‘n mingdan", "yuz mingdan", "milliondan",
    "o‘n milliondan", "yuz milliondan", "milliarddan",
    "o‘n milliarddan", "yuz milliarddan", "trilliondan",
    "o‘n trilliondan", "yuz trilliondan", "kvadrilliondan",
    "o‘n kvadrilliondan", "yuz kvadrilliondan", "kvintilliondan",
)

DECIMAL_SEPARATOR: Final[str] = "butun"

MAX_DIGITS: Final[int] = 18
