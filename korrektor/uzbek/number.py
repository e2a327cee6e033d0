"""
Spell out numbers in Uzbek words

Examples:
    integer_to_word("1024") == "bir ming yigirma to‘rt"
    float_to_word("574.789") == "besh yuz yetmish to‘rt butun mingdan yetti yuz sakson to‘qqiz"
    numbers_to_word("12, salom 12.5") == "o‘n ikki, salom o‘n ikki butun o‘ndan besh"

Only the Latin script is supported for the output.
"""
import logging
import re
from typing import Final, Match, Pattern

from korrektor.error import InvalidNumber, NumberOverflow
from korrektor.uzbek.constants.numbers import DECIMAL_SEPARATOR, FLOAT_PREFIX, MAX_DIGITS, NUM_1_TO_19, \
                                              SCALES, TENS, ZERO
from korrektor.uzbek.wrappers import map_unprotected, unwrap, wrap

logger = logging.getLogger('korrektor.uzbek.number')

# Only ASCII digits: \d would also accept other decimal digits like ٣
INTEGER: Final[Pattern] = re.compile(r"[0-9]+")
FLOAT: Final[Pattern] = re.compile(r"[0-9]+\.[0-9]+")
# A float in running text, but not a part of something like 1.2.3
FLOAT_RUN: Final[Pattern] = re.compile(r"(?<![0-9.])[0-9]+\.[0-9]+(?![0-9]|\.[0-9])")
INTEGER_RUN: Final[Pattern] = INTEGER


def _scale_word(power: int, value: str) -> str:
    try:
        return SCALES[power]
    except KeyError:
        raise NumberOverflow(value, f"No word for 10^{power}") from None


def _compose(number: int, power: int) -> str:
    """
    Speak number as <quotient> <scale word> <remainder>, splitting at 10^power.
    The remainder is left out if it is zero.

    Each call works on a number with fewer digits than before (the quotient has at most three digits,
    the remainder fewer than power), so the recursion depth is bounded by the number of digits.
    """
    quotient, remainder = divmod(number, 10 ** power)
    result = f"{_speak(quotient)} {_scale_word(power, str(number))}"
    if remainder != 0:
        result += " " + _speak(remainder)
    return result


def _speak(number: int) -> str:
    if number == 0:
        return ZERO
    if number < 20:
        return NUM_1_TO_19[number - 1]
    if number < 100:
        tens, units = divmod(number, 10)
        if units == 0:
            return TENS[tens - 2]
        return f"{TENS[tens - 2]} {NUM_1_TO_19[units - 1]}"
    if number < 1000:
        return _compose(number, 2)

    # find the smallest power with number < 10^power
    power = 4
    while power < 27 and number >= 10 ** power:
        power += 1
    if power % 3 != 0:
        # e.g. 3456 (power 4) -> "uch ming" + "to‘rt yuz ellik olti"
        return _compose(number, power - power % 3)
    # e.g. 123456 (power 6) -> "bir yuz yigirma uch ming" + "to‘rt yuz ellik olti"
    return _compose(number, power - 3)


def integer_to_word(number: str) -> str:
    """
    Returns the Uzbek words for an integer given as string of digits

    Raises InvalidNumber if number doesn't consist only of digits 0-9
    (remove whitespace, signs and thousands separators before)
    Raises NumberOverflow if number has more than 18 digits
    """
    if INTEGER.fullmatch(number) is None:
        raise InvalidNumber(number, "Not a valid integer")
    if len(number) > MAX_DIGITS:
        raise NumberOverflow(number, f"Integer should not contain more than {MAX_DIGITS} digits")
    return _speak(int(number))


def float_to_word(number: str) -> str:
    """
    Returns the Uzbek words for a decimal number like "3.75"

    The result is <integer part> butun <prefix> <fraction part>, the prefix telling
    how many digits the fraction part has: "3.75" -> "uch butun yuzdan yetmish besh"
    Raises InvalidNumber if number isn't of the form digits.digits (write 3.0 instead of 3)
    Raises NumberOverflow if one of the parts has more than 18 digits
    """
    if FLOAT.fullmatch(number) is None:
        raise InvalidNumber(number, "Not a valid floating-point number")
    integer_part, fraction_part = number.split(".")
    if len(fraction_part) > MAX_DIGITS:
        raise NumberOverflow(fraction_part,
                             f"Precision part should not contain more than {MAX_DIGITS} digits")
    integer = integer_to_word(integer_part)
    fraction = integer_to_word(fraction_part)
    return f"{integer} {DECIMAL_SEPARATOR} {FLOAT_PREFIX[len(fraction_part) - 1]} {fraction}"


def _convert_segment(segment: str) -> str:
    def replace_float(match: Match) -> str:
        return float_to_word(match.group(0))

    def replace_integer(match: Match) -> str:
        return integer_to_word(match.group(0))

    segment = FLOAT_RUN.sub(replace_float, segment)
    return INTEGER_RUN.sub(replace_integer, segment)


def numbers_to_word(text: str) -> str:
    """
    Replace all numbers in text with their Uzbek words

    Phone numbers, IP addresses (and all other special text like emails and URLs)
    are left untouched. Digit sequences that are part of something else like 1.2.3
    are converted part by part.
    Raises InvalidNumber / NumberOverflow if a number can't be converted: then nothing is
    returned at all (no partially converted text)
    """
    wrapped = wrap(text)
    logger.debug(f"Converting numbers in {wrapped}")
    return unwrap(map_unprotected(wrapped, _convert_segment))
