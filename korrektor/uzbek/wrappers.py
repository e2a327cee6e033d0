"""
Protect special text from korrektor operations

Email addresses, URLs, usernames, phone numbers and IP addresses must never be transliterated,
corrected or spoken as numbers. We mark them in-line by wrapping them in 〈〉 brackets.
All operations then only work on the parts of the text outside of brackets, and at the end
unwrap() removes all brackets again.

Detectors run one after the other on the already wrapped text. The username detector also
matches complete email addresses (otherwise it would take the domain part of an email for a
username), so emails end up wrapped twice: 〈〈nyan@mail.uz〉〉. That's fine because unwrap()
just deletes every bracket character.
"""
import re
from typing import Callable, Final, Iterator, List, Pattern, Tuple

from korrektor.error import RuleError

OPEN_BRACKET: Final[str] = "〈"
CLOSE_BRACKET: Final[str] = "〉"

_EMAIL: Final[str] = r"[\w-]+(?:\.[\w-]+)*@(?:[\w-]+\.)*\w[\w-]{0,66}\.[a-z]{2,6}(?:\.[a-z]{2})?"
_USERNAME: Final[str] = r"(?<![\w@])@[A-Za-z0-9]\w{1,39}(?![\w-])"
_URL: Final[str] = r"(?i)\b(?:(?:https?|ftp|file|ssh)://|www\.|ftp\.)[-A-Z0-9+&@#/%=~_|$?!:,.]*[A-Z0-9+&@#/%=~_|$]"

# Mobile operators and regional codes of Uzbekistan
_OPERATOR_CODE: Final[str] = r"(?:33|50|55|61|62|65|66|67|69|7[0-9]|88|90|91|93|94|95|97|98|99)"
# With country code separators are allowed everywhere, without it only dashes (90 123-45-67)
# or no separators at all (901234567) so that we don't take a list of numbers for a phone number
_PHONE: Final[str] = (
    r"(?<![\w.+])(?:"
    rf"\+?998[ -]?\(?{_OPERATOR_CODE}\)?[ -]?\d{{3}}[ -]?\d{{2}}[ -]?\d{{2}}"
    rf"|\(?{_OPERATOR_CODE}\)?[ -]?\d{{3}}-\d{{2}}-\d{{2}}"
    rf"|{_OPERATOR_CODE}\d{{7}}"
    r")(?!\w|\.\d)"
)

_IPV4_PART: Final[str] = r"(?:25[0-5]|2[0-4][0-9]|1[0-9][0-9]|[1-9]?[0-9])"
_IPV4_ADDRESS: Final[str] = rf"(?:{_IPV4_PART}\.){{3}}{_IPV4_PART}"
_IPV4: Final[str] = rf"(?<![\w.]){_IPV4_ADDRESS}(?!\w|\.\d)"

_HEX: Final[str] = r"[0-9a-fA-F]{1,4}"
# Longer alternatives first, the lookarounds make the regex engine backtrack into the next alternative
# if an alternative only matched the beginning of an address
_IPV6: Final[str] = (
    r"(?<![\w:.])(?:"
    rf"::(?:ffff(?::0{{1,4}})?:)?{_IPV4_ADDRESS}"
    rf"|(?:{_HEX}:){{1,4}}:{_IPV4_ADDRESS}"
    rf"|(?:{_HEX}:){{7}}{_HEX}"
    rf"|fe80:(?::[0-9a-fA-F]{{0,4}}){{0,4}}%[0-9a-zA-Z]+"
    rf"|(?:{_HEX}:){{1,6}}:{_HEX}"
    rf"|(?:{_HEX}:){{1,5}}(?::{_HEX}){{1,2}}"
    rf"|(?:{_HEX}:){{1,4}}(?::{_HEX}){{1,3}}"
    rf"|(?:{_HEX}:){{1,3}}(?::{_HEX}){{1,4}}"
    rf"|(?:{_HEX}:){{1,2}}(?::{_HEX}){{1,5}}"
    rf"|{_HEX}:(?::{_HEX}){{1,6}}"
    rf"|(?:{_HEX}:){{1,7}}:"
    rf"|:(?:(?::{_HEX}){{1,7}}|:)"
    r")(?![\w:]|\.[0-9a-fA-F])"
)


def _compile(name: str, pattern: str) -> Pattern:
    try:
        return re.compile(pattern)
    except re.error as err:
        raise RuleError(f"Detector {name} can't be compiled: {err}") from err


MAIL_DETECTOR: Final[Pattern] = _compile("mail", _EMAIL)
URL_DETECTOR: Final[Pattern] = _compile("url", _URL)
USERNAME_DETECTOR: Final[Pattern] = _compile("username", f"{_EMAIL}|{_USERNAME}")
PHONE_DETECTOR: Final[Pattern] = _compile("phone", _PHONE)
IPV4_DETECTOR: Final[Pattern] = _compile("ipv4", _IPV4)
IPV6_DETECTOR: Final[Pattern] = _compile("ipv6", _IPV6)

_BRACKETS: Final[Pattern] = re.compile(f"[{OPEN_BRACKET}{CLOSE_BRACKET}]")


def wrap_regex(text: str, detector: Pattern) -> str:
    """Wrap all matches of detector in 〈〉 brackets

    Matches are collected first and the text is rebuilt from left to right,
    so each occurrence is wrapped exactly once.
    """
    return detector.sub(lambda match: OPEN_BRACKET + match.group(0) + CLOSE_BRACKET, text)


def wrap_mails(text: str) -> str:
    return wrap_regex(text, MAIL_DETECTOR)


def wrap_urls(text: str) -> str:
    return wrap_regex(text, URL_DETECTOR)


def wrap_usernames(text: str) -> str:
    """Wrap @usernames (and email addresses, see module documentation)"""
    return wrap_regex(text, USERNAME_DETECTOR)


def wrap_phones(text: str) -> str:
    """Wrap phone numbers of Uzbekistan, with or without 998 country code"""
    return wrap_regex(text, PHONE_DETECTOR)


def wrap_ips(text: str) -> str:
    """Wrap IPv6 and IPv4 addresses

    IPv6 goes first and IPv4 addresses are only searched outside of already protected text:
    otherwise an embedded IPv4 address (::ffff:192.0.2.1) would get wrapped on its own.
    """
    return map_unprotected(wrap_regex(text, IPV6_DETECTOR), lambda segment: wrap_regex(segment, IPV4_DETECTOR))


def get_wrapped_text(text: str) -> str:
    """Wrap emails, URLs and usernames (order is important: emails first)"""
    result = wrap_mails(text)
    result = wrap_urls(result)
    return wrap_usernames(result)


def wrap(text: str) -> str:
    """Wrap all special text we know of: emails, URLs, usernames, phone numbers and IP addresses"""
    return wrap_ips(wrap_phones(get_wrapped_text(text)))


def unwrap(text: str) -> str:
    """Remove all brackets (regardless of nesting), giving back the original text"""
    return _BRACKETS.sub("", text)


def iter_segments(text: str) -> Iterator[Tuple[str, bool]]:
    """
    Split wrapped text into its protected and unprotected parts

    Yields (segment, is_protected) tuples. Protected segments include their brackets
    (also nested ones). Unprotected segments contain no opening bracket, but a stray
    closing bracket without a matching opening one stays part of the unprotected segment.
    Concatenating all segments gives back text.
    """
    depth = 0
    start = 0
    for pos, char in enumerate(text):
        if char == OPEN_BRACKET:
            if depth == 0 and pos > start:
                yield text[start:pos], False
                start = pos
            depth += 1
        elif char == CLOSE_BRACKET and depth > 0:
            depth -= 1
            if depth == 0:
                yield text[start:pos + 1], True
                start = pos + 1
    if start < len(text):
        # an unbalanced opening bracket protects everything until the end
        yield text[start:], depth > 0


def map_unprotected(text: str, func: Callable[[str], str]) -> str:
    """Apply func to each unprotected segment of wrapped text and leave protected segments as they are"""
    parts: List[str] = []
    for segment, is_protected in iter_segments(text):
        parts.append(segment if is_protected else func(segment))
    return "".join(parts)


def protect(text: str, func: Callable[[str], str]) -> str:
    """Shorthand: wrap text, apply func outside of protected spans and unwrap again"""
    return unwrap(map_unprotected(wrap(text), func))
