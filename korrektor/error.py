"""
Errors of korrektor

Validation errors (InvalidChar, InvalidNumber, NumberOverflow) are raised when a caller
hands over input we can't process. They carry the offending value and a human-readable reason.

RuleError is different: it means one of our built-in tables is broken, so it is raised
when the table gets constructed (at import time) and not while processing user input.
"""


class KorrektorError(Exception):
    """Base class for all validation errors"""


class InvalidChar(KorrektorError):
    """A character has no position in the Uzbek collation alphabet"""
    def __init__(self, char: str):
        self.char: str = char
        super().__init__(f'Invalid character: "{char}"! '
                         'Only Latin and Cyrillic alphabets for Uzbek language are supported.')


class InvalidNumber(KorrektorError):
    """A string that should represent a number is malformed"""
    def __init__(self, value: str, reason: str):
        self.value: str = value
        self.reason: str = reason
        super().__init__(self._message())

    def _message(self) -> str:
        return f"{self.reason}: {self.value}!"


class NumberOverflow(InvalidNumber):
    """A number has more digits than we can speak"""
    def _message(self) -> str:
        return f"{self.reason}: {self.value}"


class RuleError(Exception):
    """A built-in rule table or detector pattern is invalid (configuration error)"""
