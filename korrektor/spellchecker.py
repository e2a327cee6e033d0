"""
Spell checkers that can be used for get_correction_suggestions()

korrektor doesn't detect misspellings itself, it hands over text (without emails, URLs etc.)
to a spell checker. Two implementations are available:
* DictionarySpellChecker: looks up words in word lists (one word per line), suggestions
  are the most similar words of the list
* RemoteSpellChecker: asks a spell checking web service
"""
from abc import ABC, abstractmethod
import difflib
import logging
import re
from typing import Any, Dict, Final, Iterable, List, Pattern, Set

import requests

TIMEOUT: int = 30           # Timeout after 30s (prevent indefinite hanging when there is network issues)
CONNECT_RETRIES: int = 3    # In case a request timed out, let's try again up to three times
MAX_SUGGESTIONS: int = 7

LANGUAGE_LATIN: Final[str] = "uz-lat"
LANGUAGE_CYRILLIC: Final[str] = "uz-cyr"

# Words consist of letters, apostrophes may be inside of a word (g‘alaba, maʼno)
WORD: Final[Pattern] = re.compile(r"[^\W\d_]+(?:[ʻʼ'‘’`][^\W\d_]+)*")

logger = logging.getLogger('korrektor.spellchecker')


class Misspelling:
    """
    A word the spell checker didn't accept

    This data structure is meant to be read-only after creation.
    """
    __slots__ = ['word', 'offset', 'suggestions']

    def __init__(self, word: str, offset: int, suggestions: List[str]):
        """
        @param offset: position of the first character of word in the checked text
        @param suggestions: ordered by relevance (best suggestion first)
        """
        self.word: Final[str] = word
        self.offset: Final[int] = offset
        self.suggestions: Final[List[str]] = suggestions

    def __eq__(self, other) -> bool:
        if not isinstance(other, Misspelling):
            return NotImplemented
        return (self.word, self.offset, self.suggestions) == (other.word, other.offset, other.suggestions)

    def __repr__(self) -> str:
        return f"Misspelling({self.word!r}, {self.offset}, {self.suggestions!r})"


class SpellChecker(ABC):
    """Base class: find misspelled words in a text"""

    @abstractmethod
    def check(self, text: str, language: str) -> List[Misspelling]:
        """
        @param text: Text without any protected parts (emails, URLs etc.)
        @param language: "uz-lat" or "uz-cyr"
        @return misspelled words in the order they appear in text
        """


class DictionarySpellChecker(SpellChecker):
    """Spell checking with word lists: every word that isn't in the list is a misspelling"""

    def __init__(self, words: Dict[str, Iterable[str]], max_suggestions: int = MAX_SUGGESTIONS):
        """
        @param words: language ("uz-lat" / "uz-cyr") -> all correct words of that language
        """
        self._words: Final[Dict[str, Set[str]]] = {
            language: {word.lower() for word in word_list} for language, word_list in words.items()
        }
        self._sorted_words: Final[Dict[str, List[str]]] = {
            language: sorted(word_set) for language, word_set in self._words.items()
        }
        self.max_suggestions: Final[int] = max_suggestions

    @classmethod
    def from_files(cls, files: Dict[str, str], max_suggestions: int = MAX_SUGGESTIONS) -> "DictionarySpellChecker":
        """
        Read word lists from text files (UTF-8, one word per line, empty lines and lines starting with # are ignored)
        @param files: language -> path to word list
        """
        words: Dict[str, List[str]] = {}
        for language, path in files.items():
            with open(path, 'r', encoding='utf-8') as f:
                words[language] = [line.strip() for line in f
                                   if line.strip() != "" and not line.startswith("#")]
            logger.info(f"Loaded {len(words[language])} words for {language} from {path}")
        return cls(words, max_suggestions)

    def check(self, text: str, language: str) -> List[Misspelling]:
        if language not in self._words:
            logger.warning(f"No word list for language {language}, can't check spelling.")
            return []
        result: List[Misspelling] = []
        for match in WORD.finditer(text):
            word = match.group(0)
            if word.lower() in self._words[language]:
                continue
            suggestions = difflib.get_close_matches(word.lower(), self._sorted_words[language],
                                                    n=self.max_suggestions)
            logger.debug(f"Unknown word {word} at position {match.start()}, suggestions: {suggestions}")
            result.append(Misspelling(word, match.start(), suggestions))
        return result


class RemoteSpellChecker(SpellChecker):
    """
    Spell checking with a web service

    We POST {"text": ..., "language": ...} as JSON and expect a JSON list of
    {"word": ..., "offset": ..., "suggestions": [...]} objects.
    Network problems are not fatal: we log a warning and report no misspellings.
    """

    def __init__(self, url: str, max_suggestions: int = MAX_SUGGESTIONS):
        self.url: Final[str] = url
        self.max_suggestions: Final[int] = max_suggestions

    def _post(self, payload: Dict[str, str]) -> Any:
        """
        Wrapper around requests.post to handle timeouts and other issues
        @return JSON (as from response.json()) or [] in case of an error
        """
        retries = 0
        while retries < CONNECT_RETRIES:
            try:
                response = requests.post(self.url, json=payload, timeout=TIMEOUT)
                logger.debug(f"Spell checking request to {self.url}... {response.status_code}")
                response.raise_for_status()
                return response.json()
            except requests.exceptions.Timeout:
                retries += 1
                logger.warning(f"Request timed out. This was attempt #{retries}. Trying again...")
            except requests.exceptions.JSONDecodeError as e:
                logger.warning(f"Unexpected error: Received an invalid JSON: {e}")
                return []
            except requests.exceptions.RequestException as e:
                logger.warning(f"Spell checking request failed: {e}")
                return []

        logger.warning(f"Tried {retries} times to reach {self.url}, all timed out. Giving up.")
        return []

    def check(self, text: str, language: str) -> List[Misspelling]:
        json = self._post({"text": text, "language": language})
        result: List[Misspelling] = []
        try:
            for entry in json:
                result.append(Misspelling(entry["word"], int(entry["offset"]),
                                          list(entry["suggestions"])[:self.max_suggestions]))
        except (KeyError, TypeError, ValueError) as err:
            logger.warning(f"Unexpected response of spell checking service: {err}")
            return []
        return result
