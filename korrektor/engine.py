"""
Korrektor: one object giving access to all text operations, configured with config.ini

Most functions of korrektor.uzbek don't need any configuration and can be used directly.
Only spelling suggestions need a spell checker, which is set up here from the [spellchecker]
section of the configuration:

[spellchecker]
backend = dictionary
dictionary_lat = /path/to/words_lat.txt
dictionary_cyr = /path/to/words_cyr.txt
url = https://example.com/spellcheck
max_suggestions = 7

backend is either dictionary (word lists) or remote (url is needed then)
"""
from configparser import ConfigParser
import logging
from typing import Dict, List, Optional

from korrektor.spellchecker import DictionarySpellChecker, LANGUAGE_CYRILLIC, LANGUAGE_LATIN, MAX_SUGGESTIONS, \
                                   RemoteSpellChecker, SpellChecker
from korrektor.uzbek import alphabetic, corrector, number, tokenize, transliterator


class Korrektor:
    """Facade for sorting, numbers, transliteration, correction and spell checking"""

    def __init__(self, config: Optional[ConfigParser] = None, spellchecker: Optional[SpellChecker] = None):
        """
        @param config: Configuration (see config.example.ini); can be empty
        @param spellchecker: Use this spell checker instead of the one configured in config
        """
        self.logger: logging.Logger = logging.getLogger('korrektor.engine')
        self._config: ConfigParser = config if config is not None else ConfigParser()
        self._spellchecker: Optional[SpellChecker] = spellchecker
        self.default_script: str = self._config.get('transliteration', 'default_script', fallback=transliterator.LATIN)

    @property
    def spellchecker(self) -> SpellChecker:
        """The configured spell checker, created on first use

        Raises RuntimeError if the configuration is missing or incomplete
        """
        if self._spellchecker is None:
            self._spellchecker = self._create_spellchecker()
        return self._spellchecker

    def _create_spellchecker(self) -> SpellChecker:
        if not self._config.has_option('spellchecker', 'backend'):
            raise RuntimeError("Missing settings for spellchecker in config.ini")
        backend = self._config.get('spellchecker', 'backend')
        max_suggestions = self._config.getint('spellchecker', 'max_suggestions', fallback=MAX_SUGGESTIONS)
        if backend == 'remote':
            if not self._config.has_option('spellchecker', 'url'):
                raise RuntimeError("Missing setting url for remote spellchecker in config.ini")
            self.logger.info(f"Using remote spellchecker {self._config.get('spellchecker', 'url')}")
            return RemoteSpellChecker(self._config.get('spellchecker', 'url'), max_suggestions)
        if backend == 'dictionary':
            files: Dict[str, str] = {}
            if self._config.has_option('spellchecker', 'dictionary_lat'):
                files[LANGUAGE_LATIN] = self._config.get('spellchecker', 'dictionary_lat')
            if self._config.has_option('spellchecker', 'dictionary_cyr'):
                files[LANGUAGE_CYRILLIC] = self._config.get('spellchecker', 'dictionary_cyr')
            if not files:
                raise RuntimeError("Missing settings dictionary_lat / dictionary_cyr for spellchecker in config.ini")
            return DictionarySpellChecker.from_files(files, max_suggestions)
        raise RuntimeError(f"Unknown spellchecker backend {backend} in config.ini")

    def sort(self, text: str) -> str:
        return alphabetic.sort(text)

    def numbers_to_word(self, text: str) -> str:
        return number.numbers_to_word(text)

    def transliterate(self, text: str, script: Optional[str] = None) -> str:
        """Transliterate to script ("cyr" or "lat"), default as configured"""
        return transliterator.to(text, script if script is not None else self.default_script)

    def correct(self, text: str) -> str:
        return corrector.correct(text)

    def syllables(self, text: str) -> str:
        return tokenize.tokenize(text)

    def check(self, text: str, lang: str = "lat") -> List[corrector.BadWord]:
        """Spelling suggestions for text ("cyr" or "lat"), positions refer to text"""
        self.logger.debug(f"Checking spelling ({lang}): {text}")
        return corrector.get_correction_suggestions(text, lang, self.spellchecker)
