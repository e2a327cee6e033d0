"""
Test the spell checkers (the web service is mocked)

Run tests:
    python3 -m unittest test_spellchecker.py
"""
from os.path import abspath, dirname, join
import tempfile
import unittest
from unittest.mock import Mock, patch

import requests

from korrektor.spellchecker import CONNECT_RETRIES, TIMEOUT, DictionarySpellChecker, Misspelling, \
                                   RemoteSpellChecker

TEST_URL = "https://spellcheck.example.com/check"


def json_response(json) -> requests.Response:
    response = requests.Response()
    response.status_code = 200
    response.json = Mock()
    response.json.return_value = json
    return response


class TestDictionarySpellChecker(unittest.TestCase):
    def setUp(self):
        self.spellchecker = DictionarySpellChecker({"uz-lat": ["chiroyli", "choyli", "G‘ozal", "maʼno", "bu"]})

    def test_check(self):
        self.assertEqual(self.spellchecker.check("Bu g‘ozal maʼno", "uz-lat"), [])
        result = self.spellchecker.check("bu chroyli", "uz-lat")
        self.assertEqual(len(result), 1)
        self.assertEqual(result[0].word, "chroyli")
        self.assertEqual(result[0].offset, 3)
        self.assertEqual(result[0].suggestions[:2], ["chiroyli", "choyli"])

    def test_max_suggestions(self):
        spellchecker = DictionarySpellChecker({"uz-lat": ["chiroyli", "choyli"]}, max_suggestions=1)
        self.assertEqual(spellchecker.check("chroyli", "uz-lat"), [Misspelling("chroyli", 0, ["chiroyli"])])

    def test_no_suggestions(self):
        self.assertEqual(self.spellchecker.check("xyzxyz", "uz-lat"), [Misspelling("xyzxyz", 0, [])])

    def test_unknown_language(self):
        with self.assertLogs('korrektor.spellchecker', level='WARNING'):
            self.assertEqual(self.spellchecker.check("чройли", "uz-cyr"), [])

    def test_from_files(self):
        with tempfile.TemporaryDirectory() as folder:
            path = join(folder, "uz-cyr.txt")
            with open(path, 'w', encoding='utf-8') as f:
                f.write("# Test\nчиройли\n\nчойли\n")
            spellchecker = DictionarySpellChecker.from_files({"uz-cyr": path})
        result = spellchecker.check("чиройли чройли", "uz-cyr")
        self.assertEqual(len(result), 1)
        self.assertEqual(result[0].offset, 8)
        self.assertEqual(result[0].suggestions[0], "чиройли")

    def test_from_files_missing(self):
        with self.assertRaises(OSError):
            DictionarySpellChecker.from_files({"uz-lat": join(dirname(abspath(__file__)), "does-not-exist.txt")})


class TestRemoteSpellChecker(unittest.TestCase):
    def setUp(self):
        self.spellchecker = RemoteSpellChecker(TEST_URL)

    @patch("korrektor.spellchecker.requests.post")
    def test_check(self, mock_post):
        mock_post.return_value = json_response([{"word": "chroyli", "offset": 3, "suggestions": ["chiroyli"]}])
        self.assertEqual(self.spellchecker.check("bu chroyli", "uz-lat"),
                         [Misspelling("chroyli", 3, ["chiroyli"])])
        mock_post.assert_called_once_with(TEST_URL, json={"text": "bu chroyli", "language": "uz-lat"},
                                          timeout=TIMEOUT)

    @patch("korrektor.spellchecker.requests.post")
    def test_max_suggestions(self, mock_post):
        spellchecker = RemoteSpellChecker(TEST_URL, max_suggestions=2)
        mock_post.return_value = json_response([{"word": "a", "offset": 0, "suggestions": ["b", "c", "d"]}])
        self.assertEqual(spellchecker.check("a", "uz-lat")[0].suggestions, ["b", "c"])

    @patch("korrektor.spellchecker.requests.post")
    def test_check_with_timeouts(self, mock_post):
        # Let's emulate repeated Timeouts and assert that requests.post() got called CONNECT_RETRIES times
        mock_post.side_effect = requests.exceptions.Timeout
        with self.assertLogs('korrektor.spellchecker', level='WARNING') as logs:
            self.assertEqual(self.spellchecker.check("chroyli", "uz-lat"), [])
            self.assertEqual(len(logs.output), CONNECT_RETRIES + 1)
        self.assertEqual(mock_post.call_count, CONNECT_RETRIES)

    @patch("korrektor.spellchecker.requests.post")
    def test_check_with_single_timeout(self, mock_post):
        # One request times out and afterwards all works fine again
        mock_post.side_effect = [requests.exceptions.Timeout, json_response([])]
        with self.assertLogs('korrektor.spellchecker', level='WARNING') as logs:
            self.assertEqual(self.spellchecker.check("chiroyli", "uz-lat"), [])
            self.assertEqual(len(logs.output), 1)   # there should be only one warning
        self.assertEqual(mock_post.call_count, 2)

    @patch("korrektor.spellchecker.requests.post")
    def test_check_with_json_decode_error(self, mock_post):
        response = json_response(None)
        response.json.side_effect = requests.exceptions.JSONDecodeError("Expecting value", "", 0)
        mock_post.return_value = response
        with self.assertLogs('korrektor.spellchecker', level='WARNING'):
            self.assertEqual(self.spellchecker.check("chroyli", "uz-lat"), [])
        mock_post.assert_called_once()

    @patch("korrektor.spellchecker.requests.post")
    def test_check_with_connection_error(self, mock_post):
        mock_post.side_effect = requests.exceptions.ConnectionError("no network")
        with self.assertLogs('korrektor.spellchecker', level='WARNING'):
            self.assertEqual(self.spellchecker.check("chroyli", "uz-lat"), [])
        mock_post.assert_called_once()

    @patch("korrektor.spellchecker.requests.post")
    def test_check_with_unexpected_response(self, mock_post):
        mock_post.return_value = json_response([{"word": "chroyli"}])
        with self.assertLogs('korrektor.spellchecker', level='WARNING'):
            self.assertEqual(self.spellchecker.check("chroyli", "uz-lat"), [])


if __name__ == '__main__':
    unittest.main()
