"""
Test the Korrektor facade and the command line interface

Run tests:
    python3 -m unittest test_engine.py
"""
from configparser import ConfigParser
import io
import json
from os.path import join
import tempfile
import unittest
from unittest.mock import Mock, patch

from korrektor import cli
from korrektor.engine import Korrektor
from korrektor.spellchecker import DictionarySpellChecker, Misspelling, RemoteSpellChecker, SpellChecker


def make_config(**sections) -> ConfigParser:
    config = ConfigParser()
    config.read_dict(sections)
    return config


class TestKorrektor(unittest.TestCase):

    def test_operations(self):
        korrektor = Korrektor()
        self.assertEqual(korrektor.sort("olma anor"), "anor olma")
        self.assertEqual(korrektor.numbers_to_word("1024"), "bir ming yigirma to‘rt")
        self.assertEqual(korrektor.transliterate("салом"), "salom")
        self.assertEqual(korrektor.transliterate("salom", "cyr"), "салом")
        self.assertEqual(korrektor.correct("2022-йил"), "2022 йил")
        self.assertEqual(korrektor.syllables("kitob"), "ki-tob")

    def test_default_script(self):
        korrektor = Korrektor(make_config(transliteration={"default_script": "cyr"}))
        self.assertEqual(korrektor.transliterate("salom"), "салом")
        self.assertEqual(korrektor.transliterate("салом", "lat"), "salom")

    def test_check_with_given_spellchecker(self):
        spellchecker = Mock(spec=SpellChecker)
        spellchecker.check.return_value = [Misspelling("chroyli", 0, ["chiroyli"])]
        korrektor = Korrektor(spellchecker=spellchecker)
        result = korrektor.check("chroyli", "lat")
        self.assertEqual(result[0].misspelled, "chroyli")
        spellchecker.check.assert_called_once_with("chroyli", "uz-lat")

    def test_missing_spellchecker_config(self):
        with self.assertRaises(RuntimeError):
            Korrektor().check("chroyli")
        with self.assertRaises(RuntimeError):
            Korrektor(make_config(spellchecker={"backend": "remote"})).check("chroyli")
        with self.assertRaises(RuntimeError):
            Korrektor(make_config(spellchecker={"backend": "dictionary"})).check("chroyli")
        with self.assertRaises(RuntimeError):
            Korrektor(make_config(spellchecker={"backend": "magic"})).check("chroyli")

    def test_remote_spellchecker_config(self):
        korrektor = Korrektor(make_config(spellchecker={"backend": "remote", "url": "https://example.com",
                                                        "max_suggestions": "3"}))
        self.assertIsInstance(korrektor.spellchecker, RemoteSpellChecker)
        self.assertEqual(korrektor.spellchecker.max_suggestions, 3)

    def test_dictionary_spellchecker_config(self):
        with tempfile.TemporaryDirectory() as folder:
            path = join(folder, "uz-lat.txt")
            with open(path, 'w', encoding='utf-8') as f:
                f.write("chiroyli\nchoyli\n")
            korrektor = Korrektor(make_config(spellchecker={"backend": "dictionary", "dictionary_lat": path}))
            self.assertIsInstance(korrektor.spellchecker, DictionarySpellChecker)
            result = korrektor.check("bu nyan@mail.uz chroyli")
        self.assertEqual([(bad_word.misspelled, bad_word.position) for bad_word in result],
                         [("bu", 0), ("chroyli", 16)])


class TestCli(unittest.TestCase):

    def test_parse_arguments(self):
        args = cli.parse_arguments(["-l", "debug", "translit", "-s", "cyr", "salom"])
        self.assertEqual(args.loglevel, "debug")
        self.assertEqual(args.command, "translit")
        self.assertEqual(args.script, "cyr")
        self.assertEqual(args.text, "salom")
        args = cli.parse_arguments(["sort"])
        self.assertIsNone(args.text)
        with self.assertRaises(SystemExit):
            cli.parse_arguments(["unknown"])

    def test_run(self):
        korrektor = Korrektor()
        self.assertEqual(cli.run(korrektor, cli.parse_arguments(["number"]), "12 kitob"), "o‘n ikki kitob")
        self.assertEqual(cli.run(korrektor, cli.parse_arguments(["translit"]), "салом"), "salom")
        self.assertEqual(cli.run(korrektor, cli.parse_arguments(["syllables"]), "kitob"), "ki-tob")
        self.assertEqual(cli.run(korrektor, cli.parse_arguments(["correct"]), "12 yanvar"), "12-yanvar")

    def test_run_check(self):
        spellchecker = Mock(spec=SpellChecker)
        spellchecker.check.return_value = [Misspelling("chroyli", 0, ["chiroyli", "choyli"])]
        output = cli.run(Korrektor(spellchecker=spellchecker), cli.parse_arguments(["check"]), "chroyli")
        self.assertEqual(output, "0: chroyli -> chiroyli, choyli")

    def test_run_check_json(self):
        spellchecker = Mock(spec=SpellChecker)
        spellchecker.check.return_value = [Misspelling("chroyli", 3, ["chiroyli"])]
        output = cli.run(Korrektor(spellchecker=spellchecker), cli.parse_arguments(["check", "--json"]), "ot chroyli")
        self.assertEqual(json.loads(output), [{"misspelled": "chroyli", "position": 3, "suggestions": ["chiroyli"]}])
        spellchecker.check.return_value = []
        self.assertEqual(cli.run(Korrektor(spellchecker=spellchecker), cli.parse_arguments(["check", "--json"]),
                                 "ot"), "[]")

    @patch("korrektor.cli.setup_logging")
    def test_main(self, mock_logging):
        with patch("sys.stdout", new_callable=io.StringIO) as stdout:
            self.assertEqual(cli.main(["sort", "olma anor"]), 0)
        self.assertEqual(stdout.getvalue(), "anor olma\n")
        mock_logging.assert_called_once_with("warning")

    @patch("korrektor.cli.setup_logging")
    def test_main_stdin(self, mock_logging):
        with patch("sys.stdin", io.StringIO("1024\n")), patch("sys.stdout", new_callable=io.StringIO) as stdout:
            self.assertEqual(cli.main(["number"]), 0)
        self.assertEqual(stdout.getvalue(), "bir ming yigirma to‘rt\n")

    @patch("korrektor.cli.setup_logging")
    def test_main_error(self, mock_logging):
        with patch("sys.stderr", new_callable=io.StringIO) as stderr:
            self.assertEqual(cli.main(["number", "12345678901234567890"]), 1)
        self.assertIn("more than 18 digits", stderr.getvalue())


if __name__ == '__main__':
    unittest.main()
