"""
Test sorting by Uzbek alphabetical order

Run tests:
    python3 -m unittest test_alphabetic.py
"""
import unittest

from korrektor.error import InvalidChar, RuleError
from korrektor.rules import RuleSet
from korrektor.uzbek.alphabetic import CollationTable, Ordering, UZBEK_COLLATION, compare, from_sortable, sort, \
                                       to_sortable


class TestAlphabetic(unittest.TestCase):

    def test_to_sortable(self):
        self.assertEqual(to_sortable("G'g' O'o' ShSHsh ChCHch ʻʼ'‘’‛′ʽ`"), "Ğğ Ŏŏ ŠÖš ČÜč ʼʼʼʼʼʼʼʼʼ")
        self.assertEqual(to_sortable("chiroyli"), "čiroyli")

    def test_from_sortable(self):
        self.assertEqual(from_sortable("Ğğ Ŏŏ ŠÖš ČÜč"), "G‘g‘ O‘o‘ ShSHsh ChCHch")
        for word in ["g‘ozal", "O‘zbekiston", "SHAHAR", "chiroyli", "maʼno", "тошкент"]:
            self.assertEqual(from_sortable(to_sortable(word)), word)

    def test_compare(self):
        self.assertEqual(compare("olma", "olma"), Ordering.EQUAL)
        self.assertEqual(compare("anor", "olma"), Ordering.LESS)
        self.assertEqual(compare("olma", "anor"), Ordering.GREATER)
        # o‘ and g‘ come after z, sh and ch after g‘
        self.assertEqual(compare("zamon", "o‘zbek"), Ordering.LESS)
        self.assertEqual(compare("g‘alaba", "shahar"), Ordering.LESS)
        self.assertEqual(compare("shahar", "choy"), Ordering.LESS)
        # all lowercase letters come before uppercase ones, Latin before Cyrillic
        self.assertEqual(compare("zebra", "Anor"), Ordering.LESS)
        self.assertEqual(compare("Zebra", "анор"), Ordering.LESS)
        # SH has the same position as Sh
        self.assertEqual(compare("SHa", "Sha"), Ordering.EQUAL)

    def test_compare_is_antisymmetric(self):
        words = ["olma", "o‘rik", "shaftoli", "Choy", "anor", "ANOR", "тарвуз"]
        for first in words:
            for second in words:
                self.assertEqual(compare(first, second), compare(second, first).reverse())

    def test_compare_prefix(self):
        # the last character of the shorter word isn't compared
        self.assertEqual(compare("ab", "abc"), Ordering.LESS)
        self.assertEqual(compare("ax", "ab"), Ordering.EQUAL)
        self.assertEqual(compare("abc", "ab"), Ordering.GREATER)

    def test_compare_invalid_char(self):
        with self.assertRaises(InvalidChar) as cm:
            compare("1olma", "olma")
        self.assertEqual(cm.exception.char, "1")
        self.assertIn('Invalid character: "1"!', str(cm.exception))

    def test_sort(self):
        self.assertEqual(sort("G‘ozal estafeta chilonzor o'zbek chiroyli"),
                         "estafeta o‘zbek chilonzor chiroyli G‘ozal")
        self.assertEqual(sort("shahar  choy\nanor"), "anor shahar choy")
        self.assertEqual(sort("тарвуз анор олма"), "анор олма тарвуз")
        self.assertEqual(sort(""), "")
        self.assertEqual(sort("   "), "")
        with self.assertRaises(InvalidChar):
            sort("1-son olma")

    def test_sort_checks_every_char(self):
        for text in ["olma 5", "olma olma1", "olma x@y", "olma c"]:
            with self.subTest(text=text), self.assertRaises(InvalidChar):
                sort(text)

    def test_collation_table_validation(self):
        with self.assertRaises(RuleError):
            CollationTable(["a", "b", "a"], {}, RuleSet("to", []), RuleSet("from", []))
        with self.assertRaises(RuleError):
            CollationTable(["a", "b"], {"a": 0}, RuleSet("to", []), RuleSet("from", []))
        with self.assertRaises(RuleError):
            # placeholder š has no position
            CollationTable(["a", "s", "h"], {}, RuleSet("to", [("sh", "š")]), RuleSet("from", [("š", "sh")]))

    def test_custom_collation_table(self):
        reversed_table = CollationTable(["b", "a"], {}, RuleSet("to", []), RuleSet("from", []))
        self.assertEqual(compare("ab", "ba", reversed_table), Ordering.GREATER)
        self.assertEqual(sort("ab ba", reversed_table), "ba ab")
        self.assertEqual(UZBEK_COLLATION.rank("a"), 0)
        self.assertEqual(UZBEK_COLLATION.rank("Ö"), UZBEK_COLLATION.rank("Š"))


if __name__ == '__main__':
    unittest.main()
