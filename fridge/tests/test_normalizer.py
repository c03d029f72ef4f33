import unittest

from fridge.logic.text.normalizer import display_key, display_name, normalize


class TestNormalize(unittest.TestCase):

    def test_trims_and_folds_case(self):
        self.assertEqual(normalize("  Red Onion \n"), "red onion")

    def test_internal_whitespace_is_kept(self):
        self.assertEqual(normalize(" olive   oil "), "olive   oil")

    def test_empty_and_none(self):
        self.assertEqual(normalize(""), "")
        self.assertEqual(normalize("   "), "")
        self.assertEqual(normalize(None), "")

    def test_idempotent(self):
        for term in ["Tomato", "  EGGS ", "חזה עוף", "", " a  b ", "Crème Fraîche"]:
            once = normalize(term)
            self.assertEqual(normalize(once), once)


class TestDisplayName(unittest.TestCase):

    def test_irregular_tomato_variants(self):
        self.assertEqual(display_name("tomatoe"), "Tomato")
        self.assertEqual(display_name("Tomatos"), "Tomato")
        self.assertEqual(display_name("tomato"), "Tomato")

    def test_capitalizes_each_word(self):
        self.assertEqual(display_name("red ONION"), "Red Onion")
        self.assertEqual(display_name("baker's yeast"), "Baker's Yeast")

    def test_display_key_folds_name_and_unit(self):
        self.assertEqual(display_key("Tomatoe", " PCS"), ("tomato", "pcs"))
