import unittest

from fridge.infra.Json_Store import InMemoryStore
from fridge.infra.Override_Repository import OverrideRepository
from fridge.logic.translation.table import Resolution, TranslationTable


class TestTranslationTable(unittest.TestCase):

    def setUp(self):
        self.store = InMemoryStore()
        self.table = TranslationTable(OverrideRepository(self.store))

    def test_builtin_lookup(self):
        self.assertEqual(self.table.resolve("בצל"), Resolution("onion", True))

    def test_builtin_lookup_normalizes_input(self):
        self.assertEqual(self.table.resolve("  חזה עוף "), ("chicken breast", True))

    def test_unknown_term_falls_back_to_normalized_input(self):
        self.assertEqual(self.table.resolve("  Mango "), ("mango", False))

    def test_override_takes_precedence_over_builtin(self):
        self.table.add_override("בצל", "Shallot")
        self.assertEqual(self.table.resolve("בצל"), ("shallot", True))

    def test_override_resolves_unknown_term(self):
        self.table.add_override(" מנגו ", "  Mango ")
        self.assertEqual(self.table.resolve("מנגו"), ("mango", True))

    def test_add_override_replaces_previous_value(self):
        self.table.add_override("מנגו", "mango")
        self.table.add_override("מנגו ", "green mango")
        self.assertEqual(len(self.table.overrides()), 1)
        self.assertEqual(self.table.resolve("מנגו").target_term, "green mango")

    def test_empty_override_is_ignored(self):
        self.store.put("בצל", "")
        self.assertEqual(self.table.resolve("בצל"), ("onion", True))
        self.store.put("מנגו", "")
        self.assertEqual(self.table.resolve("מנגו"), ("מנגו", False))

    def test_builtin_table_is_not_modified_by_overrides(self):
        table = TranslationTable(OverrideRepository(self.store), builtin={"Apple ": "apple"})
        table.add_override("apple", "green apple")
        table.remove_override("apple")
        self.assertEqual(table.resolve("APPLE"), ("apple", True))

    def test_to_source_uses_builtin_reverse_lookup(self):
        self.assertEqual(self.table.to_source("Onion"), "בצל")
        self.assertEqual(self.table.to_source("olive oil"), "שמן זית")

    def test_to_source_prefers_overrides(self):
        self.table.add_override("מנגו", "mango")
        self.assertEqual(self.table.to_source("MANGO"), "מנגו")

    def test_to_source_falls_back_to_display_name(self):
        self.assertEqual(self.table.to_source("smoked paprika"), "Smoked Paprika")
