import unittest

from fridge.domain.Ingredient import Ingredient
from fridge.events.Event_Bus import EventBus, TRANSLATION_CORRECTED, TRANSLATION_UNRESOLVED
from fridge.infra.Json_Store import InMemoryStore
from fridge.infra.Override_Repository import OverrideRepository
from fridge.infra.Pantry_Repository import PantryRepository
from fridge.logic.pantry.service import PantryService
from fridge.logic.translation.table import TranslationTable


class TestPantryService(unittest.TestCase):

    def setUp(self):
        self.bus = EventBus()
        self.events = []
        self.bus.subscribe(TRANSLATION_UNRESOLVED, lambda name, payload: self.events.append((name, payload)))
        self.bus.subscribe(TRANSLATION_CORRECTED, lambda name, payload: self.events.append((name, payload)))
        self.pantry_store = InMemoryStore()
        self.table = TranslationTable(OverrideRepository(InMemoryStore()))
        self.service = PantryService(PantryRepository(self.pantry_store), self.table, self.bus)

    def test_add_known_term(self):
        term = self.service.add_term("  בצל ")
        self.assertEqual((term.name, term.target_term, term.resolved), ("בצל", "onion", True))
        self.assertEqual(self.pantry_store.get("בצל"), {"target_term": "onion", "resolved": True})
        self.assertEqual(self.events, [])

    def test_add_unknown_term_is_kept_unresolved(self):
        term = self.service.add_term("Mango")
        self.assertEqual((term.name, term.target_term, term.resolved), ("mango", "mango", False))
        self.assertEqual([t.name for t in self.service.unresolved_terms()], ["mango"])
        self.assertEqual(self.events[0][0], TRANSLATION_UNRESOLVED)
        self.assertEqual(self.events[0][1]["term"].name, "mango")

    def test_duplicate_is_rejected(self):
        self.service.add_term("בצל")
        with self.assertRaises(ValueError):
            self.service.add_term(" בצל")
        self.assertEqual(len(self.service.list_terms()), 1)

    def test_remove_term(self):
        self.service.add_term("ביצה")
        self.assertTrue(self.service.remove_term("ביצה"))
        self.assertFalse(self.service.remove_term("ביצה"))
        self.assertFalse(self.service.has_term("ביצה"))

    def test_correct_translation_resolves_stored_term(self):
        self.service.add_term("מנגו")
        override = self.service.correct_translation("מנגו", " Mango ")
        self.assertEqual(override.target_term, "mango")
        term = self.service.list_terms()[0]
        self.assertEqual((term.target_term, term.resolved), ("mango", True))
        self.assertEqual(self.service.unresolved_terms(), [])
        self.assertEqual(self.events[-1][0], TRANSLATION_CORRECTED)
        self.assertEqual(self.events[-1][1]["updated"], 1)

    def test_target_terms_are_resolved_live_and_deduplicated(self):
        self.service.add_term("ביצה")
        self.service.add_term("בצל")
        self.table.add_override("ביצה", "onion")
        self.assertEqual(self.service.target_terms(), ["onion"])
        self.assertEqual(self.service.target_terms(["עגבניה", "Mango", ""]), ["tomato", "mango"])

    def test_classify_against_pantry(self):
        self.service.add_term("בצל")
        self.service.add_term("חזה עוף")
        result = self.service.classify([
            Ingredient(1, "red onion", 1, ""),
            Ingredient(2, "chicken", 300, "g"),
            Ingredient(3, "paprika", 1, "tsp"),
        ])
        self.assertEqual([i.name for i in result.owned], ["Red Onion", "Chicken"])
        self.assertEqual([i.name for i in result.missing], ["Paprika"])


    def test_removing_translation_makes_term_unresolved_again(self):
        self.service.add_term("מנגו")
        self.service.correct_translation("מנגו", "mango")
        self.events.clear()

        self.assertTrue(self.service.remove_translation(" מנגו "))

        term = self.service.list_terms()[0]
        self.assertEqual((term.target_term, term.resolved), tuple(self.table.resolve("מנגו")))
        self.assertEqual((term.target_term, term.resolved), ("מנגו", False))
        self.assertEqual([t.name for t in self.service.unresolved_terms()], ["מנגו"])
        self.assertEqual(self.events[0][0], TRANSLATION_UNRESOLVED)

    def test_removing_translation_falls_back_to_builtin(self):
        self.service.add_term("בצל")
        self.service.correct_translation("בצל", "shallot")
        self.events.clear()
        self.assertTrue(self.service.remove_translation("בצל"))
        term = self.service.list_terms()[0]
        self.assertEqual((term.target_term, term.resolved), ("onion", True))
        self.assertEqual(self.events, [])

    def test_removing_unknown_translation(self):
        self.assertFalse(self.service.remove_translation("מנגו"))

if __name__ == '__main__':
    unittest.main()
