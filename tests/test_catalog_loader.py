from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path

from spellbrowser.catalog import BUNDLED_CATALOG_PATH, load_catalog, spell_from_mapping
from spellbrowser.catalog.loader import parse_catalog
from spellbrowser.errors import CatalogLoadError


class SpellFromMappingTests(unittest.TestCase):
    def test_full_entry(self) -> None:
        spell = spell_from_mapping(
            {
                "name": " Fireball ",
                "level": 3,
                "school": "Evocation",
                "casting_time": "1 action",
                "range": "150 feet",
                "components": ["V", "S", "M"],
                "duration": "Instantaneous",
                "classes": ["Sorcerer", "Wizard"],
                "description": ["First.", "Second."],
                "higher_levels": "More damage.",
            }
        )
        self.assertEqual(spell.name, "Fireball")
        self.assertEqual(spell.components, "V, S, M")
        self.assertEqual(spell.classes, ("Sorcerer", "Wizard"))
        self.assertEqual(spell.description, "First.\n\nSecond.")
        self.assertFalse(spell.ritual)
        self.assertFalse(spell.concentration)

    def test_aliases_and_string_flags(self) -> None:
        spell = spell_from_mapping(
            {
                "name": "Detect Magic",
                "level": 1,
                "desc": "Sense magic.",
                "higher_level": "None.",
                "ritual": "yes",
                "concentration": "no",
                "classes": "Wizard",
            }
        )
        self.assertEqual(spell.description, "Sense magic.")
        self.assertEqual(spell.higher_levels, "None.")
        self.assertTrue(spell.ritual)
        self.assertFalse(spell.concentration)
        self.assertEqual(spell.classes, ("Wizard",))

    def test_invalid_name_or_level_raises(self) -> None:
        for raw in ({"level": 1}, {"name": "  ", "level": 1}, {"name": "X"}, {"name": "X", "level": -1},
                    {"name": "X", "level": True}, {"name": "X", "level": "3"}):
            with self.assertRaises(ValueError, msg=repr(raw)):
                spell_from_mapping(raw)


class ParseCatalogTests(unittest.TestCase):
    def test_accepts_array_and_spells_object(self) -> None:
        entries = [{"name": "Shield", "level": 1}, {"name": "Fire Bolt", "level": 0}]
        self.assertEqual([s.name for s in parse_catalog(entries)], ["Shield", "Fire Bolt"])
        self.assertEqual([s.name for s in parse_catalog({"spells": entries})], ["Shield", "Fire Bolt"])

    def test_rejects_other_shapes(self) -> None:
        for data in ({"items": []}, "spells", 3, None):
            with self.assertRaises(CatalogLoadError):
                parse_catalog(data)

    def test_bad_entries_are_skipped_with_warning(self) -> None:
        entries = [{"name": "Shield", "level": 1}, "junk", {"name": "Nameless"}, {"name": "Bane", "level": 1}]
        with self.assertLogs("spellbrowser.catalog.loader", level="WARNING") as logs:
            catalog = parse_catalog(entries)
        self.assertEqual([s.name for s in catalog], ["Shield", "Bane"])
        self.assertEqual(len(logs.records), 2)
        self.assertIn("skipping catalog entry 1", logs.output[0])
        self.assertIn("skipping catalog entry 2", logs.output[1])


class LoadCatalogTests(unittest.TestCase):
    def _write(self, text: str, *, encoding: str = "utf-8") -> Path:
        handle = tempfile.NamedTemporaryFile("w", suffix=".json", delete=False, encoding=encoding)
        self.addCleanup(Path(handle.name).unlink, missing_ok=True)
        with handle:
            handle.write(text)
        return Path(handle.name)

    def test_loads_file_in_source_order(self) -> None:
        path = self._write(json.dumps([{"name": "Shield", "level": 1}, {"name": "Alarm", "level": 1}]))
        self.assertEqual([s.name for s in load_catalog(path)], ["Shield", "Alarm"])

    def test_tolerates_byte_order_mark(self) -> None:
        path = self._write(json.dumps([{"name": "Ñandú Flame", "level": 2}]), encoding="utf-8-sig")
        self.assertEqual(load_catalog(path)[0].name, "Ñandú Flame")

    def test_invalid_json_reports_file_and_line(self) -> None:
        path = self._write('[\n{"name": "Shield",\n')
        with self.assertRaises(CatalogLoadError) as ctx:
            load_catalog(path)
        self.assertIn(path.name, str(ctx.exception))
        self.assertIn("invalid JSON at line", str(ctx.exception))

    def test_missing_file_raises_load_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(CatalogLoadError) as ctx:
                load_catalog(Path(tmp) / "missing.json")
        self.assertIn("cannot read", str(ctx.exception))

    def test_bundled_catalog_is_sorted_and_flagged(self) -> None:
        catalog = load_catalog(BUNDLED_CATALOG_PATH)
        names = [spell.name for spell in catalog]
        self.assertEqual(len(names), 24)
        self.assertEqual(names, sorted(names))
        by_name = {spell.name: spell for spell in catalog}
        self.assertTrue(by_name["Detect Magic"].ritual)
        self.assertTrue(by_name["Detect Magic"].concentration)
        self.assertEqual(by_name["Fire Bolt"].level, 0)


if __name__ == "__main__":
    unittest.main()
