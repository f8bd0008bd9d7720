import json
import os
import tempfile
import unittest

from xivpath.core.database import Database
from xivpath.parsers import ObjectType, classify


PATHS = [
    "chara/weapon/w2001/obj/body/b0001/b0001.imc",
    "chara/equipment/e0001/model/c0201e0001_top.mdl",
    "chara/equipment/e0002/model/c0101e0002_dwn.mdl",
    "ui/icon/012000/foo.tex",
    "vfx/common/eff/cmat_ligh_a.avfx",
]


class DatabaseTests(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.db = Database(os.path.join(self.tmp.name, 'nested', 'catalog.db'))

    def tearDown(self):
        self.db.close()
        self.tmp.cleanup()

    def store(self, paths):
        return self.db.add_paths((path, classify(path)) for path in paths)

    def test_creates_parent_directory(self):
        self.assertTrue(os.path.isdir(os.path.join(self.tmp.name, 'nested')))

    def test_add_and_read(self):
        self.assertEqual(self.store(PATHS), len(PATHS))

        row = self.db.get_path("CHARA\\Weapon\\W2001\\obj\\body\\b0001\\b0001.imc")
        self.assertIsNotNone(row)
        self.assertEqual(row.path, PATHS[0])
        self.assertEqual(row.file_type, 'IMC')
        self.assertEqual(row.object_type, 'WEAPON')
        self.assertEqual((row.primary_id, row.secondary_id, row.variant), (2001, 1, None))
        self.assertTrue(row.complete)
        self.assertEqual(json.loads(row.payload), {'set_id': 2001, 'weapon_id': 1})

    def test_incomplete_rows_have_no_payload(self):
        self.store(PATHS)
        row = self.db.get_path("ui/icon/012000/foo.tex")
        self.assertFalse(row.complete)
        self.assertIsNone(row.payload)
        self.assertEqual([r.path for r in self.db.get_incomplete_paths()], [
            "ui/icon/012000/foo.tex",
            "vfx/common/eff/cmat_ligh_a.avfx",
        ])

    def test_readding_updates_in_place(self):
        self.store(PATHS)
        self.assertEqual(self.store([PATHS[0].upper(), "chara/monster/m0001/obj/body/b0001/b0001.imc"]), 1)
        self.assertEqual(self.db.get_stats()['total'], len(PATHS) + 1)

    def test_by_object_type(self):
        self.store(PATHS)
        rows = self.db.get_paths_by_object_type(ObjectType.EQUIPMENT)
        self.assertEqual([r.path for r in rows], [PATHS[1], PATHS[2]])
        self.assertEqual(self.db.get_paths_by_object_type(ObjectType.MAP), [])

    def test_stats_and_clear(self):
        self.store(PATHS)
        stats = self.db.get_stats()
        self.assertEqual(stats['total'], 5)
        self.assertEqual(stats['complete'], 3)
        self.assertEqual(stats['by_object_type'], {
            'WEAPON': 1, 'EQUIPMENT': 2, 'ICON': 1, 'VFX': 1,
        })

        self.assertEqual(self.db.clear(), 5)
        self.assertEqual(self.db.get_stats()['total'], 0)
        self.assertIsNone(self.db.get_path(PATHS[0]))


if __name__ == '__main__':
    unittest.main()
