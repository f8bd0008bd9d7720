import logging
import unittest

from xivpath.parsers import (
    BodySlot, ClientLanguage, CustomizationData, CustomizationType,
    DemiHumanData, EquipmentData, EquipSlot, FileType, GamePathParser,
    GenderRace, IconData, MapData, MonsterData, NameTables, ObjectType,
    WeaponData, classify, extract_animation_key, object_type_of,
)
from xivpath.parsers.game_path_parser import normalize_path, parse_u8, parse_u16, parse_u32
from xivpath.parsers.grammar import CHARACTER_TEX_FOLDER


PARSER_LOGGER = 'xivpath.parsers.game_path_parser'


class NormalizeTests(unittest.TestCase):

    def test_lower_cases_and_converts_separators(self):
        self.assertEqual(normalize_path(r"CHARA\Weapon\W2001"), "chara/weapon/w2001")

    def test_typed_parsing_checks_width(self):
        self.assertEqual(parse_u8("0255"), 255)
        self.assertEqual(parse_u16("65535"), 65535)
        self.assertEqual(parse_u32("4294967295"), 4294967295)
        with self.assertRaises(ValueError):
            parse_u8("256")
        with self.assertRaises(ValueError):
            parse_u16("65536")
        with self.assertRaises(ValueError):
            parse_u32("4294967296")

    def test_typed_parsing_rejects_non_ascii_digits(self):
        with self.assertRaises(ValueError):
            parse_u16("\u0662\u0660\u0660\u0661")
        with self.assertRaises(ValueError):
            parse_u8("\uff10\uff11")


class ClassifyTotalityTests(unittest.TestCase):

    def test_empty_path(self):
        info = classify("")
        self.assertIs(info.file_type, FileType.UNKNOWN)
        self.assertIs(info.object_type, ObjectType.UNKNOWN)
        self.assertIsNone(info.payload)

    def test_single_segment(self):
        info = classify("chara")
        self.assertIs(info.object_type, ObjectType.UNKNOWN)
        self.assertFalse(info.is_complete)

    def test_unknown_extension_keeps_object_type(self):
        info = classify("chara/weapon/w2001/obj/body/b0001/b0001.xyz")
        self.assertIs(info.file_type, FileType.UNKNOWN)
        self.assertIs(info.object_type, ObjectType.WEAPON)
        self.assertIsNone(info.payload)

    def test_layout_miss_keeps_types(self):
        info = classify("chara/weapon/w2001/obj/body/b0001/model/wrong.mdl")
        self.assertIs(info.file_type, FileType.MODEL)
        self.assertIs(info.object_type, ObjectType.WEAPON)
        self.assertIsNone(info.payload)

    def test_partial_match_is_a_miss(self):
        info = classify("prefix/chara/weapon/w2001/obj/body/b0001/b0001.imc")
        self.assertIsNone(info.payload)
        info = classify("chara/weapon/w2001/obj/body/b0001/b0001.imc/extra.imc")
        self.assertIsNone(info.payload)

    def test_case_and_separator_invariance(self):
        path = "chara/equipment/e0001/model/c0101e0001_top.mdl"
        expected = classify(path)
        self.assertEqual(classify(path.upper()), expected)
        self.assertEqual(classify(path.replace('/', '\\')), expected)
        self.assertEqual(classify(path.upper().replace('/', '\\')), expected)


class ObjectTypeTests(unittest.TestCase):

    def test_folder_table(self):
        cases = {
            "chara/equipment/e0001/e0001.imc": ObjectType.EQUIPMENT,
            "chara/accessory/a0001/a0001.imc": ObjectType.ACCESSORY,
            "chara/weapon/w2001/x": ObjectType.WEAPON,
            "chara/human/c0101/x": ObjectType.CHARACTER,
            "chara/common/texture/skin_m.tex": ObjectType.CHARACTER,
            "chara/demihuman/d1001/x": ObjectType.DEMI_HUMAN,
            "chara/monster/m0001/x": ObjectType.MONSTER,
            "chara/action/emote/b_pose01_loop.tmb": ObjectType.UNKNOWN,
            "ui/icon/012000/012345.tex": ObjectType.ICON,
            "ui/loadingimage/-nowloading_base01.tex": ObjectType.LOADING_SCREEN,
            "ui/map/s1f1/00/s1f100_m.tex": ObjectType.MAP,
            "ui/uld/charamake_dataimport.uld": ObjectType.INTERFACE,
            "ui/other/x.tex": ObjectType.UNKNOWN,
            "common/font/axis_12.fdt": ObjectType.FONT,
            "common/graphics/x.tex": ObjectType.UNKNOWN,
            "hou/indoor/general/0001/bgparts/x.mdl": ObjectType.HOUSING,
            "bgcommon/hou/indoor/general/0001/x.mdl": ObjectType.HOUSING,
            "bgcommon/world/sys/shared/x.mdl": ObjectType.WORLD,
            "bg/ffxiv/sea_s1/twn/s1t1/level/bg.lgb": ObjectType.WORLD,
            "vfx/common/eff/cmat_ligh_a.avfx": ObjectType.VFX,
            "music/ffxiv/bgm_system_title.scd": ObjectType.UNKNOWN,
        }
        for path, expected in cases.items():
            with self.subTest(path=path):
                self.assertIs(object_type_of(path), expected)

    def test_object_type_matches_classify(self):
        path = "UI\\Icon\\012000\\012345.tex"
        self.assertIs(object_type_of(path), classify(path).object_type)

    def test_file_types(self):
        parser = GamePathParser()
        self.assertIs(parser.file_type_of("vfx/common/eff/x.AVFX"), FileType.VFX)
        self.assertIs(parser.file_type_of("chara/x/y.atex"), FileType.TEXTURE)
        self.assertIs(parser.file_type_of("sound/x.scd"), FileType.SOUND)
        self.assertIs(parser.file_type_of("chara/xls/equipmentparameter/x.eqdp"), FileType.META_INFO)
        self.assertIs(parser.file_type_of("shader/shpk/character.shpk"), FileType.SHADER)
        self.assertIs(parser.file_type_of("chara/human/c0101/skeleton/base/b0001/skl_c0101b0001.sklb"),
                      FileType.SKELETON)
        self.assertIs(parser.file_type_of("no_extension"), FileType.UNKNOWN)

    def test_extension_of_dot_file_name(self):
        parser = GamePathParser()
        self.assertIs(parser.file_type_of("chara/common/texture/.tex"), FileType.TEXTURE)
        self.assertIs(classify("chara/common/texture/.tex").file_type, FileType.TEXTURE)
        self.assertIs(parser.file_type_of("chara/folder.tex/no_extension"), FileType.UNKNOWN)
        self.assertIs(parser.file_type_of("chara/folder/trailing."), FileType.UNKNOWN)


class WeaponTests(unittest.TestCase):

    def test_imc(self):
        info = classify("chara/weapon/w2001/obj/body/b0001/b0001.imc")
        self.assertIs(info.file_type, FileType.IMC)
        self.assertIs(info.object_type, ObjectType.WEAPON)
        self.assertEqual(info.payload, WeaponData(set_id=2001, weapon_id=1))
        self.assertIsNone(info.variant)

    def test_model(self):
        info = classify("chara/weapon/w2001/obj/body/b0001/model/w2001b0001.mdl")
        self.assertEqual(info.payload, WeaponData(2001, 1))

    def test_material_has_variant(self):
        info = classify("chara/weapon/w2001/obj/body/b0001/material/v0003/mt_w2001b0001_a.mtrl")
        self.assertIs(info.file_type, FileType.MATERIAL)
        self.assertEqual(info.payload, WeaponData(2001, 1, 3))

    def test_texture(self):
        info = classify("chara/weapon/w0101/obj/body/b0012/texture/v02_w0101b0012_n.tex")
        self.assertEqual(info.payload, WeaponData(101, 12, 2))

    def test_mismatched_file_name(self):
        info = classify("chara/weapon/w2001/obj/body/b0001/b0002.imc")
        self.assertIsNone(info.payload)

    def test_non_ascii_digits_do_not_decode(self):
        for path in ("chara/weapon/w\u0662\u0660\u0660\u0661/obj/body/b0001/b0001.imc",
                     "chara/weapon/w2001/obj/body/b\uff10\uff10\uff10\uff11/b\uff10\uff10\uff10\uff11.imc"):
            with self.subTest(path=path):
                info = classify(path)
                self.assertIs(info.file_type, FileType.IMC)
                self.assertIs(info.object_type, ObjectType.WEAPON)
                self.assertIsNone(info.payload)


class EquipmentTests(unittest.TestCase):

    def test_imc(self):
        info = classify("chara/equipment/e0001/e0001.imc")
        self.assertEqual(info.payload, EquipmentData(set_id=1))

    def test_model(self):
        info = classify("chara/equipment/e0001/model/c0201e0001_top.mdl")
        self.assertEqual(info.payload,
                         EquipmentData(1, GenderRace.MIDLANDER_FEMALE, EquipSlot.BODY))
        self.assertIsNone(info.variant)

    def test_material(self):
        info = classify("chara/equipment/e6001/material/v0002/mt_c0101e6001_met_a.mtrl")
        self.assertEqual(info.payload,
                         EquipmentData(6001, GenderRace.MIDLANDER_MALE, EquipSlot.HEAD, 2))

    def test_texture(self):
        info = classify("chara/equipment/e0100/texture/v01_c0101e0100_dwn_n.tex")
        self.assertEqual(info.payload,
                         EquipmentData(100, GenderRace.MIDLANDER_MALE, EquipSlot.LEGS, 1))

    def test_accessory(self):
        info = classify("chara/accessory/a0001/model/c0101a0001_ear.mdl")
        self.assertIs(info.object_type, ObjectType.ACCESSORY)
        self.assertEqual(info.payload,
                         EquipmentData(1, GenderRace.MIDLANDER_MALE, EquipSlot.EARS))

    def test_unlisted_race_code_is_unknown(self):
        info = classify("chara/equipment/e0001/model/c0102e0001_top.mdl")
        self.assertTrue(info.is_complete)
        self.assertIs(info.gender_race, GenderRace.UNKNOWN)

    def test_unknown_slot_suffix_degrades_and_logs(self):
        path = "chara/equipment/e0001/model/c0101e0001_xyz.mdl"
        with self.assertLogs(PARSER_LOGGER, level='ERROR') as logs:
            info = classify(path)
        self.assertIs(info.object_type, ObjectType.EQUIPMENT)
        self.assertIs(info.file_type, FileType.MODEL)
        self.assertIsNone(info.payload)
        self.assertIn(path, logs.output[0])

    def test_variant_overflow_degrades(self):
        with self.assertLogs(PARSER_LOGGER, level='ERROR'):
            info = classify("chara/equipment/e0001/material/v0300/mt_c0101e0001_top_a.mtrl")
        self.assertIs(info.file_type, FileType.MATERIAL)
        self.assertIsNone(info.payload)


class MonsterAndDemiHumanTests(unittest.TestCase):

    def test_monster_model(self):
        info = classify("chara/monster/m0405/obj/body/b0002/model/m0405b0002.mdl")
        self.assertEqual(info.payload, MonsterData(monster_id=405, body_id=2))
        self.assertEqual(info.primary_id, 405)
        self.assertEqual(info.secondary_id, 2)

    def test_monster_texture(self):
        info = classify("chara/monster/m0405/obj/body/b0002/texture/v01_m0405b0002_d.tex")
        self.assertEqual(info.payload, MonsterData(405, 2, 1))

    def test_demihuman_imc(self):
        info = classify("chara/demihuman/d1001/obj/equipment/e0002/e0002.imc")
        self.assertEqual(info.payload, DemiHumanData(1001, 2))

    def test_demihuman_model(self):
        info = classify("chara/demihuman/d1001/obj/equipment/e0001/model/d1001e0001_met.mdl")
        self.assertEqual(info.payload, DemiHumanData(1001, 1, EquipSlot.HEAD))

    def test_demihuman_material(self):
        info = classify(
            "chara/demihuman/d1001/obj/equipment/e0001/material/v0001/mt_d1001e0001_top_a.mtrl"
        )
        self.assertEqual(info.payload, DemiHumanData(1001, 1, EquipSlot.BODY, 1))


class CharacterTests(unittest.TestCase):

    def test_model(self):
        info = classify("chara/human/c0101/obj/hair/h0005/model/c0101h0005_hir.mdl")
        self.assertEqual(info.payload, CustomizationData(
            CustomizationType.HAIR, 5, GenderRace.MIDLANDER_MALE, BodySlot.HAIR
        ))

    def test_material_with_variant_folder(self):
        info = classify("chara/human/c1401/obj/face/f0002/material/v0001/mt_c1401f0002_fac_a.mtrl")
        self.assertEqual(info.payload, CustomizationData(
            CustomizationType.FACE, 2, GenderRace.AURA_FEMALE, BodySlot.FACE, 1
        ))

    def test_material_without_variant_or_slot(self):
        info = classify("chara/human/c0101/obj/body/b0001/material/mt_c0101b0001_a.mtrl")
        self.assertEqual(info.payload, CustomizationData(
            CustomizationType.SKIN, 1, GenderRace.MIDLANDER_MALE, BodySlot.BODY, 0
        ))

    def test_body_texture_wins_over_folder_texture(self):
        path = "chara/human/c0101/obj/face/f0001/texture/--c0101f0001_fac_n.tex"
        self.assertIsNotNone(CHARACTER_TEX_FOLDER.fullmatch(path))

        info = classify(path)
        self.assertEqual(info.payload, CustomizationData(
            CustomizationType.FACE, 1, GenderRace.MIDLANDER_MALE, BodySlot.FACE
        ))

    def test_folder_texture(self):
        info = classify("chara/human/c0101/obj/face/f0001/texture/c0101f0001_fac_catchlight.tex")
        self.assertEqual(info.payload, CustomizationData(
            CustomizationType.SKIN, 1, GenderRace.MIDLANDER_MALE, BodySlot.FACE
        ))

    def test_skin(self):
        info = classify("chara/common/texture/skin_m.tex")
        self.assertEqual(info.payload, CustomizationData(CustomizationType.SKIN))

    def test_catchlight(self):
        info = classify("chara/common/texture/catchlight_1.tex")
        self.assertEqual(info.payload, CustomizationData(CustomizationType.IRIS))

    def test_decals(self):
        info = classify("chara/common/texture/decal_face/_decal_12.tex")
        self.assertEqual(info.payload, CustomizationData(CustomizationType.DECAL_FACE, 12))

        info = classify("chara/common/texture/decal_equip/-decal_005.tex")
        self.assertEqual(info.payload, CustomizationData(CustomizationType.DECAL_EQUIP, 5))

        info = classify("chara/common/texture/decal_body/decal_1.tex")
        self.assertEqual(info.payload, CustomizationData(CustomizationType.UNKNOWN, 1))


class IconTests(unittest.TestCase):

    def test_plain(self):
        info = classify("ui/icon/012000/012345.tex")
        self.assertEqual(info.payload, IconData(12345))

    def test_language_hq_and_hr(self):
        info = classify("ui/icon/012000/en/hq/012345_hr1.tex")
        self.assertEqual(info.payload, IconData(12345, hq=True, hr=True,
                                                language=ClientLanguage.ENGLISH))

    def test_hq_is_not_a_language(self):
        info = classify("ui/icon/012000/hq/012345.tex")
        self.assertEqual(info.payload, IconData(12345, hq=True))

    def test_hr_folder(self):
        info = classify("ui/icon/012000/hr1/012345.tex")
        self.assertEqual(info.payload, IconData(12345, hr=True))

    def test_languages(self):
        info = classify("ui/icon/012000/ja/012345.tex")
        self.assertIs(info.payload.language, ClientLanguage.JAPANESE)

        info = classify("ui/icon/012000/kr/012345.tex")
        self.assertIs(info.payload.language, ClientLanguage.ENGLISH)

    def test_non_numeric_name(self):
        info = classify("ui/icon/012000/foo.tex")
        self.assertIs(info.file_type, FileType.TEXTURE)
        self.assertIs(info.object_type, ObjectType.ICON)
        self.assertIsNone(info.payload)

    def test_id_overflow_degrades(self):
        with self.assertLogs(PARSER_LOGGER, level='ERROR'):
            info = classify("ui/icon/000000/99999999999.tex")
        self.assertIsNone(info.payload)


class MapTests(unittest.TestCase):

    def test_map_bytes(self):
        info = classify("ui/map/a1b2/03/a1b203_m.tex")
        self.assertEqual(info.payload, MapData(97, 49, 98, 50, 3))
        self.assertEqual(info.payload.map_id, "a1b2")

    def test_suffix(self):
        info = classify("ui/map/s1f1/00/s1f100m_m.tex")
        self.assertEqual(info.payload, MapData(ord('s'), ord('1'), ord('f'), ord('1'), 0, ord('m')))

    def test_mismatched_file_name(self):
        self.assertIsNone(classify("ui/map/s1f1/00/s1f200_m.tex").payload)


class PayloadlessTypeTests(unittest.TestCase):

    def test_font_matches_but_has_no_payload(self):
        info = classify("common/font/axis_12.fdt")
        self.assertIs(info.file_type, FileType.FONT)
        self.assertIs(info.object_type, ObjectType.FONT)
        self.assertIsNone(info.payload)

    def test_loading_screen(self):
        info = classify("ui/loadingimage/-nowloading_base01.tex")
        self.assertIs(info.object_type, ObjectType.LOADING_SCREEN)
        self.assertIsNone(info.payload)

    def test_vfx(self):
        info = classify("vfx/common/eff/cmat_ligh_a.avfx")
        self.assertIs(info.file_type, FileType.VFX)
        self.assertIs(info.object_type, ObjectType.VFX)
        self.assertIsNone(info.payload)


class AnimationKeyTests(unittest.TestCase):

    def test_action_timeline(self):
        self.assertEqual(extract_animation_key("chara/action/emote/b_pose01_loop.tmb"),
                         "emote/b_pose01_loop")

    def test_action_timeline_is_case_insensitive(self):
        self.assertEqual(extract_animation_key("CHARA/ACTION/Emote/B_Pose.TMB"),
                         "emote/b_pose")

    def test_action_timeline_accepts_backslashes(self):
        self.assertEqual(extract_animation_key("chara\\action\\b_pose.tmb"), "b_pose")

    def test_animation_package(self):
        self.assertEqual(
            extract_animation_key("chara/human/c0101/animation/a0001/bt_common/emote/pose01.pap"),
            "emote/pose01",
        )

    def test_other_race_package_has_no_key(self):
        self.assertEqual(
            extract_animation_key("chara/human/c0201/animation/a0001/bt_common/emote/pose01.pap"),
            "",
        )

    def test_no_key(self):
        self.assertEqual(extract_animation_key("hello world"), "")
        self.assertEqual(extract_animation_key(""), "")


class ParserConfigurationTests(unittest.TestCase):

    def test_default_language_is_configurable(self):
        parser = GamePathParser(names=NameTables(default_language=ClientLanguage.GERMAN))
        info = parser.classify("ui/icon/012000/kr/012345.tex")
        self.assertIs(info.payload.language, ClientLanguage.GERMAN)

    def test_extra_equip_slot(self):
        slots = dict(NameTables().equip_slots)
        slots["xyz"] = EquipSlot.NECK
        parser = GamePathParser(names=NameTables(equip_slots=slots))
        info = parser.classify("chara/equipment/e0001/model/c0101e0001_xyz.mdl")
        self.assertIs(info.equip_slot, EquipSlot.NECK)

    def test_empty_grammar_never_decodes(self):
        parser = GamePathParser(grammar={})
        info = parser.classify("chara/weapon/w2001/obj/body/b0001/b0001.imc")
        self.assertIs(info.object_type, ObjectType.WEAPON)
        self.assertIsNone(info.payload)

    def test_decode_errors_go_to_given_logger(self):
        log = logging.getLogger('xivpath.tests.custom')
        parser = GamePathParser(log=log)
        with self.assertLogs(log, level='ERROR'):
            parser.classify("chara/equipment/e0001/model/c0101e0001_xyz.mdl")


class DescriptorTests(unittest.TestCase):

    def test_to_dict(self):
        info = classify("chara/equipment/e0001/model/c0201e0001_top.mdl")
        self.assertEqual(info.to_dict(), {
            'file_type': 'MODEL',
            'object_type': 'EQUIPMENT',
            'payload': {
                'set_id': 1,
                'gender_race': 'MIDLANDER_FEMALE',
                'equip_slot': 'BODY',
            },
        })

    def test_to_dict_without_payload(self):
        self.assertEqual(classify("").to_dict(),
                         {'file_type': 'UNKNOWN', 'object_type': 'UNKNOWN'})

    def test_accessors_without_payload(self):
        info = classify("bg/ffxiv/sea_s1/twn/s1t1/level/bg.lgb")
        self.assertIsNone(info.primary_id)
        self.assertIsNone(info.secondary_id)
        self.assertIsNone(info.variant)
        self.assertIsNone(info.gender_race)


if __name__ == '__main__':
    unittest.main()
