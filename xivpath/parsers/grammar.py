# ==============================================================================
# GAME PATH GRAMMAR
# ==============================================================================
# Compiled path layouts for every (FileType, ObjectType) pair the parser can
# decode, plus the formatting functions that build the same layouts.
#
# Layouts are matched with Pattern.fullmatch() against a normalized path
# (lower case, forward slashes). A partial match is a miss. Typed numeric
# groups only ever capture digit sequences, so a successful match always
# hands the decoder well formed numbers. Layouts are compiled with re.ASCII,
# so full-width or other non-ASCII digits never match.
#
# Named groups used by the decoder:
#   id, weapon, monster, equip    Set / model ids
#   race                          Four digit gender-race code
#   slot                          Three letter slot suffix
#   variant                       Material or texture variant
#   type                          Human body slot folder (hair, face, ...)
#   skin, catchlight, location    Shared character texture markers
#   lang, hq, hr, hr_suffix       Icon folders and flags
#   suffix                        Map texture suffix letter
#
# Usage:
#   from xivpath.parsers.grammar import GRAMMAR_TABLE, match_grammar
#   match = match_grammar(path, FileType.MODEL, ObjectType.WEAPON)
#   if match:
#       print(match.group('id'))
# ==============================================================================

import re
from types import MappingProxyType
from typing import Mapping, Optional, Pattern, Tuple

from .enums import (
    BodySlot, ClientLanguage, CustomizationType, EquipSlot, FileType,
    GenderRace, ObjectType,
)
from .names import (
    BODY_SLOT_TO_STRING, EQUIP_SLOT_TO_SUFFIX, LANGUAGE_TO_CODE,
    SUFFIX_TO_CUSTOMIZATION_TYPE,
)


def _layout(pattern: str) -> Pattern:
    """Compile a path layout; digit classes only match ASCII digits."""
    return re.compile(pattern, re.ASCII)


# ==============================================================================
# FONT
# ==============================================================================

FONT = _layout(r"common/font/(?P<fontname>.*)_(?P<id>\d\d)(_lobby)?\.fdt")


# ==============================================================================
# WEAPON
# ==============================================================================
# chara/weapon/w2001/obj/body/b0001/...

_WEAPON = r"chara/weapon/w(?P<id>\d{4})/obj/body/b(?P<weapon>\d{4})"

WEAPON_IMC = _layout(_WEAPON + r"/b(?P=weapon)\.imc")
WEAPON_MDL = _layout(_WEAPON + r"/model/w(?P=id)b(?P=weapon)\.mdl")
WEAPON_MTRL = _layout(
    _WEAPON + r"/material/v(?P<variant>\d{4})/mt_w(?P=id)b(?P=weapon)_[a-z]+\.mtrl"
)
WEAPON_TEX = _layout(
    _WEAPON + r"/texture/v(?P<variant>\d{2})_w(?P=id)b(?P=weapon)(_[a-z])?_[a-z]\.tex"
)


# ==============================================================================
# MONSTER
# ==============================================================================
# chara/monster/m0001/obj/body/b0001/...

_MONSTER = r"chara/monster/m(?P<monster>\d{4})/obj/body/b(?P<id>\d{4})"

MONSTER_IMC = _layout(_MONSTER + r"/b(?P=id)\.imc")
MONSTER_MDL = _layout(_MONSTER + r"/model/m(?P=monster)b(?P=id)\.mdl")
MONSTER_MTRL = _layout(
    _MONSTER + r"/material/v(?P<variant>\d{4})/mt_m(?P=monster)b(?P=id)_[a-z]+\.mtrl"
)
MONSTER_TEX = _layout(
    _MONSTER + r"/texture/v(?P<variant>\d{2})_m(?P=monster)b(?P=id)(_[a-z])?_[a-z]\.tex"
)


# ==============================================================================
# DEMIHUMAN
# ==============================================================================
# chara/demihuman/d1001/obj/equipment/e0001/...

_DEMI_HUMAN = r"chara/demihuman/d(?P<id>\d{4})/obj/equipment/e(?P<equip>\d{4})"

DEMI_HUMAN_IMC = _layout(_DEMI_HUMAN + r"/e(?P=equip)\.imc")
DEMI_HUMAN_MDL = _layout(
    _DEMI_HUMAN + r"/model/d(?P=id)e(?P=equip)_(?P<slot>[a-z]{3})\.mdl"
)
DEMI_HUMAN_MTRL = _layout(
    _DEMI_HUMAN + r"/material/v(?P<variant>\d{4})"
    r"/mt_d(?P=id)e(?P=equip)_(?P<slot>[a-z]{3})_[a-z]+\.mtrl"
)
DEMI_HUMAN_TEX = _layout(
    _DEMI_HUMAN + r"/texture/v(?P<variant>\d{2})"
    r"_d(?P=id)e(?P=equip)_(?P<slot>[a-z]{3})(_[a-z])?_[a-z]\.tex"
)


# ==============================================================================
# EQUIPMENT AND ACCESSORIES
# ==============================================================================
# Both share one layout and differ only in folder name and set letter:
#   chara/equipment/e0001/...   chara/accessory/a0001/...

def _gear_patterns(folder: str, letter: str) -> Tuple[Pattern, Pattern, Pattern, Pattern]:
    base = rf"chara/{folder}/{letter}(?P<id>\d{{4}})"
    imc = _layout(base + rf"/{letter}(?P=id)\.imc")
    mdl = _layout(
        base + rf"/model/c(?P<race>\d{{4}}){letter}(?P=id)_(?P<slot>[a-z]{{3}})\.mdl"
    )
    mtrl = _layout(
        base + rf"/material/v(?P<variant>\d{{4}})"
        rf"/mt_c(?P<race>\d{{4}}){letter}(?P=id)_(?P<slot>[a-z]{{3}})_[a-z]+\.mtrl"
    )
    tex = _layout(
        base + rf"/texture/v(?P<variant>\d{{2}})"
        rf"_c(?P<race>\d{{4}}){letter}(?P=id)_(?P<slot>[a-z]{{3}})(_[a-z])?_[a-z]\.tex"
    )
    return imc, mdl, mtrl, tex


EQUIPMENT_IMC, EQUIPMENT_MDL, EQUIPMENT_MTRL, EQUIPMENT_TEX = _gear_patterns("equipment", "e")
ACCESSORY_IMC, ACCESSORY_MDL, ACCESSORY_MTRL, ACCESSORY_TEX = _gear_patterns("accessory", "a")


# ==============================================================================
# CHARACTER (HUMAN CUSTOMIZATION)
# ==============================================================================
# chara/human/c0101/obj/face/f0001/...   plus shared chara/common/texture/

_HUMAN = (
    r"chara/human/c(?P<race>\d{4})/obj/(?P<type>[a-z]+)/(?P<typeabr>[a-z])(?P<id>\d{4})"
)
_HUMAN_FILE = r"c(?P=race)(?P=typeabr)(?P=id)"

CHARACTER_MDL = _layout(
    _HUMAN + r"/model/" + _HUMAN_FILE + r"_(?P<slot>[a-z]{3})\.mdl"
)
CHARACTER_MTRL = _layout(
    _HUMAN + r"/material(/v(?P<variant>\d{4}))?/mt_" + _HUMAN_FILE
    + r"(_(?P<slot>[a-z]{3}))?_[a-z]+\.mtrl"
)

# Character textures come in several layouts. They are tried in this order
# and the first match wins; every body texture is also a folder texture.
CHARACTER_TEX = _layout(
    _HUMAN + r"/texture/(?P<minus>(--)?)(v(?P<variant>\d{2})_)?" + _HUMAN_FILE
    + r"(_(?P<slot>[a-z]{3}))?(_[a-z])?_[a-z]\.tex"
)
CHARACTER_TEX_FOLDER = _layout(_HUMAN + r"/texture/.*\.tex")
CHARACTER_TEX_SKIN = _layout(r"chara/common/texture/skin(?P<skin>.*)\.tex")
CHARACTER_TEX_CATCHLIGHT = _layout(
    r"chara/common/texture/(?P<catchlight>catchlight)(.*)\.tex"
)
CHARACTER_TEX_DECAL = _layout(
    r"chara/common/texture/decal_(?P<location>[a-z]+)/[-_]?decal_(?P<id>\d+)\.tex"
)

CHARACTER_TEXTURES: Tuple[Pattern, ...] = (
    CHARACTER_TEX,
    CHARACTER_TEX_FOLDER,
    CHARACTER_TEX_SKIN,
    CHARACTER_TEX_CATCHLIGHT,
    CHARACTER_TEX_DECAL,
)


# ==============================================================================
# UI
# ==============================================================================
# ui/icon/012000/012345.tex, ui/icon/012000/en/hq/012345_hr1.tex, ...
# "hq" is never read as a language folder.

ICON = _layout(
    r"ui/icon/(?P<group>\d+)(/(?P<lang>(?!hq)[a-z]{2}))?(/(?P<hq>hq))?"
    r"/(?P<hr>hr1/)?(?P<id>\d+)(?P<hr_suffix>_hr1)?\.tex"
)

# ui/map/s1f1/00/s1f100_m.tex
MAP = _layout(
    r"ui/map/(?P<id>[a-z0-9]{4})/(?P<variant>\d{2})"
    r"/(?P=id)(?P=variant)(?P<suffix>[a-z])?(_[a-z])?\.tex"
)


# ==============================================================================
# GRAMMAR TABLE
# ==============================================================================
# (FileType, ObjectType) -> ordered candidate patterns. Pairs that are not
# listed are never matched.

GrammarKey = Tuple[FileType, ObjectType]

GRAMMAR_TABLE: Mapping[GrammarKey, Tuple[Pattern, ...]] = MappingProxyType({
    (FileType.FONT, ObjectType.FONT): (FONT,),

    (FileType.IMC, ObjectType.WEAPON): (WEAPON_IMC,),
    (FileType.IMC, ObjectType.MONSTER): (MONSTER_IMC,),
    (FileType.IMC, ObjectType.DEMI_HUMAN): (DEMI_HUMAN_IMC,),
    (FileType.IMC, ObjectType.EQUIPMENT): (EQUIPMENT_IMC,),
    (FileType.IMC, ObjectType.ACCESSORY): (ACCESSORY_IMC,),

    (FileType.MODEL, ObjectType.WEAPON): (WEAPON_MDL,),
    (FileType.MODEL, ObjectType.MONSTER): (MONSTER_MDL,),
    (FileType.MODEL, ObjectType.DEMI_HUMAN): (DEMI_HUMAN_MDL,),
    (FileType.MODEL, ObjectType.EQUIPMENT): (EQUIPMENT_MDL,),
    (FileType.MODEL, ObjectType.ACCESSORY): (ACCESSORY_MDL,),
    (FileType.MODEL, ObjectType.CHARACTER): (CHARACTER_MDL,),

    (FileType.MATERIAL, ObjectType.WEAPON): (WEAPON_MTRL,),
    (FileType.MATERIAL, ObjectType.MONSTER): (MONSTER_MTRL,),
    (FileType.MATERIAL, ObjectType.DEMI_HUMAN): (DEMI_HUMAN_MTRL,),
    (FileType.MATERIAL, ObjectType.EQUIPMENT): (EQUIPMENT_MTRL,),
    (FileType.MATERIAL, ObjectType.ACCESSORY): (ACCESSORY_MTRL,),
    (FileType.MATERIAL, ObjectType.CHARACTER): (CHARACTER_MTRL,),

    (FileType.TEXTURE, ObjectType.WEAPON): (WEAPON_TEX,),
    (FileType.TEXTURE, ObjectType.MONSTER): (MONSTER_TEX,),
    (FileType.TEXTURE, ObjectType.DEMI_HUMAN): (DEMI_HUMAN_TEX,),
    (FileType.TEXTURE, ObjectType.EQUIPMENT): (EQUIPMENT_TEX,),
    (FileType.TEXTURE, ObjectType.ACCESSORY): (ACCESSORY_TEX,),
    (FileType.TEXTURE, ObjectType.CHARACTER): CHARACTER_TEXTURES,
    (FileType.TEXTURE, ObjectType.ICON): (ICON,),
    (FileType.TEXTURE, ObjectType.MAP): (MAP,),
})


def match_grammar(path: str, file_type: FileType, object_type: ObjectType,
                  grammar: Mapping[GrammarKey, Tuple[Pattern, ...]] = GRAMMAR_TABLE):
    """
    Match a normalized path against the layouts for its type pair.

    Args:
        path: Normalized path (see normalize_path)
        file_type: FileType of the path
        object_type: ObjectType of the path
        grammar: Table to use instead of GRAMMAR_TABLE

    Returns:
        The first successful re.Match, or None
    """
    for pattern in grammar.get((file_type, object_type), ()):
        match = pattern.fullmatch(path)
        if match is not None:
            return match
    return None


# ==============================================================================
# PATH BUILDERS
# ==============================================================================
# The inverse of the layouts above. Every path built here (except
# skeletons, which have no layout) classifies back to the values it was
# built from.

CUSTOMIZATION_TYPE_TO_SUFFIX: Mapping[CustomizationType, str] = MappingProxyType(
    {kind: suffix for suffix, kind in SUFFIX_TO_CUSTOMIZATION_TYPE.items()}
)


def _gear_folder(folder: str, letter: str, set_id: int) -> str:
    return f"chara/{folder}/{letter}{set_id:04d}"


def _gear_file(letter: str, set_id: int, race: GenderRace, slot: EquipSlot) -> str:
    return f"c{race.code}{letter}{set_id:04d}_{EQUIP_SLOT_TO_SUFFIX[slot]}"


def equipment_imc_path(set_id: int) -> str:
    return f"{_gear_folder('equipment', 'e', set_id)}/e{set_id:04d}.imc"


def equipment_mdl_path(set_id: int, race: GenderRace, slot: EquipSlot) -> str:
    return (f"{_gear_folder('equipment', 'e', set_id)}/model/"
            f"{_gear_file('e', set_id, race, slot)}.mdl")


def equipment_mtrl_path(set_id: int, race: GenderRace, slot: EquipSlot,
                        variant: int = 1, suffix: str = "a") -> str:
    return (f"{_gear_folder('equipment', 'e', set_id)}/material/v{variant:04d}/"
            f"mt_{_gear_file('e', set_id, race, slot)}_{suffix}.mtrl")


def equipment_tex_path(set_id: int, race: GenderRace, slot: EquipSlot,
                       variant: int = 1, suffix: str = "d") -> str:
    return (f"{_gear_folder('equipment', 'e', set_id)}/texture/"
            f"v{variant:02d}_{_gear_file('e', set_id, race, slot)}_{suffix}.tex")


def accessory_imc_path(set_id: int) -> str:
    return f"{_gear_folder('accessory', 'a', set_id)}/a{set_id:04d}.imc"


def accessory_mdl_path(set_id: int, race: GenderRace, slot: EquipSlot) -> str:
    return (f"{_gear_folder('accessory', 'a', set_id)}/model/"
            f"{_gear_file('a', set_id, race, slot)}.mdl")


def accessory_mtrl_path(set_id: int, race: GenderRace, slot: EquipSlot,
                        variant: int = 1, suffix: str = "a") -> str:
    return (f"{_gear_folder('accessory', 'a', set_id)}/material/v{variant:04d}/"
            f"mt_{_gear_file('a', set_id, race, slot)}_{suffix}.mtrl")


def weapon_imc_path(set_id: int, weapon_id: int) -> str:
    return f"chara/weapon/w{set_id:04d}/obj/body/b{weapon_id:04d}/b{weapon_id:04d}.imc"


def weapon_mdl_path(set_id: int, weapon_id: int) -> str:
    return (f"chara/weapon/w{set_id:04d}/obj/body/b{weapon_id:04d}/model/"
            f"w{set_id:04d}b{weapon_id:04d}.mdl")


def weapon_mtrl_path(set_id: int, weapon_id: int, variant: int = 1, suffix: str = "a") -> str:
    return (f"chara/weapon/w{set_id:04d}/obj/body/b{weapon_id:04d}/material/v{variant:04d}/"
            f"mt_w{set_id:04d}b{weapon_id:04d}_{suffix}.mtrl")


def weapon_tex_path(set_id: int, weapon_id: int, variant: int = 1, suffix: str = "d") -> str:
    return (f"chara/weapon/w{set_id:04d}/obj/body/b{weapon_id:04d}/texture/"
            f"v{variant:02d}_w{set_id:04d}b{weapon_id:04d}_{suffix}.tex")


def monster_imc_path(monster_id: int, body_id: int) -> str:
    return f"chara/monster/m{monster_id:04d}/obj/body/b{body_id:04d}/b{body_id:04d}.imc"


def monster_mdl_path(monster_id: int, body_id: int) -> str:
    return (f"chara/monster/m{monster_id:04d}/obj/body/b{body_id:04d}/model/"
            f"m{monster_id:04d}b{body_id:04d}.mdl")


def monster_mtrl_path(monster_id: int, body_id: int, variant: int = 1, suffix: str = "a") -> str:
    return (f"chara/monster/m{monster_id:04d}/obj/body/b{body_id:04d}/material/v{variant:04d}/"
            f"mt_m{monster_id:04d}b{body_id:04d}_{suffix}.mtrl")


def demihuman_imc_path(demi_human_id: int, equip_id: int) -> str:
    return (f"chara/demihuman/d{demi_human_id:04d}/obj/equipment/e{equip_id:04d}/"
            f"e{equip_id:04d}.imc")


def demihuman_mdl_path(demi_human_id: int, equip_id: int, slot: EquipSlot) -> str:
    return (f"chara/demihuman/d{demi_human_id:04d}/obj/equipment/e{equip_id:04d}/model/"
            f"d{demi_human_id:04d}e{equip_id:04d}_{EQUIP_SLOT_TO_SUFFIX[slot]}.mdl")


def demihuman_mtrl_path(demi_human_id: int, equip_id: int, slot: EquipSlot,
                        variant: int = 1, suffix: str = "a") -> str:
    return (f"chara/demihuman/d{demi_human_id:04d}/obj/equipment/e{equip_id:04d}/"
            f"material/v{variant:04d}/mt_d{demi_human_id:04d}e{equip_id:04d}_"
            f"{EQUIP_SLOT_TO_SUFFIX[slot]}_{suffix}.mtrl")


def _human_folder(race: GenderRace, body_slot: BodySlot, slot_id: int) -> str:
    name = BODY_SLOT_TO_STRING[body_slot]
    return f"chara/human/c{race.code}/obj/{name}/{name[0]}{slot_id:04d}"


def character_mdl_path(race: GenderRace, body_slot: BodySlot, slot_id: int,
                       customization: CustomizationType) -> str:
    abbreviation = BODY_SLOT_TO_STRING[body_slot][0]
    return (f"{_human_folder(race, body_slot, slot_id)}/model/"
            f"c{race.code}{abbreviation}{slot_id:04d}_"
            f"{CUSTOMIZATION_TYPE_TO_SUFFIX[customization]}.mdl")


def character_mtrl_path(race: GenderRace, body_slot: BodySlot, slot_id: int,
                        file_name: str, variant: int = 0) -> str:
    """
    Build a human material path.

    Models reference their materials by file name only ("/mt_c0101f0001_fac_a.mtrl");
    this places such a name into its material folder.

    Args:
        race: Gender-race of the model
        body_slot: Customization folder
        slot_id: Id of the hair/face/... model
        file_name: Material file name, with or without a leading '/'
        variant: Material variant, 0 for the unversioned folder
    """
    folder = f"{_human_folder(race, body_slot, slot_id)}/material"
    if variant:
        folder += f"/v{variant:04d}"
    return f"{folder}/{file_name.lstrip('/')}"


def icon_path(icon_id: int, hq: bool = False, hr: bool = False,
              language: Optional[ClientLanguage] = None) -> str:
    group = icon_id - icon_id % 1000
    path = f"ui/icon/{group:06d}"
    if language is not None:
        path += f"/{LANGUAGE_TO_CODE[language]}"
    if hq:
        path += "/hq"
    path += f"/{icon_id:06d}"
    if hr:
        path += "_hr1"
    return path + ".tex"


def map_texture_path(map_id: str, variant: int, suffix: str = "", kind: str = "m") -> str:
    return f"ui/map/{map_id}/{variant:02d}/{map_id}{variant:02d}{suffix}_{kind}.tex"


# ==============================================================================
# SKELETON PATHS
# ==============================================================================

def human_skeleton_path(race: GenderRace, type_name: str, slot_id: int) -> str:
    """
    Path of a human skeleton.

    Args:
        race: Gender-race of the skeleton
        type_name: "base" or an extra skeleton type ("hair", "face", "top", "met")
        slot_id: Skeleton id within the type
    """
    abbreviation = type_name[0]
    return (f"chara/human/c{race.code}/skeleton/{type_name}/{abbreviation}{slot_id:04d}/"
            f"skl_c{race.code}{abbreviation}{slot_id:04d}.sklb")


def _base_skeleton_path(folder: str, letter: str, primary_id: int) -> str:
    return (f"chara/{folder}/{letter}{primary_id:04d}/skeleton/base/b0001/"
            f"skl_{letter}{primary_id:04d}b0001.sklb")


def monster_skeleton_path(monster_id: int) -> str:
    return _base_skeleton_path("monster", "m", monster_id)


def weapon_skeleton_path(set_id: int) -> str:
    return _base_skeleton_path("weapon", "w", set_id)


def demihuman_skeleton_path(demi_human_id: int) -> str:
    return _base_skeleton_path("demihuman", "d", demi_human_id)
