# ==============================================================================
# SKELETON RESOLUTION
# ==============================================================================
# Finds the skeleton (.sklb) paths a model (.mdl) needs, based only on what
# the model path encodes.
#
# Human gear and customization models always use the race's base skeleton.
# Body and head gear, hair and faces may add an extra skeleton whose id
# comes from the game's EST tables. Those tables are not read here; callers
# pass a lookup function instead.
#
# Usage:
#   from xivpath.parsers.skeletons import resolve_skeletons_for_model
#   resolve_skeletons_for_model("chara/monster/m0001/obj/body/b0001/model/m0001b0001.mdl")
#   # ['chara/monster/m0001/skeleton/base/b0001/skl_m0001b0001.sklb']
# ==============================================================================

from enum import Enum
from typing import Callable, List, Optional

from .enums import BodySlot, EquipSlot, FileType, GenderRace, ObjectType
from .game_path_parser import GamePathParser, get_parser
from .grammar import (
    demihuman_skeleton_path, human_skeleton_path, monster_skeleton_path,
    weapon_skeleton_path,
)


class UnsupportedModelError(ValueError):
    """A model path classified fine but has no known skeleton layout."""


class EstType(Enum):
    """Extra skeleton table, valued by its skeleton folder name."""
    HAIR = "hair"
    FACE = "face"
    BODY = "top"
    HEAD = "met"


# (est_type, gender_race, set_id) -> extra skeleton id, 0 if none
EstLookup = Callable[[EstType, GenderRace, int], int]


def resolve_skeletons_for_model(path: str, est_lookup: Optional[EstLookup] = None,
                                parser: Optional[GamePathParser] = None) -> List[str]:
    """
    Resolve the skeleton paths for a model path.

    Args:
        path: Game path of a .mdl file
        est_lookup: Extra skeleton id lookup; without one no extra
                    skeletons are added
        parser: Parser to classify with, defaults to the shared one

    Returns:
        Skeleton paths, base skeleton first. Empty for non-model paths and
        model paths that did not fully decode.

    Raises:
        UnsupportedModelError: Human model for a body slot without a
                               known skeleton layout
    """
    info = (parser or get_parser()).classify(path)
    if info.file_type is not FileType.MODEL or not info.is_complete:
        return []

    object_type = info.object_type
    if object_type is ObjectType.DEMI_HUMAN:
        return [demihuman_skeleton_path(info.primary_id)]
    if object_type is ObjectType.MONSTER:
        return [monster_skeleton_path(info.primary_id)]
    if object_type is ObjectType.WEAPON:
        return [weapon_skeleton_path(info.primary_id)]
    if object_type not in (ObjectType.EQUIPMENT, ObjectType.ACCESSORY, ObjectType.CHARACTER):
        return []

    skeletons = [human_skeleton_path(info.gender_race, "base", 1)]

    if object_type is ObjectType.EQUIPMENT:
        if info.equip_slot is EquipSlot.BODY:
            skeletons += _extra_skeleton(EstType.BODY, info, est_lookup)
        elif info.equip_slot is EquipSlot.HEAD:
            skeletons += _extra_skeleton(EstType.HEAD, info, est_lookup)
        return skeletons

    if object_type is ObjectType.ACCESSORY:
        return skeletons

    body_slot = info.body_slot
    if body_slot in (BodySlot.BODY, BodySlot.TAIL):
        return skeletons
    if body_slot is BodySlot.HAIR:
        return skeletons + _extra_skeleton(EstType.HAIR, info, est_lookup)
    if body_slot in (BodySlot.FACE, BodySlot.ZEAR):
        return skeletons + _extra_skeleton(EstType.FACE, info, est_lookup)

    raise UnsupportedModelError(f"Currently unsupported human model type \"{body_slot.name}\".")


def _extra_skeleton(est_type: EstType, info, est_lookup: Optional[EstLookup]) -> List[str]:
    if est_lookup is None:
        return []

    target_id = est_lookup(est_type, info.gender_race, info.primary_id)
    if not target_id:
        return []

    return [human_skeleton_path(info.gender_race, est_type.value, target_id)]
