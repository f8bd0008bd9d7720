# ==============================================================================
# GAME OBJECT INFO
# ==============================================================================
# Descriptor values produced by the game path parser.
#
# A GameObjectInfo always carries the FileType and ObjectType of a path.
# When the path matched its grammar and every field decoded, it also carries
# exactly one payload describing the identifiers encoded in the path:
#
#   ObjectType            Payload
#   --------------------  ------------------
#   Equipment, Accessory  EquipmentData
#   Weapon                WeaponData
#   Monster               MonsterData
#   DemiHuman             DemiHumanData
#   Character             CustomizationData
#   Icon                  IconData
#   Map                   MapData
#   anything else         (none)
#
# A descriptor without payload is the uniform "could not fully classify"
# result. Fields are never zero-filled to stand in for a missing payload.
#
# Usage:
#   info = classify("chara/weapon/w2001/obj/body/b0001/b0001.imc")
#   info.object_type      # ObjectType.WEAPON
#   info.payload.set_id   # 2001
# ==============================================================================

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Optional, Union

from .enums import (
    BodySlot, ClientLanguage, CustomizationType, EquipSlot, FileType,
    GenderRace, ObjectType,
)


U8_MAX = 0xFF
U16_MAX = 0xFFFF
U32_MAX = 0xFFFFFFFF


# ==============================================================================
# PAYLOADS
# ==============================================================================

@dataclass(frozen=True)
class EquipmentData:
    """
    Identifiers of an equipment or accessory path.

    Attributes:
        set_id (int):            Equipment set (e####/a####)
        gender_race:             Race of the model (models, materials, textures)
        equip_slot:              Slot suffix (models, materials, textures)
        variant (int):           Material/texture variant
    """
    set_id: int
    gender_race: Optional[GenderRace] = None
    equip_slot: Optional[EquipSlot] = None
    variant: Optional[int] = None


@dataclass(frozen=True)
class WeaponData:
    """Identifiers of a weapon path: w<set_id>/obj/body/b<weapon_id>."""
    set_id: int
    weapon_id: int
    variant: Optional[int] = None


@dataclass(frozen=True)
class MonsterData:
    """Identifiers of a monster path: m<monster_id>/obj/body/b<body_id>."""
    monster_id: int
    body_id: int
    variant: Optional[int] = None


@dataclass(frozen=True)
class DemiHumanData:
    """Identifiers of a demihuman path: d<demi_human_id>/obj/equipment/e<equip_id>."""
    demi_human_id: int
    equip_id: int
    equip_slot: Optional[EquipSlot] = None
    variant: Optional[int] = None


@dataclass(frozen=True)
class CustomizationData:
    """
    Identifiers of a human customization path.

    Skin and catchlight textures only carry a customization type. Decals add
    an id. Everything under chara/human/ also has race, body slot and, for
    materials, a variant.
    """
    customization_type: CustomizationType
    id: Optional[int] = None
    gender_race: Optional[GenderRace] = None
    body_slot: Optional[BodySlot] = None
    variant: Optional[int] = None


@dataclass(frozen=True)
class IconData:
    id: int
    hq: bool = False
    hr: bool = False
    language: Optional[ClientLanguage] = None


@dataclass(frozen=True)
class MapData:
    """
    Identifiers of a map texture.

    The four character map token (e.g. "s1f1") is kept as the ASCII byte of
    each character, not as a number.
    """
    map_x: int
    map_y: int
    map_z: int
    map_w: int
    variant: int
    suffix: Optional[int] = None

    @property
    def map_id(self) -> str:
        return bytes((self.map_x, self.map_y, self.map_z, self.map_w)).decode('ascii')


Payload = Union[
    EquipmentData, WeaponData, MonsterData, DemiHumanData,
    CustomizationData, IconData, MapData,
]


# ==============================================================================
# DESCRIPTOR
# ==============================================================================

@dataclass(frozen=True)
class GameObjectInfo:
    """
    Classification of a single game path.

    Attributes:
        file_type (FileType):     Category from the extension
        object_type (ObjectType): Category from the folder layout
        payload:                  Decoded identifiers, or None
    """
    file_type: FileType
    object_type: ObjectType
    payload: Optional[Payload] = None

    @property
    def is_complete(self) -> bool:
        """True if the path matched its grammar and decoded fully."""
        return self.payload is not None

    # -------------------------------------------------------------------------
    # COMMON ACCESSORS
    # -------------------------------------------------------------------------
    # Downstream code mostly wants "the main id" and "the second id" no
    # matter which kind of object it is looking at.

    @property
    def primary_id(self) -> Optional[int]:
        payload = self.payload
        if isinstance(payload, (EquipmentData, WeaponData)):
            return payload.set_id
        if isinstance(payload, MonsterData):
            return payload.monster_id
        if isinstance(payload, DemiHumanData):
            return payload.demi_human_id
        if isinstance(payload, (CustomizationData, IconData)):
            return payload.id
        return None

    @property
    def secondary_id(self) -> Optional[int]:
        payload = self.payload
        if isinstance(payload, WeaponData):
            return payload.weapon_id
        if isinstance(payload, MonsterData):
            return payload.body_id
        if isinstance(payload, DemiHumanData):
            return payload.equip_id
        return None

    @property
    def variant(self) -> Optional[int]:
        return getattr(self.payload, 'variant', None)

    @property
    def gender_race(self) -> Optional[GenderRace]:
        return getattr(self.payload, 'gender_race', None)

    @property
    def equip_slot(self) -> Optional[EquipSlot]:
        return getattr(self.payload, 'equip_slot', None)

    @property
    def body_slot(self) -> Optional[BodySlot]:
        return getattr(self.payload, 'body_slot', None)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to plain JSON-friendly values.

        Enums become their names, missing payload fields are left out.

        Returns:
            Dict with 'file_type', 'object_type' and, if present, 'payload'
        """
        result: Dict[str, Any] = {
            'file_type': self.file_type.name,
            'object_type': self.object_type.name,
        }
        if self.payload is not None:
            data = {}
            for f in fields(self.payload):
                value = getattr(self.payload, f.name)
                if value is None:
                    continue
                data[f.name] = value.name if isinstance(value, Enum) else value
            result['payload'] = data
        return result
