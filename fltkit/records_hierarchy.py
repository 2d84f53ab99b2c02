"""Fixed-layout bodies of hierarchy records: faces, groups, objects, instances, extensions.

Each record body is stored big-endian, without padding. The 4-byte record
header (opcode and length) is not part of these layouts.
"""

from __future__ import annotations

import struct
from dataclasses import astuple, dataclass
from enum import IntEnum, IntFlag
from typing import Any, ClassVar

NO_VERTEX_REFERENCE = 0xFFFF
_ASCII_ID_SIZE = 8
_EXTENSION_RESERVED_SIZE = 18


class FaceDrawType(IntEnum):
    """How a face is drawn."""

    SOLID = 0x00
    SOLID_NO_BFCULLING = 0x01
    WIREFRAME = 0x02
    WIREFRAME_AND_CLOSE = 0x03
    WIREFRAME_ALTERNATE = 0x04
    OMNIDIRECTIONAL_LIGHT = 0x08
    UNIDIRECTIONAL_LIGHT = 0x09
    BIDIRECTIONAL_LIGHT = 0x0A


class FaceTemplate(IntEnum):
    """Billboard (template) mode of a face."""

    FIXED_NO_ALPHA = 0x00
    FIXED_ALPHA = 0x01
    AXIAL_ROTATE = 0x02
    POINT_ROTATE = 0x04


class FaceFlag(IntFlag):
    """Flags stored in a face record."""

    NONE = 0
    HIDDEN = 0x04000000
    TERRAIN_CULTURE_CUTOUT = 0x08000000
    PACKED_COLOR = 0x10000000
    NO_ALTERNATE_COLOR = 0x20000000
    NO_COLOR = 0x40000000
    TERRAIN = 0x80000000


class FaceLightMode(IntEnum):
    """Which colours and normals light a face."""

    FACE_COLOR = 0x00
    VERTEX_COLORS = 0x01
    FACE_COLOR_AND_NORMALS = 0x02
    VERTEX_COLORS_AND_NORMALS = 0x03


class GroupFlag(IntFlag):
    """Flags stored in a group record."""

    NONE = 0
    SWING_ANIMATION = 1 << 29
    FORWARD_ANIMATION = 1 << 30
    ANIMATION = SWING_ANIMATION | FORWARD_ANIMATION


def _unpack(layout: struct.Struct, data: Any, what: str) -> list:
    raw = bytes(data)
    if len(raw) < layout.size:
        raise ValueError(
            f"{what} needs {layout.size} bytes, got {len(raw)}"
        )
    return list(layout.unpack_from(raw))


def _pack(layout: struct.Struct, values: tuple, what: str) -> bytes:
    try:
        return layout.pack(*values)
    except struct.error as exc:
        raise ValueError(f"cannot pack {what}: {exc}") from exc


def _encode_text(value: str, size: int, name: str) -> bytes:
    raw = value.encode("latin-1")
    if len(raw) > size:
        raise ValueError(f"{name} must be at most {size} bytes, got {len(raw)}")
    return raw


def _decode_text(raw: bytes) -> str:
    return raw.split(b"\x00", 1)[0].decode("latin-1")


@dataclass
class FaceData:
    """Body of a face record."""

    SIZE: ClassVar[int] = 76
    _LAYOUT: ClassVar[struct.Struct] = struct.Struct(">8sihbbHHbbhhhhhiHBBIBBHIIIhhIIhh")

    ascii_id: str = ""
    ir_color_code: int = 0
    relative_priority: int = 0
    draw_type: int = FaceDrawType.SOLID
    texture_white: int = 0
    color_name_index: int = 0
    alternate_color_name_index: int = 0
    reserved1: int = 0
    billboard_flags: int = FaceTemplate.FIXED_NO_ALPHA
    detail_texture_pattern_index: int = 0
    texture_pattern_index: int = 0
    material_index: int = 0
    surface_material_code: int = 0
    feature_id: int = 0
    ir_material_code: int = 0
    transparency: int = 0
    lod_generation_control: int = 0
    line_style_index: int = 0
    flags: int = FaceFlag.NONE
    light_mode: int = FaceLightMode.FACE_COLOR
    reserved2: int = 0
    reserved3: int = 0
    reserved4: int = 0
    packed_color_primary: int = 0
    packed_color_alternate: int = 0
    texture_mapping_index: int = 0
    reserved5: int = 0
    primary_color_index: int = 0
    alternate_color_index: int = 0
    reserved6: int = 0
    reserved7: int = 0

    @classmethod
    def unpack(cls, data: Any) -> "FaceData":
        """Decode a face body; bytes past its size are ignored."""
        values = _unpack(cls._LAYOUT, data, "face record")
        values[0] = _decode_text(values[0])
        return cls(*values)

    def pack(self) -> bytes:
        """Encode this face body."""
        values = list(astuple(self))
        values[0] = _encode_text(self.ascii_id, _ASCII_ID_SIZE, "ascii_id")
        return _pack(self._LAYOUT, tuple(values), "face record")

    @property
    def face_flags(self) -> FaceFlag:
        return FaceFlag(self.flags & 0xFFFFFFFF)


@dataclass
class GroupData:
    """Body of a group record."""

    SIZE: ClassVar[int] = 28
    _LAYOUT: ClassVar[struct.Struct] = struct.Struct(">8shhIhhhbbi")

    ascii_id: str = ""
    relative_priority: int = 0
    reserved1: int = 0
    flags: int = GroupFlag.NONE
    special_effect_id1: int = 0
    special_effect_id2: int = 0
    significance: int = 0
    layer_code: int = 0
    reserved2: int = 0
    reserved3: int = 0

    @classmethod
    def unpack(cls, data: Any) -> "GroupData":
        """Decode a group body; bytes past its size are ignored."""
        values = _unpack(cls._LAYOUT, data, "group record")
        values[0] = _decode_text(values[0])
        return cls(*values)

    def pack(self) -> bytes:
        """Encode this group body."""
        values = list(astuple(self))
        values[0] = _encode_text(self.ascii_id, _ASCII_ID_SIZE, "ascii_id")
        return _pack(self._LAYOUT, tuple(values), "group record")

    @property
    def animated(self) -> bool:
        return bool(self.flags & GroupFlag.ANIMATION)


@dataclass
class ObjectData:
    """Body of an object record."""

    SIZE: ClassVar[int] = 24
    _LAYOUT: ClassVar[struct.Struct] = struct.Struct(">8sIhHhhhh")

    ascii_id: str = ""
    flags: int = 0
    relative_priority: int = 0
    transparency: int = 0
    special_effect_id1: int = 0
    special_effect_id2: int = 0
    significance: int = 0
    spare: int = 0

    @classmethod
    def unpack(cls, data: Any) -> "ObjectData":
        """Decode an object body; bytes past its size are ignored."""
        values = _unpack(cls._LAYOUT, data, "object record")
        values[0] = _decode_text(values[0])
        return cls(*values)

    def pack(self) -> bytes:
        """Encode this object body."""
        values = list(astuple(self))
        values[0] = _encode_text(self.ascii_id, _ASCII_ID_SIZE, "ascii_id")
        return _pack(self._LAYOUT, tuple(values), "object record")


@dataclass
class InstanceDefinitionData:
    """Body of an instance definition record."""

    SIZE: ClassVar[int] = 4
    _LAYOUT: ClassVar[struct.Struct] = struct.Struct(">hh")

    spare: int = 0
    instance_definition_number: int = 0

    @classmethod
    def unpack(cls, data: Any) -> "InstanceDefinitionData":
        """Decode an instance definition body."""
        return cls(*_unpack(cls._LAYOUT, data, "instance definition record"))

    def pack(self) -> bytes:
        """Encode this instance definition body."""
        return _pack(self._LAYOUT, astuple(self), "instance definition record")


@dataclass
class InstanceReferenceData:
    """Body of an instance reference record."""

    SIZE: ClassVar[int] = 4
    _LAYOUT: ClassVar[struct.Struct] = struct.Struct(">hh")

    spare: int = 0
    instance_definition_number: int = 0

    @classmethod
    def unpack(cls, data: Any) -> "InstanceReferenceData":
        """Decode an instance reference body."""
        return cls(*_unpack(cls._LAYOUT, data, "instance reference record"))

    def pack(self) -> bytes:
        """Encode this instance reference body."""
        return _pack(self._LAYOUT, astuple(self), "instance reference record")


@dataclass
class ExtensionData:
    """Body shared by push-extension and pop-extension records.

    ``vertex_reference_index`` is 0xFFFF when the extension does not
    refer to a vertex.
    """

    SIZE: ClassVar[int] = 20
    _LAYOUT: ClassVar[struct.Struct] = struct.Struct(">18sH")

    reserved: bytes = bytes(_EXTENSION_RESERVED_SIZE)
    vertex_reference_index: int = NO_VERTEX_REFERENCE

    @classmethod
    def unpack(cls, data: Any) -> "ExtensionData":
        """Decode an extension body."""
        reserved, index = _unpack(cls._LAYOUT, data, "extension record")
        return cls(bytes(reserved), index)

    def pack(self) -> bytes:
        """Encode this extension body."""
        reserved = bytes(self.reserved)
        if len(reserved) > _EXTENSION_RESERVED_SIZE:
            raise ValueError(
                f"reserved must be at most {_EXTENSION_RESERVED_SIZE} bytes, "
                f"got {len(reserved)}"
            )
        return _pack(
            self._LAYOUT, (reserved, self.vertex_reference_index), "extension record"
        )

    @property
    def is_vertex_extension(self) -> bool:
        return self.vertex_reference_index != NO_VERTEX_REFERENCE