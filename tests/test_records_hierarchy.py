import struct

import pytest

from fltkit.records_hierarchy import (
    NO_VERTEX_REFERENCE,
    ExtensionData,
    FaceData,
    FaceDrawType,
    FaceFlag,
    FaceLightMode,
    FaceTemplate,
    GroupData,
    GroupFlag,
    InstanceDefinitionData,
    InstanceReferenceData,
    ObjectData,
)


def _full_face():
    return FaceData(
        ascii_id="p1",
        ir_color_code=-7,
        relative_priority=-3,
        draw_type=FaceDrawType.WIREFRAME,
        texture_white=1,
        color_name_index=11,
        alternate_color_name_index=12,
        reserved1=0,
        billboard_flags=FaceTemplate.AXIAL_ROTATE,
        detail_texture_pattern_index=-1,
        texture_pattern_index=5,
        material_index=6,
        surface_material_code=7,
        feature_id=8,
        ir_material_code=9,
        transparency=40000,
        lod_generation_control=3,
        line_style_index=4,
        flags=FaceFlag.PACKED_COLOR | FaceFlag.TERRAIN,
        light_mode=FaceLightMode.VERTEX_COLORS_AND_NORMALS,
        reserved2=0,
        reserved3=0,
        reserved4=0,
        packed_color_primary=0xFF102030,
        packed_color_alternate=0x00405060,
        texture_mapping_index=-1,
        reserved5=0,
        primary_color_index=100,
        alternate_color_index=200,
        reserved6=0,
        reserved7=0,
    )


def test_face_round_trip():
    face = _full_face()
    packed = face.pack()
    assert len(packed) == FaceData.SIZE
    assert FaceData.unpack(packed) == face


def test_face_ascii_id_leads_and_is_nul_padded():
    packed = FaceData(ascii_id="p1").pack()
    assert packed[:8] == b"p1" + bytes(6)


def test_face_packed_color_is_big_endian():
    face = _full_face()
    packed = face.pack()
    assert struct.pack(">I", face.packed_color_primary) in packed
    assert FaceData.unpack(packed).face_flags == FaceFlag.PACKED_COLOR | FaceFlag.TERRAIN


def test_face_enum_fields_survive():
    restored = FaceData.unpack(_full_face().pack())
    assert restored.draw_type == FaceDrawType.WIREFRAME
    assert restored.light_mode == FaceLightMode.VERTEX_COLORS_AND_NORMALS
    assert restored.billboard_flags == FaceTemplate.AXIAL_ROTATE


def test_face_extra_trailing_bytes_ignored():
    face = _full_face()
    assert FaceData.unpack(face.pack() + b"\x99\x99") == face


def test_face_short_data_rejected():
    with pytest.raises(ValueError):
        FaceData.unpack(bytes(FaceData.SIZE - 1))


def test_face_long_ascii_id_rejected():
    with pytest.raises(ValueError):
        FaceData(ascii_id="toolongid").pack()


def test_face_out_of_range_value_rejected():
    with pytest.raises(ValueError):
        FaceData(color_name_index=-1).pack()


def test_group_round_trip_and_animation():
    group = GroupData(
        ascii_id="g7",
        relative_priority=2,
        flags=GroupFlag.FORWARD_ANIMATION,
        special_effect_id1=1,
        special_effect_id2=2,
        significance=3,
        layer_code=-4,
        reserved3=0,
    )
    packed = group.pack()
    assert len(packed) == GroupData.SIZE
    restored = GroupData.unpack(packed)
    assert restored == group
    assert restored.animated
    assert not GroupData(flags=0).animated


def test_group_swing_counts_as_animation():
    restored = GroupData.unpack(GroupData(flags=GroupFlag.SWING_ANIMATION).pack())
    assert restored.flags & GroupFlag.ANIMATION == GroupFlag.SWING_ANIMATION


def test_group_short_data_rejected():
    with pytest.raises(ValueError):
        GroupData.unpack(b"\x00" * 3)


def test_object_round_trip():
    obj = ObjectData(
        ascii_id="o12345",
        flags=0x80000000,
        relative_priority=-2,
        transparency=65535,
        special_effect_id1=4,
        special_effect_id2=5,
        significance=6,
        spare=0,
    )
    packed = obj.pack()
    assert len(packed) == ObjectData.SIZE
    assert ObjectData.unpack(packed) == obj


def test_object_full_width_ascii_id_round_trips():
    obj = ObjectData(ascii_id="abcdefgh")
    assert ObjectData.unpack(obj.pack()).ascii_id == "abcdefgh"


def test_instance_definition_wire_bytes():
    packed = InstanceDefinitionData(spare=0, instance_definition_number=5).pack()
    assert packed == b"\x00\x00\x00\x05"
    assert InstanceDefinitionData.unpack(packed).instance_definition_number == 5


def test_instance_reference_round_trip_negative():
    ref = InstanceReferenceData(spare=-1, instance_definition_number=300)
    assert InstanceReferenceData.unpack(ref.pack()) == ref


def test_instance_reference_out_of_range():
    with pytest.raises(ValueError):
        InstanceReferenceData(instance_definition_number=40000).pack()


def test_extension_default_is_not_vertex():
    ext = ExtensionData()
    assert ext.vertex_reference_index == NO_VERTEX_REFERENCE
    assert not ext.is_vertex_extension
    assert ext.pack()[-2:] == b"\xff\xff"


def test_extension_round_trip():
    ext = ExtensionData(reserved=b"ext" + bytes(15), vertex_reference_index=42)
    packed = ext.pack()
    assert len(packed) == ExtensionData.SIZE
    restored = ExtensionData.unpack(packed)
    assert restored == ext
    assert restored.is_vertex_extension


def test_extension_reserved_too_long():
    with pytest.raises(ValueError):
        ExtensionData(reserved=bytes(19)).pack()


def test_extension_short_data_rejected():
    with pytest.raises(ValueError):
        ExtensionData.unpack(bytes(ExtensionData.SIZE - 1))