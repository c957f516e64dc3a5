import pytest

from ftkit.mlx_keys import Action, Key, ModifierKey
from ftkit.mlx_types import (
    ErrorCode,
    Instance,
    KeyData,
    Setting,
    Texture,
    Vertex,
    Xpm,
    default_settings,
)


def test_error_code_values_follow_declaration_order():
    assert ErrorCode(0) is ErrorCode.SUCCESS
    assert ErrorCode(1) is ErrorCode.INVEXT
    assert ErrorCode(15) is ErrorCode.STRTOOBIG
    assert [ErrorCode(i) for i in range(16)] == list(ErrorCode)


def test_error_code_descriptions_are_distinct():
    descriptions = [ErrorCode(i).description for i in range(16)]
    assert len(set(descriptions)) == 16
    assert all(descriptions)


def test_error_code_from_raw_value():
    assert ErrorCode(3) is ErrorCode.INVPNG
    with pytest.raises(ValueError):
        ErrorCode(16)


def test_setting_values():
    assert Setting(0) is Setting.STRETCH_IMAGE
    assert Setting(4) is Setting.HEADLESS


def test_default_settings_cover_every_setting():
    settings = default_settings()
    assert set(settings) == set(Setting)
    assert settings[Setting.DECORATED] is True
    assert settings[Setting.FULLSCREEN] is False
    assert settings[Setting.STRETCH_IMAGE] is False


def test_default_settings_returns_fresh_mapping():
    first = default_settings()
    first[Setting.DECORATED] = False
    assert default_settings()[Setting.DECORATED] is True


def test_blank_texture_is_zeroed():
    texture = Texture.blank(3, 2)
    assert texture.bytes_per_pixel == 4
    assert len(texture.pixels) == 3 * 2 * 4
    assert all(texture.pixel_at(x, y) == 0 for x in range(3) for y in range(2))


def test_pixel_at_packs_rgba():
    pixels = bytes([0, 0, 0, 0, 0x11, 0x22, 0x33, 0x44])
    texture = Texture(2, 1, pixels)
    assert texture.pixel_at(1, 0) == 0x11223344
    assert texture.pixel_at(0, 0) == 0


def test_pixel_at_row_major():
    pixels = bytearray(2 * 2 * 4)
    pixels[8:12] = bytes([0xAA, 0xBB, 0xCC, 0xDD])
    texture = Texture(2, 2, pixels)
    assert texture.pixel_at(0, 1) == 0xAABBCCDD
    assert texture.pixel_at(1, 0) == 0


def test_pixel_at_out_of_bounds():
    texture = Texture.blank(2, 2)
    with pytest.raises(IndexError):
        texture.pixel_at(2, 0)
    with pytest.raises(IndexError):
        texture.pixel_at(0, -1)


def test_texture_rejects_wrong_pixel_length():
    with pytest.raises(ValueError):
        Texture(2, 2, bytearray(15))


def test_texture_rejects_other_pixel_sizes():
    with pytest.raises(ValueError):
        Texture(1, 1, bytearray(3), bytes_per_pixel=3)


def test_blank_rejects_negative_size():
    with pytest.raises(ValueError):
        Texture.blank(-1, 2)


def test_xpm_accepts_color_and_mono():
    texture = Texture.blank(1, 1)
    assert Xpm(texture, 2, 1, "c").mode == "c"
    assert Xpm(texture, 2, 1, "m").texture is texture


def test_xpm_rejects_unknown_mode():
    with pytest.raises(ValueError):
        Xpm(Texture.blank(1, 1), 2, 1, "x")


def test_instance_defaults_and_mutation():
    instance = Instance(5, 7)
    assert (instance.x, instance.y, instance.z, instance.enabled) == (5, 7, 0, True)
    instance.enabled = False
    assert instance.enabled is False


def test_instance_rejects_out_of_range():
    with pytest.raises(ValueError):
        Instance(2**31, 0)


def test_key_data_coerces_raw_codes():
    data = KeyData(256, 1, 9, 0x0001 | 0x0002)
    assert data.key is Key.ESCAPE
    assert data.action is Action.PRESS
    assert data.modifier == ModifierKey.SHIFT | ModifierKey.CONTROL


def test_key_data_default_modifier_is_empty():
    data = KeyData(Key.A, Action.RELEASE, 0)
    assert data.modifier == 0


def test_key_data_rejects_unknown_key():
    with pytest.raises(ValueError):
        KeyData(1, Action.PRESS, 0)


def test_vertex_converts_coordinates_to_float():
    vertex = Vertex(1, 2, 3, 0, 1, 5)
    assert (vertex.x, vertex.v, vertex.tex) == (1.0, 1.0, 5)
    assert isinstance(vertex.y, float)


def test_vertex_tex_must_fit_signed_byte():
    with pytest.raises(ValueError):
        Vertex(0, 0, 0, 0, 0, 128)
    assert Vertex(0, 0, 0, 0, 0, -128).tex == -128