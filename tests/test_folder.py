import pytest

from settlersfmt.enums import BobType, TextureFormat
from settlersfmt.folder import (
    FileEntry,
    get_global_texture_format,
    read_folder_info,
    set_global_texture_format,
)


def _single(tmp_path, filename, directory=False):
    target = tmp_path / filename
    if directory:
        target.mkdir()
    else:
        target.write_bytes(b"")
    entries = read_folder_info(tmp_path)
    assert len(entries) == 1
    return entries[0]


def test_texture_format_round_trip():
    original = get_global_texture_format()
    try:
        assert set_global_texture_format(TextureFormat.BGRA) == original
        assert get_global_texture_format() == TextureFormat.BGRA
        assert set_global_texture_format(TextureFormat.PALETTED) == TextureFormat.BGRA
        assert get_global_texture_format() == TextureFormat.PALETTED
    finally:
        set_global_texture_format(original)


def test_file_entry_defaults(tmp_path):
    entry = FileEntry(tmp_path / "x")
    assert entry.nr == -1
    assert entry.bob_type == BobType.UNSET
    assert (entry.name, entry.nx, entry.ny) == ("", 0, 0)


def test_numbered_bitmap(tmp_path):
    entry = _single(tmp_path, "12.name.bmp")
    assert entry.nr == 12
    assert entry.name == "name"
    assert entry.bob_type == BobType.BITMAP
    assert entry.file_path == tmp_path / "12.name.bmp"


def test_player_bitmap_with_origin(tmp_path):
    entry = _single(tmp_path, "3.player.nx5.ny-7.bmp")
    assert entry.nr == 3
    assert entry.bob_type == BobType.BITMAP_PLAYER
    assert (entry.nx, entry.ny) == (5, -7)
    assert entry.name == ""


@pytest.mark.parametrize(
    "filename, bob_type",
    [
        ("1.rle.bmp", BobType.BITMAP_RLE),
        ("1.shadow.bmp", BobType.BITMAP_SHADOW),
        ("0.palette.bbm", BobType.PALETTE),
        ("0.pal.act", BobType.PALETTE),
        ("2.paletteanims.txt", BobType.PALETTE_ANIM),
        ("4.text.ger", BobType.TEXT),
        ("4.text.links", BobType.TEXT),
        ("5.empty", BobType.NONE),
        ("6.sound.wav", BobType.SOUND),
        ("6.sound.xmi", BobType.SOUND),
    ],
)
def test_types_from_name(tmp_path, filename, bob_type):
    entry = _single(tmp_path, filename)
    assert entry.bob_type == bob_type


def test_font_name_is_lowercased(tmp_path):
    entry = _single(tmp_path, "Font.DX3.DY4.FONX")
    assert entry.bob_type == BobType.FONT
    assert entry.nr == -1
    assert entry.name == "font"
    assert (entry.nx, entry.ny) == (3, 4)


def test_unknown_extension_is_unset(tmp_path):
    entry = _single(tmp_path, "readme.xyz")
    assert entry.bob_type == BobType.UNSET
    assert entry.nr == -1
    assert entry.name == "readme.xyz"


def test_directory_is_listed(tmp_path):
    entry = _single(tmp_path, "7.sub.fon", directory=True)
    assert entry.bob_type == BobType.FONT
    assert entry.nr == 7
    assert entry.name == "sub"


def test_hex_index_with_0x(tmp_path):
    entry = _single(tmp_path, "0x10.bmp")
    assert entry.nr == 16


def test_hex_index_with_unicode_prefix(tmp_path):
    entry = _single(tmp_path, "U+41.letter.bmp")
    assert entry.nr == 65
    assert entry.name == "letter"


def test_invalid_hex_index_raises(tmp_path):
    (tmp_path / "u+zz.bmp").write_bytes(b"")
    with pytest.raises(ValueError):
        read_folder_info(tmp_path)


def test_invalid_origin_raises(tmp_path):
    (tmp_path / "a.nxfoo.bmp").write_bytes(b"")
    with pytest.raises(ValueError):
        read_folder_info(tmp_path)


def test_lists_every_file(tmp_path):
    names = ["1.a.bmp", "2.b.bmp", "c.txt"]
    for name in names:
        (tmp_path / name).write_bytes(b"")
    entries = read_folder_info(tmp_path)
    assert sorted(e.file_path.name for e in entries) == sorted(names)
    by_name = {e.file_path.name: e for e in entries}
    assert by_name["c.txt"].nr == -1
    assert by_name["2.b.bmp"].nr == 2


def test_missing_folder_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_folder_info(tmp_path / "missing")