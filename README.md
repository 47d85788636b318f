# settlersfmt

`settlersfmt` is a pure Python library of building blocks for the data files
of *The Settlers II*. It uses only the standard library.

## Modules

- **`settlersfmt.enums`**: the enumerations `TextureFormat`, `BobType`,
  `SoundType`, `Animal`, `Resource`, `ObjectInfo`, `ObjectType` and `ImgDir`,
  and the constants `NUM_BOB_TYPES` and `HARBOR_MASK`. It also defines
  `ErrorCode` and the `FileError` exception. A `FileError` carries its error in
  `.code`. Codes above `ErrorCode.CUSTOM` are kept as plain integers.
- **`settlersfmt.colors`**: the frozen dataclasses `ColorRGB` and `ColorBGRA`.
  Channels must lie in 0–255. `ColorRGB` has `from_bgr` and `to_bgr`.
  `ColorBGRA` has `from_value`, `as_value` (a 32-bit value with alpha in the
  highest byte), `from_bgra`, `to_bgra`, `from_rgb` and `to_rgb`.
- **`settlersfmt.oem`**: `ansi_to_oem` and `oem_to_ansi` translate bytes
  between the ANSI and OEM code pages. Bytes up to 128 are left unchanged.
  `oem_to_ansi` turns OEM bytes above 128 that have no ANSI counterpart into
  zero.
- **`settlersfmt.mapping`**: reads the `<index><space or tab><value>` text
  format.
  - Empty lines and lines starting with `#` are skipped.
  - `read_mapping` yields `(index, value)` pairs from any iterable of lines.
  - `read_mapping_file` returns them as a list.
  - A malformed line raises `MappingError`, which has `.line` and `.reason`.
- **`settlersfmt.archive`**: `Archiv`, an ordered collection of `ArchivItem`
  objects in which a slot may be `None`.
  - Slot management: `alloc`, `alloc_inc` and `clear`.
  - Storing items: `set`, `set_copy`, `push` and `push_copy`.
  - Lookup: `get` returns `None` when the index is out of range, and `find`
    searches by name.
  - `release` takes an item out and leaves its slot empty.
  - It supports `len`, indexing and iteration.
  - An `ArchivItem` has a `bob_type` and a `name`, and `clone()` returns a
    deep copy.
- **`settlersfmt.pixel_buffer`**: `PixelBuffer`, `PixelBufferBGRA` (pixels are
  `ColorBGRA`) and `PixelBufferPaletted` (pixels are palette indices; the
  default is `DEFAULT_TRANSPARENT_IDX`).
  - Pixel access: `get`, `set` and `calc_idx`, with bounds checks.
  - Whole-buffer access: `rows` and `clear`.
  - `flip_vertical(buffer)` mirrors a buffer top to bottom in place.
- **`settlersfmt.gamma`**: `GammaTable(size, gamma)`, an integer lookup table
  computed through a gamma curve.
- **`settlersfmt.midi_track`**: `MidiHeader` packs and unpacks the 14-byte
  `MThd` chunk. `MidiTrack`, `XMidiTrack` and `Timbre` hold track data. Their
  `read(stream, length)` raises `FileError(ErrorCode.UNEXPECTED_EOF)` when the
  stream runs out.
- **`settlersfmt.xmidi`**: `XMidiTrackConverter` turns an `XMidiTrack` into a
  standard MIDI `MTrk` track, and `put_vlq` encodes MIDI variable-length
  quantities.
  - Note-on events are split into note-on and note-off events.
  - Volumes pass through a gamma curve.
  - Each used channel gets initial bank, volume, pan and patch events.
  - A fixed tempo event is put at the start.
- **`settlersfmt.folder`**: `read_folder_info(path)` lists the files and
  subfolders of a folder as `FileEntry` objects, sorted by path. It reads each
  entry's index, item type, origin and name from its file name, for example
  `12.player.nx-3.ny5.bmp`, `u+00e4.bmp` or `font.dx2.dy3.fon`. The module also
  holds the global texture format, which you change with
  `set_global_texture_format` and read with `get_global_texture_format`.

## Examples

```python
from settlersfmt.oem import ansi_to_oem, oem_to_ansi
from settlersfmt.colors import ColorRGB, ColorBGRA

oem = ansi_to_oem("Grüße".encode("latin-1"))
assert oem_to_ansi(oem) == "Grüße".encode("latin-1")

pink = ColorRGB(0xFF, 0x00, 0x8F)
assert ColorBGRA.from_rgb(pink, 0xFF).to_rgb() == pink
```

```python
import io
from settlersfmt.mapping import read_mapping

for index, value in read_mapping(io.StringIO("# comment\n0\tfirst\n5 second\n")):
    print(index, value)
```

```python
from settlersfmt.midi_track import XMidiTrack
from settlersfmt.xmidi import XMidiTrackConverter

# delta 0, note on channel 0 (note 60, velocity 100, duration 10), end of track
events = bytes([0x00, 0x90, 60, 100, 10, 0xFF, 0x2F, 0x00])
converter = XMidiTrackConverter(XMidiTrack(events))
converter.convert()
midi = converter.create_midi_track()
assert midi.data.startswith(b"MTrk")
```

```python
from settlersfmt.folder import read_folder_info

for entry in read_folder_info("unpacked/"):
    print(entry.nr, entry.bob_type, entry.name)
```

## What the package does not do

The package has no readers or writers for the game's file formats themselves:

- no LST, BOB, BBM, ACT, LBM, BMP, IDX/DAT, GER/ENG, INI, WLD/SWD or sound files;
- no bitmap, palette, font, map, text or sound item classes;
- no function that loads a whole folder into an `Archiv`;
- no command-line tool.

`read_folder_info` only describes a folder. It does not load any file.

## Running the tests

```
pip install -e .[test]
pytest
```