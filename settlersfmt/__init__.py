"""Building blocks for The Settlers II data files: enums, colours, archives,
pixel buffers, mapping files, OEM text, MIDI tracks and XMIDI conversion."""

__version__ = "0.1.0"

__all__ = [
    "archive",
    "colors",
    "enums",
    "folder",
    "gamma",
    "mapping",
    "midi_track",
    "oem",
    "pixel_buffer",
    "xmidi",
]