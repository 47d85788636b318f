"""Conversion of XMIDI event tracks into standard MIDI tracks."""

from __future__ import annotations

from dataclasses import dataclass, field

from .gamma import GammaTable
from .midi_track import MidiTrack, XMidiTrack

PATCH_VOL_PAN_BIAS = 5
"""Maximum time distance of a volume, pan or bank event from its patch change."""

_VOLUME_CURVE = GammaTable(128)

_STATUS_NOTE_OFF = 0x8
_STATUS_NOTE_ON = 0x9
_STATUS_AFTERTOUCH = 0xA
_STATUS_CONTROLLER = 0xB
_STATUS_PROG_CHANGE = 0xC
_STATUS_PRESSURE = 0xD
_STATUS_PITCH_WHEEL = 0xE
_STATUS_SYSEX = 0xF

_META = 0xFF
_META_END_OF_TRACK = 0x2F
_META_TEMPO = 0x51

# 500000 microseconds per quarter note; at XMIDI's fixed 120 Hz this gives 60 PPQN.
_DEFAULT_TEMPO = bytes((0x07, 0xA1, 0x20))


def put_vlq(value: int) -> bytes:
    """Encode a value as a MIDI variable length quantity."""
    if not 0 <= value <= 0xFFFFFFFF:
        raise ValueError(f"VLQ value out of range: {value}")
    groups = [value & 0x7F]
    value >>= 7
    while value:
        groups.append((value & 0x7F) | 0x80)
        value >>= 7
    return bytes(reversed(groups))


def _volume(value: int) -> int:
    if not 0 <= value < len(_VOLUME_CURVE):
        raise ValueError(f"volume value out of range: {value}")
    return _VOLUME_CURVE[value]


@dataclass
class _MidiEvent:
    time: int = 0
    status: int = 0
    data: list[int] = field(default_factory=lambda: [0, 0])
    buffer: bytes = b""
    duration: int = 0


@dataclass
class _FirstState:
    patch: list[_MidiEvent | None] = field(default_factory=lambda: [None] * 16)
    bank: list[_MidiEvent | None] = field(default_factory=lambda: [None] * 16)
    pan: list[_MidiEvent | None] = field(default_factory=lambda: [None] * 16)
    vol: list[_MidiEvent | None] = field(default_factory=lambda: [None] * 16)


class XMidiTrackConverter:
    """Turns the events of one XMIDI track into a standard MIDI track."""

    def __init__(self, track: XMidiTrack):
        self.track = track
        self._data = bytes(track.data)
        self._events: list[_MidiEvent] = []
        self._cur: int | None = None
        self._position = 0
        self.bank127 = [False] * 16

    @property
    def num_events(self) -> int:
        return len(self._events)

    def convert(self) -> bool:
        """Convert the track. Returns False if it was converted already."""
        if self._events:
            return False
        self._convert_track_to_list()
        return True

    # -- reading -------------------------------------------------------------

    def _byte(self, offset: int = 0) -> int:
        pos = self._position + offset
        if pos >= len(self._data):
            raise ValueError("unexpected end of XMIDI track data")
        return self._data[pos]

    def _next_byte(self) -> int:
        value = self._byte()
        self._position += 1
        return value

    def _get_vlq(self) -> int:
        quant = 0
        for _ in range(4):
            value = self._next_byte()
            quant = (quant << 7) | (value & 0x7F)
            if not value & 0x80:
                return quant
        raise ValueError("Could not get VLQ")

    def _get_vlq2(self) -> int:
        quant = 0
        for _ in range(4):
            value = self._byte()
            if value & 0x80:
                return quant
            quant += value
            self._position += 1
        raise ValueError("Could not get VLQ2")

    # -- event list ----------------------------------------------------------

    def _create_event(self, time: int) -> int:
        """Insert a new event ordered by time; return its position."""
        event = _MidiEvent()
        events = self._events
        if not events:
            event.time = max(time, 0)
            events.append(event)
            self._cur = 0
            return 0
        if time < 0 or events[0].time > time:
            events.insert(0, event)
            self._cur = 0
            return 0
        start = self._cur if self._cur is not None and events[self._cur].time <= time else 0
        pos = next((j for j in range(start + 1, len(events)) if events[j].time > time), len(events))
        event.time = time
        events.insert(pos, event)
        self._cur = pos
        return pos

    def _convert_track_to_list(self) -> int:
        time = 0
        channel_mask = 0
        first_state = _FirstState()
        self._position = 0

        while self._position < len(self._data):
            time += self._get_vlq2()
            status = self._next_byte()
            kind = status >> 4
            if kind == _STATUS_NOTE_ON:
                channel_mask |= 1 << (status & 0xF)
                self._convert_note(time, status, 3)
            elif kind == _STATUS_NOTE_OFF:
                self._convert_note(time, status, 2)
            elif kind in (_STATUS_AFTERTOUCH, _STATUS_CONTROLLER, _STATUS_PITCH_WHEEL):
                self._convert_event(time, status, 2, first_state)
            elif kind in (_STATUS_PROG_CHANGE, _STATUS_PRESSURE):
                self._convert_event(time, status, 1, first_state)
            elif kind == _STATUS_SYSEX:
                end = False
                if status == _META:
                    meta = self._byte()
                    if meta == _META_END_OF_TRACK:
                        end = True
                    elif meta == _META_TEMPO:
                        # Tempo changes are dropped; a fixed tempo is used.
                        self._position += 1
                        self._position += self._get_vlq()
                        continue
                self._convert_system_message(time, status)
                if end:
                    break

        self._apply_first_state(first_state, channel_mask)
        return channel_mask

    def _convert_note(self, time: int, status: int, size: int) -> None:
        note = self._next_byte()
        idx = self._create_event(time)
        event = self._events[idx]
        event.status = status
        event.data[0] = note
        event.data[1] = self._next_byte()

        if (status >> 4) == _STATUS_NOTE_ON and event.data[1]:
            event.data[1] = _volume(event.data[1])

        if size == 2:
            return

        event.duration = self._get_vlq()

        off_idx = self._create_event(time + event.duration)
        note_off = self._events[off_idx]
        note_off.status = status
        note_off.data[0] = note
        note_off.data[1] = 0
        if off_idx <= idx:
            idx += 1
        self._cur = idx

    def _convert_event(self, time: int, status: int, size: int, first_state: _FirstState) -> None:
        value = self._next_byte()
        kind = status >> 4
        channel = status & 0xF
        if kind == _STATUS_CONTROLLER and value == 0:
            self.bank127[channel] = False
        elif kind == _STATUS_PROG_CHANGE and channel == 9:
            # Patch changes on the percussion channel are dropped
            return

        event = self._events[self._create_event(time)]
        event.status = status
        event.data[0] = value

        if kind == _STATUS_PROG_CHANGE:
            current = first_state.patch[channel]
            if current is None or current.time > time:
                first_state.patch[channel] = event
        elif kind == _STATUS_CONTROLLER:
            if value == 7:
                current = first_state.vol[channel]
                if current is None or current.time > time:
                    first_state.vol[channel] = event
            elif value == 10:
                current = first_state.pan[channel]
                if current is None or current.time > time:
                    first_state.pan[channel] = event

        if size == 1:
            return

        event.data[1] = self._next_byte()
        if kind == _STATUS_CONTROLLER and value == 7:
            event.data[1] = _volume(event.data[1])

    def _convert_system_message(self, time: int, status: int) -> None:
        event = self._events[self._create_event(time)]
        event.status = status
        if status == _META:
            event.data[0] = self._next_byte()

        length = self._get_vlq()
        event.buffer = b""
        if not length:
            return
        end = self._position + length
        if end > len(self._data):
            raise ValueError("unexpected end of XMIDI track data")
        event.buffer = self._data[self._position:end]
        self._position = end

    @staticmethod
    def _near(event: _MidiEvent | None, time: int) -> _MidiEvent | None:
        if event is not None and abs(event.time - time) > PATCH_VOL_PAN_BIAS:
            return None
        return event

    def _apply_first_state(self, first_state: _FirstState, channel_mask: int) -> None:
        for channel in range(16):
            old_patch = first_state.patch[channel]
            if old_patch is None or not channel_mask & (1 << channel):
                continue
            controller = channel | (_STATUS_CONTROLLER << 4)

            patch = _MidiEvent(status=channel | (_STATUS_PROG_CHANGE << 4))
            patch.data[0] = old_patch.data[0]

            old_vol = self._near(first_state.vol[channel], old_patch.time)
            vol = _MidiEvent(status=controller)
            vol.data[0] = 7
            vol.data[1] = old_vol.data[1] if old_vol is not None else _VOLUME_CURVE[90]

            old_bank = self._near(first_state.bank[channel], old_patch.time)
            bank = _MidiEvent(status=controller)
            bank.data[1] = old_bank.data[1] if old_bank is not None else 0

            old_pan = self._near(first_state.pan[channel], old_patch.time)
            pan = _MidiEvent(status=controller)
            pan.data[0] = 10
            pan.data[1] = old_pan.data[1] if old_pan is not None else 64

            self._events[:0] = [bank, vol, pan, patch]

        tempo = _MidiEvent(status=_META, buffer=_DEFAULT_TEMPO)
        tempo.data[0] = _META_TEMPO
        self._events.insert(0, tempo)
        self._cur = 0

    # -- writing -------------------------------------------------------------

    def create_midi_track(self) -> MidiTrack:
        """Write the converted events as an 'MTrk' chunk."""
        body = bytearray()
        time = 0
        last_time = 0
        last_status = 0

        for event in self._events:
            if event.status == _META and event.data[0] == _META_END_OF_TRACK:
                last_time = event.time
                break

            body += put_vlq((event.time - time) & 0xFFFFFFFF)
            time = event.time

            if event.status != last_status or event.status >= 0xF0:
                body.append(event.status)
            last_status = event.status

            kind = event.status >> 4
            if kind in (0x8, 0x9, 0xA, 0xB, 0xE):
                body += bytes(event.data)
            elif kind in (0xC, 0xD):
                body.append(event.data[0])
            elif kind == 0xF:
                if event.status == _META:
                    body.append(event.data[0])
                body += put_vlq(len(event.buffer))
                body += event.buffer

        body += put_vlq(last_time - time if last_time > time else 0)
        body += bytes((_META, _META_END_OF_TRACK))
        body += put_vlq(0)

        return MidiTrack(b"MTrk" + len(body).to_bytes(4, "big") + bytes(body))