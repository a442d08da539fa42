"""Ukulele tunings."""

from __future__ import annotations

from enum import Enum

from ukechord.pitch import Note

#: Number of strings on the instrument.
STRING_COUNT = 4


class Tuning(Enum):
    """
    Supported tunings, strings listed in playing order (top to bottom as held).

    Each member carries the note names of the open strings and their absolute
    MIDI pitches. Standard C tuning is re-entrant: the G string sounds above
    the C string.
    """

    C = (("G", "C", "E", "A"), (67, 60, 64, 69))
    D = (("A", "D", "F#", "B"), (69, 62, 66, 71))
    G = (("D", "G", "B", "E"), (62, 55, 59, 64))

    def __init__(self, root_names: tuple[str, ...], midi_roots: tuple[int, ...]) -> None:
        if len(root_names) != STRING_COUNT or len(midi_roots) != STRING_COUNT:
            raise ValueError(f"A tuning needs exactly {STRING_COUNT} open strings.")
        self.roots: tuple[Note, ...] = tuple(Note.parse(name) for name in root_names)
        self.midi_roots = midi_roots

    def __str__(self) -> str:
        return self.name

    @classmethod
    def parse(cls, name: str) -> Tuning:
        """Look up a tuning by name, ignoring case (``"c"`` -> ``Tuning.C``)."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            supported = ", ".join(t.name for t in cls)
            raise ValueError(f"Unsupported tuning '{name}'. Use one of: {supported}.") from None
