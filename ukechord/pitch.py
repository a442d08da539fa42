"""Pitch classes, spelled notes and named intervals.

All note arithmetic in ukechord happens on the circle of twelve pitch
classes. A :class:`Note` adds a spelling on top of its pitch class so that
chords can be displayed the way musicians write them (``Eb`` in C minor,
``F#`` in D major) while comparisons only look at the sound.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, unique

from ukechord.errors import NoteParseError

SEMITONES_PER_OCTAVE = 12

#: Staff letters in ascending order, starting from C.
LETTERS = "CDEFGAB"

_SHARP_NAMES: list[str] = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]
_FLAT_NAMES: list[str] = ["C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"]

#: Every accepted note spelling and the pitch class value it denotes.
NOTE_NAMES: dict[str, int] = {
    **{name: value for value, name in enumerate(_SHARP_NAMES)},
    **{name: value for value, name in enumerate(_FLAT_NAMES)},
}


@unique
class PitchClass(Enum):
    """The twelve chromatic pitch classes; values are semitones above C."""

    C = 0
    CSharp = 1
    D = 2
    DSharp = 3
    E = 4
    F = 5
    FSharp = 6
    G = 7
    GSharp = 8
    A = 9
    ASharp = 10
    B = 11

    def __add__(self, steps: int) -> PitchClass:
        return _PITCH_CLASS_LOOKUP[(self.value + steps) % SEMITONES_PER_OCTAVE]

    def __sub__(self, steps: int) -> PitchClass:
        return self + (-steps)

    def offset_from(self, root: PitchClass) -> int:
        """Number of semitones (0-11) to move upwards from *root* to this pitch class."""
        return (self.value - root.value) % SEMITONES_PER_OCTAVE

    def distance(self, other: PitchClass) -> int:
        """Shortest distance in semitones between two pitch classes, in either direction."""
        up = other.offset_from(self)
        return min(up, SEMITONES_PER_OCTAVE - up)


_PITCH_CLASS_LOOKUP: dict[int, PitchClass] = {pc.value: pc for pc in PitchClass}


@unique
class Interval(Enum):
    """
    Named intervals measured from a chord root.

    Each member carries the octave-reduced semitone offset, the number of
    staff steps the interval spans (used for spelling) and the name of the
    scale degree it produces.
    """

    PerfectUnison = (0, 0, "root")
    MinorSecond = (1, 1, "minor 2nd")
    MajorSecond = (2, 1, "2nd")
    MinorThird = (3, 2, "minor 3rd")
    MajorThird = (4, 2, "major 3rd")
    PerfectFourth = (5, 3, "4th")
    DiminishedFifth = (6, 4, "diminished 5th")
    PerfectFifth = (7, 4, "5th")
    AugmentedFifth = (8, 4, "augmented 5th")
    MajorSixth = (9, 5, "6th")
    DiminishedSeventh = (9, 6, "diminished 7th")
    MinorSeventh = (10, 6, "minor 7th")
    MajorSeventh = (11, 6, "major 7th")
    MinorNinth = (1, 1, "flat 9th")
    MajorNinth = (2, 1, "9th")
    AugmentedNinth = (3, 1, "sharp 9th")
    PerfectEleventh = (5, 3, "11th")
    MajorThirteenth = (9, 5, "13th")

    def __init__(self, semitones: int, staff_steps: int, degree: str) -> None:
        self.semitones = semitones
        self.staff_steps = staff_steps
        self.degree = degree


@dataclass(frozen=True)
class Note:
    """
    A pitch class together with the spelling used to display it.

    Equality and hashing only consider the pitch class, so ``C#`` and ``Db``
    compare equal; the spelling is kept for display.

    Attributes:
        pitch_class: The sounding pitch class.
        name:        Display spelling, one of :data:`NOTE_NAMES`.
    """

    pitch_class: PitchClass
    name: str = field(compare=False)

    def __post_init__(self) -> None:
        if NOTE_NAMES.get(self.name) != self.pitch_class.value:
            raise NoteParseError(self.name)

    def __str__(self) -> str:
        return self.name

    @classmethod
    def parse(cls, name: str) -> Note:
        """
        Build a note from its spelling, e.g. ``"C"``, ``"F#"`` or ``"Bb"``.

        Raises:
            NoteParseError: If *name* is not an accepted spelling.
        """
        if name not in NOTE_NAMES:
            raise NoteParseError(name)
        return cls(_PITCH_CLASS_LOOKUP[NOTE_NAMES[name]], name)

    @classmethod
    def from_pitch_class(cls, pitch_class: PitchClass) -> Note:
        """Spell a pitch class as a natural or sharp note."""
        return cls(pitch_class, _SHARP_NAMES[pitch_class.value])

    def __add__(self, steps: int) -> Note:
        if steps % SEMITONES_PER_OCTAVE == 0:
            return self
        pitch_class = self.pitch_class + steps
        return Note(pitch_class, _SHARP_NAMES[pitch_class.value])

    def __sub__(self, steps: int) -> Note:
        if steps % SEMITONES_PER_OCTAVE == 0:
            return self
        pitch_class = self.pitch_class - steps
        return Note(pitch_class, _FLAT_NAMES[pitch_class.value])

    def add_interval(self, interval: Interval) -> Note:
        """
        Return the note *interval* above this one, spelled on the staff.

        The letter moves by the interval's staff steps (a third above C is
        some kind of E). When that letter cannot carry the resulting pitch
        class with a single accidental (E#, Cb, Bbb) the sharp-preferring
        semitone spelling is used instead.
        """
        pitch_class = self.pitch_class + interval.semitones
        letter = LETTERS[(LETTERS.index(self.name[0]) + interval.staff_steps) % len(LETTERS)]
        for name in (_SHARP_NAMES[pitch_class.value], _FLAT_NAMES[pitch_class.value]):
            if name[0] == letter:
                return Note(pitch_class, name)
        return self + interval.semitones
