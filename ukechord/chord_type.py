"""The catalog of supported chord types.

Every chord type is a row of data: a description, the intervals that must
sound, the intervals that may be dropped when the instrument runs out of
strings, and the symbols used to write it after a root note. Parsing and
reverse lookup are scans over this table in its declaration order.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum

from ukechord.errors import NoMatchingChordTypeError, UnrecognizedChordTypeError
from ukechord.pitch import Interval, PitchClass

logger = logging.getLogger(__name__)

_I = Interval


class ChordType(Enum):
    """
    A chord quality, defined by required and optional intervals.

    Members are enumerated in a fixed priority order which also breaks ties
    when a set of pitch classes is matched against the catalog.
    """

    Major = ("major", (_I.PerfectUnison, _I.MajorThird, _I.PerfectFifth), (), ("", "maj", "M"))
    MajorSeventh = (
        "major 7th",
        (_I.PerfectUnison, _I.MajorThird, _I.MajorSeventh),
        (_I.PerfectFifth,),
        ("maj7", "M7"),
    )
    MajorNinth = (
        "major 9th",
        (_I.PerfectUnison, _I.MajorThird, _I.MajorSeventh, _I.MajorNinth),
        (_I.PerfectFifth,),
        ("maj9", "M9"),
    )
    MajorEleventh = (
        "major 11th",
        (_I.PerfectUnison, _I.MajorThird, _I.MajorSeventh, _I.PerfectEleventh),
        (_I.PerfectFifth, _I.MajorNinth),
        ("maj11", "M11"),
    )
    MajorThirteenth = (
        "major 13th",
        (_I.PerfectUnison, _I.MajorThird, _I.MajorSeventh, _I.MajorThirteenth),
        (_I.PerfectFifth, _I.MajorNinth, _I.PerfectEleventh),
        ("maj13", "M13"),
    )
    MajorSixth = (
        "major 6th",
        (_I.PerfectUnison, _I.MajorThird, _I.PerfectFifth, _I.MajorSixth),
        (),
        ("6", "maj6", "M6"),
    )
    SixthNinth = (
        "6th/9th",
        (_I.PerfectUnison, _I.MajorThird, _I.MajorSixth, _I.MajorNinth),
        (_I.PerfectFifth,),
        ("6/9", "maj6/9", "M6/9"),
    )
    DominantSeventh = (
        "dominant 7th",
        (_I.PerfectUnison, _I.MajorThird, _I.MinorSeventh),
        (_I.PerfectFifth,),
        ("7", "dom"),
    )
    DominantNinth = (
        "dominant 9th",
        (_I.PerfectUnison, _I.MajorThird, _I.MinorSeventh, _I.MajorNinth),
        (_I.PerfectFifth,),
        ("9",),
    )
    DominantEleventh = (
        "dominant 11th",
        (_I.PerfectUnison, _I.MajorThird, _I.MinorSeventh, _I.PerfectEleventh),
        (_I.PerfectFifth, _I.MajorNinth),
        ("11",),
    )
    DominantThirteenth = (
        "dominant 13th",
        (_I.PerfectUnison, _I.MajorThird, _I.MinorSeventh, _I.MajorThirteenth),
        (_I.PerfectFifth, _I.MajorNinth, _I.PerfectEleventh),
        ("13",),
    )
    DominantSeventhFlatNinth = (
        "dominant 7th flat 9th",
        (_I.PerfectUnison, _I.MajorThird, _I.MinorSeventh, _I.MinorNinth),
        (_I.PerfectFifth,),
        ("7b9",),
    )
    DominantSeventhSharpNinth = (
        "dominant 7th sharp 9th",
        (_I.PerfectUnison, _I.MajorThird, _I.MinorSeventh, _I.AugmentedNinth),
        (_I.PerfectFifth,),
        ("7#9",),
    )
    DominantSeventhFlatFifth = (
        "dominant 7th flat 5th",
        (_I.PerfectUnison, _I.MajorThird, _I.DiminishedFifth, _I.MinorSeventh),
        (),
        ("7b5", "7dim5"),
    )
    SuspendedFourth = (
        "suspended 4th",
        (_I.PerfectUnison, _I.PerfectFourth, _I.PerfectFifth),
        (),
        ("sus4", "sus"),
    )
    SuspendedSecond = (
        "suspended 2nd",
        (_I.PerfectUnison, _I.MajorSecond, _I.PerfectFifth),
        (),
        ("sus2",),
    )
    DominantSeventhSuspendedFourth = (
        "dominant 7th suspended 4th",
        (_I.PerfectUnison, _I.PerfectFourth, _I.MinorSeventh),
        (_I.PerfectFifth,),
        ("7sus4", "7sus"),
    )
    DominantSeventhSuspendedSecond = (
        "dominant 7th suspended 2nd",
        (_I.PerfectUnison, _I.MajorSecond, _I.MinorSeventh),
        (_I.PerfectFifth,),
        ("7sus2",),
    )
    Minor = ("minor", (_I.PerfectUnison, _I.MinorThird, _I.PerfectFifth), (), ("m", "min"))
    MinorSeventh = (
        "minor 7th",
        (_I.PerfectUnison, _I.MinorThird, _I.MinorSeventh),
        (_I.PerfectFifth,),
        ("m7", "min7"),
    )
    MinorMajorSeventh = (
        "minor/major 7th",
        (_I.PerfectUnison, _I.MinorThird, _I.MajorSeventh),
        (_I.PerfectFifth,),
        ("mMaj7", "mM7", "minMaj7"),
    )
    MinorSixth = (
        "minor 6th",
        (_I.PerfectUnison, _I.MinorThird, _I.PerfectFifth, _I.MajorSixth),
        (),
        ("m6", "min6"),
    )
    MinorNinth = (
        "minor 9th",
        (_I.PerfectUnison, _I.MinorThird, _I.MinorSeventh, _I.MajorNinth),
        (_I.PerfectFifth,),
        ("m9", "min9"),
    )
    MinorEleventh = (
        "minor 11th",
        (_I.PerfectUnison, _I.MinorThird, _I.MinorSeventh, _I.PerfectEleventh),
        (_I.PerfectFifth, _I.MajorNinth),
        ("m11", "min11"),
    )
    MinorThirteenth = (
        "minor 13th",
        (_I.PerfectUnison, _I.MinorThird, _I.MinorSeventh, _I.MajorThirteenth),
        (_I.PerfectFifth, _I.MajorNinth, _I.PerfectEleventh),
        ("m13", "min13"),
    )
    Diminished = (
        "diminished",
        (_I.PerfectUnison, _I.MinorThird, _I.DiminishedFifth),
        (),
        ("dim", "o"),
    )
    DiminishedSeventh = (
        "diminished 7th",
        (_I.PerfectUnison, _I.MinorThird, _I.DiminishedFifth, _I.DiminishedSeventh),
        (),
        ("dim7", "o7"),
    )
    HalfDiminishedSeventh = (
        "half-diminished 7th",
        (_I.PerfectUnison, _I.MinorThird, _I.DiminishedFifth, _I.MinorSeventh),
        (),
        ("m7b5", "ø", "ø7"),
    )
    Fifth = ("5th", (_I.PerfectUnison, _I.PerfectFifth), (), ("5",))
    Augmented = (
        "augmented",
        (_I.PerfectUnison, _I.MajorThird, _I.AugmentedFifth),
        (),
        ("aug", "+"),
    )
    AugmentedSeventh = (
        "augmented 7th",
        (_I.PerfectUnison, _I.MajorThird, _I.AugmentedFifth, _I.MinorSeventh),
        (),
        ("aug7", "+7", "7#5"),
    )
    AugmentedMajorSeventh = (
        "augmented major 7th",
        (_I.PerfectUnison, _I.MajorThird, _I.AugmentedFifth, _I.MajorSeventh),
        (),
        ("augMaj7", "+M7"),
    )
    AddedNinth = (
        "added 9th",
        (_I.PerfectUnison, _I.MajorThird, _I.PerfectFifth, _I.MajorNinth),
        (),
        ("add9", "add2"),
    )
    AddedFourth = (
        "added 4th",
        (_I.PerfectUnison, _I.MajorThird, _I.PerfectFourth, _I.PerfectFifth),
        (),
        ("add4", "add11"),
    )

    def __init__(
        self,
        description: str,
        required_intervals: tuple[Interval, ...],
        optional_intervals: tuple[Interval, ...],
        symbols: tuple[str, ...],
    ) -> None:
        self.description = description
        self.required_intervals = required_intervals
        self.optional_intervals = optional_intervals
        self.symbols = symbols

    def __str__(self) -> str:
        return self.description

    @property
    def intervals(self) -> tuple[Interval, ...]:
        """Required intervals followed by optional ones."""
        return self.required_intervals + self.optional_intervals

    @property
    def symbol(self) -> str:
        """Canonical symbol used when displaying a chord of this type."""
        return self.symbols[0]

    @classmethod
    def parse(cls, symbol: str) -> ChordType:
        """
        Find the chord type written as *symbol* (e.g. ``"m7"`` or ``"sus4"``).

        Matching is exact and case-sensitive against every registered alias.

        Raises:
            UnrecognizedChordTypeError: If no chord type uses the symbol.
        """
        for chord_type in cls:
            if symbol in chord_type.symbols:
                return chord_type
        raise UnrecognizedChordTypeError(symbol)

    @classmethod
    def recover(cls, pitch_classes: Sequence[PitchClass]) -> ChordType:
        """
        Determine the chord type spelled by *pitch_classes*, rooted at the first one.

        The offsets of all pitch classes from the root are collected into a
        set (order and duplicates do not matter). The first chord type, in
        enumeration order, whose required intervals produce exactly that set
        wins; a chord type whose complete interval set matches also counts,
        so a chord's full note list always recovers the chord.

        Raises:
            ValueError: If *pitch_classes* is empty.
            NoMatchingChordTypeError: If no chord type matches the set exactly.
        """
        if not pitch_classes:
            raise ValueError("At least one pitch class is required to recover a chord type.")

        root = pitch_classes[0]
        offsets = frozenset(pc.offset_from(root) for pc in pitch_classes)

        for chord_type in cls:
            if offsets in (_offsets(chord_type.required_intervals), _offsets(chord_type.intervals)):
                logger.debug("Pitch classes %s match %s", pitch_classes, chord_type.name)
                return chord_type

        names = ", ".join(pc.name for pc in pitch_classes)
        raise NoMatchingChordTypeError(f"No chord type matches the pitch classes [{names}]")


def _offsets(intervals: tuple[Interval, ...]) -> frozenset[int]:
    return frozenset(interval.semitones for interval in intervals)
