"""Chords and chord sequences."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ukechord.chord_type import ChordType
from ukechord.errors import ChordParseError, NoteParseError, UnrecognizedChordTypeError
from ukechord.pitch import Note, PitchClass
from ukechord.tuning import STRING_COUNT

if TYPE_CHECKING:
    from ukechord.config import VoicingConfig
    from ukechord.voicing import Voicing


@dataclass(frozen=True)
class Chord:
    """
    A root note plus a chord type, e.g. ``C#m7``.

    Two chords are equal when their roots sound the same and their types
    match, so ``C#`` equals ``Db``. Chords are immutable; transposing
    returns a new chord.
    """

    root: Note
    chord_type: ChordType

    @property
    def notes(self) -> list[Note]:
        """Root plus every interval of the chord type, required ones first."""
        return [self.root.add_interval(interval) for interval in self.chord_type.intervals]

    @property
    def name(self) -> str:
        """Short chord name, e.g. ``"Cmaj7"``."""
        return f"{self.root}{self.chord_type.symbol}"

    @property
    def sort_key(self) -> tuple[int, int]:
        return self.root.pitch_class.value, list(ChordType).index(self.chord_type)

    def __str__(self) -> str:
        return f"{self.name} - {self.root} {self.chord_type}"

    def played_notes(self) -> list[Note]:
        """
        Notes sounded on the instrument.

        Required notes come first, then optional ones; when the chord has more
        notes than the instrument has strings, the trailing optional notes
        are dropped.
        """
        return self.notes[:STRING_COUNT]

    def voicings(self, config: VoicingConfig) -> Iterator[Voicing]:
        """Every fingering of this chord allowed by *config*, simplest first."""
        from ukechord.voicing import generate_voicings

        return generate_voicings(self, config)

    def transpose(self, semitones: int) -> Chord:
        """
        Shift the chord by a signed number of semitones.

        Upward moves spell the new root with sharps, downward moves with flats.
        """
        if semitones < 0:
            return self - abs(semitones)
        return self + semitones

    def __add__(self, semitones: int) -> Chord:
        return Chord(self.root + semitones, self.chord_type)

    def __sub__(self, semitones: int) -> Chord:
        return Chord(self.root - semitones, self.chord_type)

    @classmethod
    def parse(cls, name: str) -> Chord:
        """
        Parse a chord name such as ``"C"``, ``"F#m7"`` or ``"Bbsus4"``.

        A two-character root (``C#``) is tried before a one-character root
        (``C``); the rest of the name must be a chord type symbol.

        Raises:
            ChordParseError: If no root/suffix split yields a known chord.
        """
        for split in (2, 1):
            prefix, suffix = name[:split], name[split:]
            if len(prefix) != split:
                continue
            try:
                root = Note.parse(prefix)
                chord_type = ChordType.parse(suffix)
            except (NoteParseError, UnrecognizedChordTypeError):
                continue
            return cls(root, chord_type)
        raise ChordParseError(name)

    @classmethod
    def recover(cls, pitch_classes: Sequence[PitchClass]) -> Chord:
        """
        Name the chord spelled by *pitch_classes*, rooted at the first element.

        Raises:
            NoMatchingChordTypeError: If the pitch classes form no known chord.
        """
        chord_type = ChordType.recover(pitch_classes)
        return cls(Note.from_pitch_class(pitch_classes[0]), chord_type)


@dataclass(frozen=True)
class ChordSequence:
    """An ordered, non-empty progression of chords, e.g. ``"C Am F G7"``."""

    chords: tuple[Chord, ...]

    def __iter__(self) -> Iterator[Chord]:
        return iter(self.chords)

    def __len__(self) -> int:
        return len(self.chords)

    def __str__(self) -> str:
        return " ".join(chord.name for chord in self.chords)

    def transpose(self, semitones: int) -> ChordSequence:
        return ChordSequence(tuple(chord.transpose(semitones) for chord in self.chords))

    @classmethod
    def parse(cls, text: str) -> ChordSequence:
        """
        Parse whitespace-separated chord names.

        Raises:
            ChordParseError: If the text is empty or any chord name is invalid.
        """
        names = text.split()
        if not names:
            raise ChordParseError(text)
        return cls(tuple(Chord.parse(name) for name in names))
