"""Voicings: concrete fingerings of a chord, and the generator that finds them.

Generation works string by string. For every string the frets that sound a
note of the chord are collected, then every combination of one fret per
string is checked. Each string offers at most two frets per chord note (the
note and its octave), so the search stays tiny for a four-string instrument.
"""

from __future__ import annotations

import itertools
import logging
import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import NamedTuple

from ukechord.chord import Chord
from ukechord.config import MAX_FRET_ID, VoicingConfig
from ukechord.errors import FretPatternError, NoMatchingChordTypeError
from ukechord.pitch import SEMITONES_PER_OCTAVE, Note, PitchClass
from ukechord.tuning import STRING_COUNT, Tuning

logger = logging.getLogger(__name__)


class UkeString(NamedTuple):
    """
    One string's contribution to a fingering.

    Attributes:
        root: Note of the open string.
        fret: Fret pressed on the string (0 = open).
        note: Note that sounds when the string is played.
    """

    root: Note
    fret: int
    note: Note


@dataclass(frozen=True)
class Voicing:
    """
    One fret per string, in tuning order.

    Voicings are totally ordered by :attr:`sort_key` (position, span, then
    the frets themselves), which makes generated result lists reproducible.
    """

    strings: tuple[UkeString, ...]

    def __post_init__(self) -> None:
        if len(self.strings) != STRING_COUNT:
            raise ValueError(f"A voicing needs exactly {STRING_COUNT} strings, got {len(self.strings)}.")

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_frets(cls, frets: Sequence[int], tuning: Tuning) -> Voicing:
        """Build the voicing produced by pressing *frets* on an instrument tuned to *tuning*."""
        if len(frets) != STRING_COUNT:
            raise ValueError(f"Expected {STRING_COUNT} frets, got {len(frets)}.")
        return cls(tuple(UkeString(root, fret, root + fret) for root, fret in zip(tuning.roots, frets)))

    # ------------------------------------------------------------------
    # Derived attributes
    # ------------------------------------------------------------------

    @property
    def frets(self) -> tuple[int, ...]:
        return tuple(s.fret for s in self.strings)

    @property
    def roots(self) -> tuple[Note, ...]:
        return tuple(s.root for s in self.strings)

    @property
    def notes(self) -> tuple[Note, ...]:
        return tuple(s.note for s in self.strings)

    @property
    def pitch_classes(self) -> list[PitchClass]:
        """Distinct sounded pitch classes, in string order."""
        return list(dict.fromkeys(note.pitch_class for note in self.notes))

    @property
    def pressed_frets(self) -> list[int]:
        return [fret for fret in self.frets if fret > 0]

    @property
    def position(self) -> int:
        """Lowest pressed fret, 0 if every string is open."""
        return min(self.pressed_frets, default=0)

    @property
    def max_fret(self) -> int:
        return max(self.frets)

    @property
    def span(self) -> int:
        """Distance between the lowest and the highest pressed fret."""
        pressed = self.pressed_frets
        if not pressed:
            return 0
        return max(pressed) - min(pressed)

    @property
    def sort_key(self) -> tuple[int, int, tuple[int, ...]]:
        return self.position, self.span, self.frets

    # ------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------

    def __lt__(self, other: Voicing) -> bool:
        return self.sort_key < other.sort_key

    def __le__(self, other: Voicing) -> bool:
        return self.sort_key <= other.sort_key

    def __gt__(self, other: Voicing) -> bool:
        return self.sort_key > other.sort_key

    def __ge__(self, other: Voicing) -> bool:
        return self.sort_key >= other.sort_key

    # ------------------------------------------------------------------
    # Chord relations
    # ------------------------------------------------------------------

    def spells_out(self, chord: Chord) -> bool:
        """
        True if this voicing plays *chord*.

        Every required note of the chord must sound, and no sounded note may
        fall outside the chord.
        """
        sounded = {note.pitch_class for note in self.notes}
        required = {
            chord.root.add_interval(interval).pitch_class
            for interval in chord.chord_type.required_intervals
        }
        allowed = {note.pitch_class for note in chord.notes}
        return required <= sounded <= allowed

    def get_chords(self) -> list[Chord]:
        """
        Every chord whose notes are exactly the pitch classes this voicing sounds.

        Each distinct sounded pitch class is tried as the root. The result is
        sorted by root and chord type and contains no duplicates.
        """
        pitch_classes = self.pitch_classes
        chords: set[Chord] = set()
        for index, root in enumerate(pitch_classes):
            candidate = [root] + pitch_classes[:index] + pitch_classes[index + 1 :]
            try:
                chords.add(Chord.recover(candidate))
            except NoMatchingChordTypeError:
                continue
        return sorted(chords, key=lambda chord: chord.sort_key)


def generate_voicings(chord: Chord, config: VoicingConfig) -> Iterator[Voicing]:
    """
    Enumerate every fingering of *chord* within the bounds of *config*.

    The configuration is validated before anything is enumerated. The
    returned iterator yields distinct voicings that spell out the chord and
    stay within ``config.max_span``, ordered from the lowest position
    upwards (see :attr:`Voicing.sort_key`). An empty iterator means the chord
    cannot be played under these constraints.

    Raises:
        InvalidConfigError: If the fret bounds or the span are impossible.
    """
    config.validate()

    played_notes = chord.played_notes()
    candidates: list[list[UkeString]] = []
    for root in config.tuning.roots:
        string_candidates: list[UkeString] = []
        for note in played_notes:
            # The same pitch class sounds again one octave (12 frets) higher.
            base_fret = note.pitch_class.offset_from(root.pitch_class)
            for fret in (base_fret, base_fret + SEMITONES_PER_OCTAVE):
                if config.min_fret <= fret <= config.max_fret:
                    string_candidates.append(UkeString(root, fret, note))
        logger.debug("%s string: %d candidate(s) for %s", root, len(string_candidates), chord.name)
        candidates.append(string_candidates)

    voicings = {
        voicing
        for voicing in (Voicing(tuple(combo)) for combo in itertools.product(*candidates))
        if voicing.spells_out(chord) and voicing.span <= config.max_span
    }
    logger.debug("Generated %d voicing(s) for %s", len(voicings), chord.name)
    return iter(sorted(voicings))


class FretPattern:
    """Parser for compact fret patterns such as ``"2220"`` or ``"10 12 12 10"``."""

    # A dash only separates when it sits between two fret numbers, so a
    # minus sign stays attached to its token and is rejected.
    _SEPARATORS = re.compile(r"[\s,]+|(?<=[0-9])-(?=[0-9])")
    _FRET = re.compile(r"[0-9]+")

    @classmethod
    def parse(cls, text: str) -> tuple[int, ...]:
        """
        Turn a pattern into one fret number per string.

        A pattern without separators is read one digit per string; otherwise
        fret numbers are separated by whitespace, commas or a dash between
        two numbers.

        Raises:
            FretPatternError: If the pattern does not describe exactly four
                frets between 0 and :data:`MAX_FRET_ID`.
        """
        stripped = text.strip()
        tokens = [t for t in cls._SEPARATORS.split(stripped) if t]
        if len(tokens) == 1:
            tokens = list(tokens[0])

        if len(tokens) != STRING_COUNT or not all(cls._FRET.fullmatch(t) for t in tokens):
            raise FretPatternError(
                f'Fret pattern "{text}" must contain exactly {STRING_COUNT} fret numbers.'
            )

        frets = tuple(int(t) for t in tokens)
        if any(fret > MAX_FRET_ID for fret in frets):
            raise FretPatternError(f'Fret pattern "{text}" exceeds the highest fret ({MAX_FRET_ID}).')
        return frets
