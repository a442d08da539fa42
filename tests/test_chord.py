"""Unit tests for Chord and ChordSequence."""

import pytest

from ukechord.chord import Chord, ChordSequence
from ukechord.chord_type import ChordType
from ukechord.errors import ChordParseError
from ukechord.pitch import Note, PitchClass

C, CS, D, DS, E, F, FS, G, GS, A, AS, B = list(PitchClass)


def _names(notes: list[Note]) -> list[str]:
    return [str(note) for note in notes]


@pytest.mark.parametrize("name", ["Z", "c", "ABC", "C#mb5", "C#mbla", "CmMaj", "CmMaj7b5", ""])
def test_parse_fail(name: str) -> None:
    with pytest.raises(ChordParseError):
        Chord.parse(name)


@pytest.mark.parametrize(
    "name, notes",
    [
        ("C", ["C", "E", "G"]),
        ("C#", ["C#", "F", "G#"]),
        ("Db", ["Db", "F", "Ab"]),
        ("D#", ["D#", "G", "A#"]),
        ("Eb", ["Eb", "G", "Bb"]),
        ("F#", ["F#", "A#", "C#"]),
        ("Gb", ["Gb", "Bb", "Db"]),
        ("G#", ["G#", "C", "D#"]),
        ("A#", ["A#", "D", "F"]),
        ("B", ["B", "D#", "F#"]),
    ],
)
def test_parse_major(name: str, notes: list[str]) -> None:
    chord = Chord.parse(name)
    assert chord.chord_type is ChordType.Major
    assert _names(chord.notes) == notes


@pytest.mark.parametrize(
    "name, chord_type, notes",
    [
        ("Cm", ChordType.Minor, ["C", "Eb", "G"]),
        ("C#m", ChordType.Minor, ["C#", "E", "G#"]),
        ("Cdim", ChordType.Diminished, ["C", "Eb", "Gb"]),
        ("Cdim7", ChordType.DiminishedSeventh, ["C", "Eb", "Gb", "A"]),
        ("C#dim7", ChordType.DiminishedSeventh, ["C#", "E", "G", "Bb"]),
        ("Caug", ChordType.Augmented, ["C", "E", "G#"]),
        ("C#aug", ChordType.Augmented, ["C#", "F", "A"]),
        ("Csus2", ChordType.SuspendedSecond, ["C", "D", "G"]),
        ("C5", ChordType.Fifth, ["C", "G"]),
        ("C7b5", ChordType.DominantSeventhFlatFifth, ["C", "E", "Gb", "Bb"]),
        # Required notes come first, optional ones after them.
        ("C7", ChordType.DominantSeventh, ["C", "E", "Bb", "G"]),
        ("Cmaj7", ChordType.MajorSeventh, ["C", "E", "B", "G"]),
        ("C#7#9", ChordType.DominantSeventhSharpNinth, ["C#", "F", "B", "E", "G#"]),
        ("C13", ChordType.DominantThirteenth, ["C", "E", "Bb", "A", "G", "D", "F"]),
    ],
)
def test_parse_notes(name: str, chord_type: ChordType, notes: list[str]) -> None:
    chord = Chord.parse(name)
    assert chord.chord_type is chord_type
    assert _names(chord.notes) == notes


@pytest.mark.parametrize(
    "name, played",
    [
        ("C", ["C", "E", "G"]),
        ("C7", ["C", "E", "Bb", "G"]),
        ("C11", ["C", "E", "Bb", "F"]),
        ("C13", ["C", "E", "Bb", "A"]),
        ("Cmaj13", ["C", "E", "B", "A"]),
    ],
)
def test_played_notes(name: str, played: list[str]) -> None:
    assert _names(Chord.parse(name).played_notes()) == played


def test_equality_uses_pitch_classes() -> None:
    assert Chord.parse("C#m") == Chord.parse("Dbm")
    assert Chord.parse("C") != Chord.parse("Cm")
    assert len({Chord.parse("A#7"), Chord.parse("Bb7")}) == 1


def test_name_and_str() -> None:
    chord = Chord.parse("C#m7")
    assert chord.name == "C#m7"
    assert str(chord) == "C#m7 - C# minor 7th"
    assert Chord.parse("CM").name == "C"


@pytest.mark.parametrize(
    "start, steps, expected",
    [
        ("C", 0, "C"),
        ("Db", 0, "Db"),
        ("Cm", 1, "C#m"),
        ("Cmaj7", 2, "Dmaj7"),
        ("Cdim", 4, "Edim"),
        ("A#m", 3, "C#m"),
        ("A", 12, "A"),
        ("Ab", 12, "Ab"),
        ("Cm", -1, "Bm"),
        ("Cmaj7", -2, "Bbmaj7"),
        ("Adim", -3, "Gbdim"),
        ("A#", -12, "A#"),
    ],
)
def test_transpose(start: str, steps: int, expected: str) -> None:
    transposed = Chord.parse(start).transpose(steps)
    assert transposed == Chord.parse(expected)
    assert transposed.name == expected


def test_transpose_returns_new_chord() -> None:
    chord = Chord.parse("C")
    moved = chord.transpose(5)
    assert chord.name == "C"
    assert moved.name == "F"
    assert chord + 7 == Chord.parse("G")
    assert chord - 7 == Chord.parse("F")


@pytest.mark.parametrize(
    "pitch_classes, expected",
    [
        ([C, E, G], "C"),
        ([C, G, E], "C"),
        ([D, FS, A], "D"),
        ([D, F, A], "Dm"),
        ([D, FS, A, C], "D7"),
        ([G, B, D], "G"),
    ],
)
def test_recover(pitch_classes: list[PitchClass], expected: str) -> None:
    assert Chord.recover(pitch_classes) == Chord.parse(expected)


@pytest.mark.parametrize("root", ["C", "F#", "Bb"])
def test_recover_round_trips_every_chord_type(root: str) -> None:
    for chord_type in ChordType:
        chord = Chord(Note.parse(root), chord_type)
        pitch_classes = [note.pitch_class for note in chord.notes]
        assert Chord.recover(pitch_classes) == chord


def test_sequence_parse() -> None:
    sequence = ChordSequence.parse("C  Am\tF G7")
    assert len(sequence) == 4
    assert [chord.name for chord in sequence] == ["C", "Am", "F", "G7"]
    assert str(sequence) == "C Am F G7"


@pytest.mark.parametrize("text", ["", "   ", "C X G"])
def test_sequence_parse_fail(text: str) -> None:
    with pytest.raises(ChordParseError):
        ChordSequence.parse(text)


def test_sequence_transpose() -> None:
    sequence = ChordSequence.parse("C Am F G").transpose(-2)
    assert str(sequence) == "Bb Gm Eb F"
