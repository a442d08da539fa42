"""Unit tests for voicings, the voicing generator and fret patterns."""

import pytest

from ukechord.chord import Chord
from ukechord.config import VoicingConfig
from ukechord.errors import FretPatternError, InvalidConfigError
from ukechord.tuning import Tuning
from ukechord.voicing import FretPattern, UkeString, Voicing, generate_voicings

DEFAULT_CONFIG = VoicingConfig()
HIGH_CONFIG = VoicingConfig(min_fret=5, max_fret=15, max_span=3)
D_TUNING_CONFIG = VoicingConfig(tuning=Tuning.D, max_span=5)


def _frets(voicings: list[Voicing]) -> list[tuple[int, ...]]:
    return [v.frets for v in voicings]


def test_first_c_major_voicing_is_open_position() -> None:
    first = next(generate_voicings(Chord.parse("C"), DEFAULT_CONFIG))
    assert first.frets == (0, 0, 0, 3)
    assert [str(note) for note in first.notes] == ["G", "C", "E", "C"]


@pytest.mark.parametrize(
    "name, frets",
    [
        ("G", (0, 2, 3, 2)),
        ("Am", (2, 0, 0, 0)),
        ("F", (2, 0, 1, 0)),
        ("C7", (0, 0, 0, 1)),
    ],
)
def test_first_voicing_matches_common_chart(name: str, frets: tuple[int, ...]) -> None:
    assert next(Chord.parse(name).voicings(DEFAULT_CONFIG)).frets == frets


@pytest.mark.parametrize("name", ["C", "Am", "F#m7", "Bb", "E7", "Cmaj7", "Gsus4", "D9", "Ebdim7"])
@pytest.mark.parametrize("config", [DEFAULT_CONFIG, HIGH_CONFIG, D_TUNING_CONFIG])
def test_generated_voicings_respect_constraints(name: str, config: VoicingConfig) -> None:
    chord = Chord.parse(name)
    for voicing in generate_voicings(chord, config):
        assert voicing.spells_out(chord)
        assert voicing.span <= config.max_span
        assert all(config.min_fret <= fret <= config.max_fret for fret in voicing.frets)
        assert voicing.roots == config.tuning.roots


@pytest.mark.parametrize("name", ["C", "Dm7", "G7", "A"])
def test_generation_is_deterministic_and_strictly_ordered(name: str) -> None:
    chord = Chord.parse(name)
    first_run = list(generate_voicings(chord, DEFAULT_CONFIG))
    second_run = list(generate_voicings(chord, DEFAULT_CONFIG))

    assert first_run
    assert first_run == second_run
    assert all(a < b for a, b in zip(first_run, first_run[1:]))
    assert len(set(first_run)) == len(first_run)


def test_no_voicing_when_a_string_has_no_candidate() -> None:
    config = VoicingConfig(min_fret=5, max_fret=5, max_span=0)
    assert list(generate_voicings(Chord.parse("C"), config)) == []


def test_open_strings_only() -> None:
    config = VoicingConfig(max_fret=0)
    assert list(generate_voicings(Chord.parse("C"), config)) == []
    assert _frets(list(generate_voicings(Chord.parse("C6"), config))) == [(0, 0, 0, 0)]


def test_invalid_config_fails_before_iteration() -> None:
    config = VoicingConfig(min_fret=6, max_fret=5)
    with pytest.raises(InvalidConfigError):
        generate_voicings(Chord.parse("C"), config)


@pytest.mark.parametrize(
    "config",
    [
        VoicingConfig(min_fret=-1),
        VoicingConfig(max_span=-1),
    ],
)
def test_negative_bounds_are_invalid(config: VoicingConfig) -> None:
    with pytest.raises(InvalidConfigError):
        config.validate()


def test_span_and_position() -> None:
    voicing = Voicing.from_frets((2, 0, 1, 3), Tuning.C)
    assert voicing.position == 1
    assert voicing.span == 2
    assert voicing.max_fret == 3

    open_strings = Voicing.from_frets((0, 0, 0, 0), Tuning.C)
    assert open_strings.position == 0
    assert open_strings.span == 0


def test_voicings_sort_by_position_then_span_then_frets() -> None:
    voicings = [
        Voicing.from_frets((0, 0, 0, 3), Tuning.C),
        Voicing.from_frets((2, 2, 2, 0), Tuning.C),
        Voicing.from_frets((0, 0, 0, 0), Tuning.C),
        Voicing.from_frets((2, 2, 3, 0), Tuning.C),
        Voicing.from_frets((0, 2, 2, 2), Tuning.C),
    ]
    assert _frets(sorted(voicings)) == [
        (0, 0, 0, 0),
        (0, 2, 2, 2),
        (2, 2, 2, 0),
        (2, 2, 3, 0),
        (0, 0, 0, 3),
    ]


def test_spells_out_allows_missing_optional_notes() -> None:
    c7 = Chord.parse("C7")
    assert Voicing.from_frets((0, 0, 0, 1), Tuning.C).spells_out(c7)
    assert Voicing.from_frets((3, 0, 0, 1), Tuning.C).spells_out(c7)
    assert not Voicing.from_frets((0, 0, 0, 3), Tuning.C).spells_out(c7)
    assert not Voicing.from_frets((0, 0, 0, 3), Tuning.C).spells_out(Chord.parse("Cm"))


def test_from_frets_sounds_tuning_plus_fret() -> None:
    voicing = Voicing.from_frets((2, 2, 2, 0), Tuning.C)
    assert voicing.strings[2] == UkeString(Tuning.C.roots[2], 2, Tuning.C.roots[2] + 2)
    assert [str(note) for note in voicing.notes] == ["A", "D", "F#", "A"]


def test_voicing_requires_one_string_each() -> None:
    with pytest.raises(ValueError):
        Voicing.from_frets((0, 0, 0), Tuning.C)


@pytest.mark.parametrize(
    "frets, tuning, expected",
    [
        ((2, 2, 2, 0), Tuning.C, ["D - D major"]),
        ((0, 0, 0, 3), Tuning.C, ["C - C major"]),
        ((0, 0, 0, 0), Tuning.C, ["C6 - C major 6th", "Am7 - A minor 7th"]),
        ((0, 0, 0, 0), Tuning.G, ["Em7 - E minor 7th", "G6 - G major 6th"]),
        ((1, 2, 3, 4), Tuning.C, []),
    ],
)
def test_get_chords(frets: tuple[int, ...], tuning: Tuning, expected: list[str]) -> None:
    chords = Voicing.from_frets(frets, tuning).get_chords()
    assert [str(chord) for chord in chords] == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2220", (2, 2, 2, 0)),
        ("0003", (0, 0, 0, 3)),
        ("10 12 12 10", (10, 12, 12, 10)),
        ("0-2-3-2", (0, 2, 3, 2)),
        (" 7,7,7,10 ", (7, 7, 7, 10)),
    ],
)
def test_fret_pattern_parse(text: str, expected: tuple[int, ...]) -> None:
    assert FretPattern.parse(text) == expected


@pytest.mark.parametrize(
    "text", ["", "222", "22200", "2a20", "25 0 0 0", "1 2 3", "0 -1 0 0", "-1000", "\u00b2220"]
)
def test_fret_pattern_parse_fail(text: str) -> None:
    with pytest.raises(FretPatternError):
        FretPattern.parse(text)
