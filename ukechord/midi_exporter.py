"""MidiExporter: Writes a sequence of voicings as a strummed ukulele MIDI file."""

from collections.abc import Sequence

from midiutil import MIDIFile

from ukechord.tuning import STRING_COUNT, Tuning
from ukechord.voicing import Voicing

# midiutil writes Format 1 files with its own tempo (conductor) track in front
# of the note tracks: tempo events always land there, and the track numbers
# given to addNote/addTrackName count the note tracks only.
TRACK_UKULELE = 0

# General MIDI program 24 (0-based) is "Acoustic Guitar (nylon)", the closest
# General MIDI sound to a ukulele.
CHANNEL_UKULELE = 0
PROGRAM_NYLON_GUITAR = 24


class MidiExporter:
    """
    Writes a two-track MIDI file from an ordered list of voicings.

    Track layout (Format 1)
    -----------------------
    The conductor track holds the tempo only.

    The "Ukulele" track holds one strummed chord per voicing. Each chord
    lasts ``beats_per_chord`` beats; the strings sound one after another in
    tuning order, ``strum_offset`` beats apart, and ring until the next chord.

    Pitches are absolute: the open-string MIDI note of the tuning plus the
    pressed fret, so the re-entrant G string of C tuning sounds above the
    C string just as on the instrument.
    """

    DEFAULT_TEMPO = 80  # BPM, a comfortable practice tempo
    DEFAULT_VELOCITY = 80  # MIDI velocity (0-127)
    DEFAULT_BEATS_PER_CHORD = 4  # one 4/4 bar per chord
    DEFAULT_STRUM_OFFSET = 0.05  # beats between two strings of a strum

    def __init__(
        self,
        tuning: Tuning = Tuning.C,
        tempo: int = DEFAULT_TEMPO,
        velocity: int = DEFAULT_VELOCITY,
        beats_per_chord: float = DEFAULT_BEATS_PER_CHORD,
        strum_offset: float = DEFAULT_STRUM_OFFSET,
    ) -> None:
        """
        Args:
            tuning:          Tuning whose open strings the frets are added to.
            tempo:           Playback tempo in beats per minute.
            velocity:        MIDI note-on velocity.
            beats_per_chord: Length of every chord in beats.
            strum_offset:    Delay between consecutive strings, in beats.

        Raises:
            ValueError: If the strum does not finish before the chord ends,
                which would leave the last strings with no duration.
        """
        if strum_offset < 0:
            raise ValueError(f"strum_offset must not be negative, got {strum_offset}.")
        if strum_offset * (STRING_COUNT - 1) >= beats_per_chord:
            raise ValueError(
                f"A strum of {STRING_COUNT} strings {strum_offset} beats apart "
                f"does not fit in {beats_per_chord} beats per chord."
            )
        self.tuning = tuning
        self.tempo = tempo
        self.velocity = velocity
        self.beats_per_chord = beats_per_chord
        self.strum_offset = strum_offset

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _pitches(self, voicing: Voicing) -> list[int]:
        """Absolute MIDI pitch of every string of *voicing*, in tuning order."""
        return [root + fret for root, fret in zip(self.tuning.midi_roots, voicing.frets)]

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def build(self, voicings: Sequence[Voicing]) -> MIDIFile:
        """Lay out *voicings* as consecutive strummed chords in a new MIDIFile."""
        midi = MIDIFile(numTracks=1, removeDuplicates=False, deinterleave=False)

        # --- Conductor track: tempo only ---
        midi.addTempo(TRACK_UKULELE, 0, self.tempo)

        # --- Ukulele track: strummed chords ---
        midi.addTrackName(TRACK_UKULELE, 0, "Ukulele")
        midi.addProgramChange(TRACK_UKULELE, CHANNEL_UKULELE, 0, PROGRAM_NYLON_GUITAR)

        for index, voicing in enumerate(voicings):
            start_beat = index * self.beats_per_chord
            for string_index, pitch in enumerate(self._pitches(voicing)):
                offset = string_index * self.strum_offset
                midi.addNote(
                    track=TRACK_UKULELE,
                    channel=CHANNEL_UKULELE,
                    pitch=pitch,
                    time=start_beat + offset,
                    duration=self.beats_per_chord - offset,
                    volume=self.velocity,
                )

        return midi

    def export(self, voicings: Sequence[Voicing], output_path: str) -> None:
        """
        Render *voicings* to a Standard MIDI File.

        Args:
            voicings:    Ordered voicings, one chord each.
            output_path: Destination file path (e.g. "progression.mid").

        Raises:
            OSError: If the output file cannot be opened for writing.
        """
        midi = self.build(voicings)
        with open(output_path, "wb") as f:
            midi.writeFile(f)
