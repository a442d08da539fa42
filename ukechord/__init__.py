"""ukechord: ukulele chord voicings and voice leading."""

from ukechord.chord import Chord, ChordSequence
from ukechord.chord_type import ChordType
from ukechord.config import VoicingConfig
from ukechord.distance import distance
from ukechord.pitch import Interval, Note, PitchClass
from ukechord.tuning import Tuning
from ukechord.voicing import Voicing, generate_voicings
from ukechord.voicing_graph import VoicingGraph

__version__ = "0.1.0"

__all__ = [
    "Chord",
    "ChordSequence",
    "ChordType",
    "Interval",
    "Note",
    "PitchClass",
    "Tuning",
    "Voicing",
    "VoicingConfig",
    "VoicingGraph",
    "__version__",
    "distance",
    "generate_voicings",
]
