"""Constraints that bound which fingerings are generated."""

from dataclasses import dataclass

from ukechord.errors import InvalidConfigError
from ukechord.tuning import Tuning

#: Highest fret the command line accepts. Baritone ukuleles have up to 21 frets.
MAX_FRET_ID = 21

#: Widest span the command line accepts; anything wider is not playable by hand.
MAX_SPAN = 5


@dataclass(frozen=True)
class VoicingConfig:
    """
    Generation constraints shared by every chord of a lookup.

    Attributes:
        tuning:   Open-string notes of the instrument.
        min_fret: Lowest fret any string may use (0 = open string).
        max_fret: Highest fret any string may use.
        max_span: Largest distance between the lowest and highest pressed fret.
    """

    tuning: Tuning = Tuning.C
    min_fret: int = 0
    max_fret: int = 12
    max_span: int = 4

    def validate(self) -> None:
        """
        Reject bounds that cannot describe any region of the fretboard.

        Raises:
            InvalidConfigError: If ``min_fret > max_fret`` or a bound is negative.
        """
        if self.min_fret < 0 or self.max_fret < 0:
            raise InvalidConfigError(
                f"Fret bounds must not be negative (min_fret={self.min_fret}, max_fret={self.max_fret})."
            )
        if self.min_fret > self.max_fret:
            raise InvalidConfigError(
                f"min_fret ({self.min_fret}) must not be greater than max_fret ({self.max_fret})."
            )
        if self.max_span < 0:
            raise InvalidConfigError(f"max_span must not be negative (got {self.max_span}).")
