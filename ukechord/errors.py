"""Exception types raised by the ukechord core."""


class UkechordError(ValueError):
    """Base class for every error the core raises on bad input."""


class NoteParseError(UkechordError):
    """A note name is not one of the accepted spellings."""

    def __init__(self, name: str) -> None:
        super().__init__(f'Could not parse note name "{name}"')
        self.name = name


class UnrecognizedChordTypeError(UkechordError):
    """A chord-type symbol matched no catalog entry."""

    def __init__(self, symbol: str) -> None:
        super().__init__(f'Unrecognized chord type symbol "{symbol}"')
        self.symbol = symbol


class ChordParseError(UkechordError):
    """A chord name or chord sequence could not be parsed."""

    def __init__(self, name: str) -> None:
        super().__init__(f'Could not parse chord name "{name}"')
        self.name = name


class NoMatchingChordTypeError(UkechordError):
    """A set of pitch classes names no supported chord type."""


class InvalidConfigError(UkechordError):
    """Voicing constraints that cannot describe any fretboard region."""


class FretPatternError(UkechordError):
    """A fret pattern string is malformed or out of range."""
