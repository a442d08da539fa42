"""Hand-movement cost between two voicings."""

from collections.abc import Sequence

import numpy as np

from ukechord.tuning import STRING_COUNT
from ukechord.voicing import Voicing


def _fret_array(voicings: Sequence[Voicing]) -> np.ndarray:
    """Stack the fret vectors of *voicings* into an (n_voicings, STRING_COUNT) array."""
    if not voicings:
        return np.zeros((0, STRING_COUNT), dtype=np.int64)
    return np.array([v.frets for v in voicings], dtype=np.int64)


def distance(a: Voicing, b: Voicing) -> int:
    """
    Sum over all strings of how far the fret changes between *a* and *b*.

    This is the Manhattan (L1) distance of the two fret vectors: it is
    symmetric, zero only for identical frets and obeys the triangle
    inequality.

    Raises:
        ValueError: If the voicings have different string counts.
    """
    if len(a.frets) != len(b.frets):
        raise ValueError(f"Cannot compare voicings with {len(a.frets)} and {len(b.frets)} strings.")
    return int(np.abs(np.subtract(a.frets, b.frets)).sum())


def distance_matrix(sources: Sequence[Voicing], targets: Sequence[Voicing]) -> np.ndarray:
    """
    Pairwise :func:`distance` between every source and every target voicing.

    Returns:
        Integer array of shape ``(len(sources), len(targets))``.
    """
    src = _fret_array(sources)
    dst = _fret_array(targets)
    return np.abs(src[:, np.newaxis, :] - dst[np.newaxis, :, :]).sum(axis=2)
