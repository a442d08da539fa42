"""Voice leading: the cheapest way to move through a chord progression.

The graph has one layer per chord, holding every voicing of that chord.
Edges only join neighbouring layers and are weighted by
:func:`ukechord.distance.distance`. Because the graph is layered, the k
cheapest complete paths are found with a dynamic program that keeps, for
every voicing of a layer, the k cheapest partial paths ending there.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from collections.abc import Iterable

from ukechord.chord import Chord
from ukechord.config import VoicingConfig
from ukechord.distance import distance_matrix
from ukechord.voicing import Voicing, generate_voicings

logger = logging.getLogger(__name__)

#: One voicing per chord of the sequence.
Path = tuple[Voicing, ...]

# (total cost, per-layer voicing sort keys, path); tuples order by cost first,
# then by the voicings layer by layer.
_Entry = tuple[int, tuple[tuple[int, int, tuple[int, ...]], ...], Path]


class VoicingGraph:
    """
    Layered graph of voicings for a chord sequence.

    Usage::

        graph = VoicingGraph.build(ChordSequence.parse("C Am F G"), VoicingConfig())
        for path, cost in graph.paths(3):
            ...

    Layers are added with :meth:`add`; once :meth:`paths` has been called the
    graph no longer changes and can be queried any number of times.
    """

    def __init__(self, config: VoicingConfig | None = None) -> None:
        """
        Args:
            config: Constraints shared by every layer. Defaults to
                    :class:`VoicingConfig` defaults.

        Raises:
            InvalidConfigError: If *config* describes impossible bounds.
        """
        self.config = config if config is not None else VoicingConfig()
        self.config.validate()
        self._layers: list[tuple[Voicing, ...]] = []
        self._frozen = False

    @classmethod
    def build(cls, sequence: Iterable[Chord], config: VoicingConfig | None = None) -> VoicingGraph:
        """Create a graph and add one layer per chord of *sequence*."""
        graph = cls(config)
        graph.add(sequence)
        return graph

    @property
    def layers(self) -> tuple[tuple[Voicing, ...], ...]:
        """The voicings of every chord, in sequence order."""
        return tuple(self._layers)

    def add(self, sequence: Iterable[Chord]) -> None:
        """
        Append one layer per chord, each holding all of the chord's voicings.

        Raises:
            RuntimeError: If the graph has already been queried.
        """
        if self._frozen:
            raise RuntimeError("Cannot add chords to a voicing graph after it has been queried.")

        for chord in sequence:
            layer = tuple(generate_voicings(chord, self.config))
            if not layer:
                logger.info("No voicing of %s fits the current constraints", chord.name)
            self._layers.append(layer)

    def paths(self, k: int = 1) -> list[tuple[Path, int]]:
        """
        The k cheapest paths through all layers.

        Args:
            k: Maximum number of paths to return.

        Returns:
            Up to *k* ``(path, total_cost)`` pairs, cheapest first. Equal costs
            are ordered by comparing the voicings layer by layer. The list is
            empty when the graph has no layers or some chord has no voicing.

        Raises:
            ValueError: If ``k < 1``.
        """
        if k < 1:
            raise ValueError(f"k must be at least 1 (got {k}).")
        self._frozen = True

        if not self._layers or not all(self._layers):
            return []

        first = self._layers[0]
        best: list[list[_Entry]] = [[(0, (v.sort_key,), (v,))] for v in first]

        for previous, layer in zip(self._layers, self._layers[1:]):
            weights = distance_matrix(previous, layer)
            best = [
                heapq.nsmallest(
                    k,
                    (
                        (cost + int(weights[i, j]), key + (node.sort_key,), path + (node,))
                        for i, entries in enumerate(best)
                        for cost, key, path in entries
                    ),
                )
                for j, node in enumerate(layer)
            ]
            logger.debug("Layer of %d voicing(s) merged", len(layer))

        ranked = heapq.nsmallest(k, itertools.chain.from_iterable(best))
        return [(path, cost) for cost, _key, path in ranked]
