"""AffinityPoet — word affinity graph and bridge-word poem generation.

The poet derives a weighted digraph from a corpus: vertices are
lower-cased tokens and the weight of ``w1 -> w2`` counts how often ``w1``
is immediately followed by ``w2``.  Given an input sentence, it inserts
between every adjacent pair of words the bridge ``b`` that maximizes
``weight(w1 -> b) + weight(b -> w2)``.

Example::

    >>> poet = AffinityPoet("This is a test of the Mugar Omni Theater sound system.")
    >>> poet.poem("Test the system.")
    'Test of the system.'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from graphpoet.domain.graph import ADJACENCY, GraphKind, WeightedDigraph, WeightedEdge, empty
from graphpoet.domain.tokens import normalize, tokenize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Bridge:
    """The winning two-hop path ``first -> word -> second``."""

    word: str
    score: int


@dataclass(frozen=True)
class Insertion:
    """A bridge placed at word position ``index`` of a generated poem."""

    index: int
    after: str
    bridge: Bridge


@dataclass(frozen=True)
class PoemLine:
    """A generated poem plus the bridges inserted to produce it."""

    text: str
    bridges: tuple[Insertion, ...]


class AffinityPoet:
    """Poem generator backed by a corpus-derived affinity graph.

    The graph is built once in ``__init__`` and never mutated afterwards,
    so every query method is a pure function of the corpus and its
    arguments.
    """

    def __init__(self, corpus: str, *, graph_kind: GraphKind = ADJACENCY) -> None:
        self._graph: WeightedDigraph = empty(graph_kind)
        self._build(tokenize(corpus))
        self.check_rep()
        logger.debug(
            "Built affinity graph: %d words, %d affinities",
            len(self._graph),
            len(self._graph.edges()),
        )

    def _build(self, tokens: list[str]) -> None:
        words = [normalize(t) for t in tokens]
        for word in words:
            self._graph.add(word)
        for first, second in zip(words, words[1:]):
            count = self._graph.targets(first).get(second, 0)
            self._graph.set(first, second, count + 1)

    def check_rep(self) -> None:
        """Assert every word is non-empty and every affinity is positive."""
        for word in self._graph.vertices():
            assert word, "empty vertex label"
            for weight in self._graph.targets(word).values():
                assert weight > 0, (word, weight)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def vertices(self) -> frozenset[str]:
        """Every distinct (lower-cased) corpus word."""
        return self._graph.vertices()

    def affinities(self) -> list[WeightedEdge]:
        """Every affinity edge, sorted by ``(source, target)``."""
        return self._graph.edges()

    def bridge(self, first: str, second: str) -> Bridge | None:
        """Return the best bridge word from *first* to *second*, or None.

        Words are compared case-insensitively.  Among candidates with the
        highest combined weight, the lexicographically smallest wins, so the
        result does not depend on adjacency iteration order.
        """
        first, second = normalize(first), normalize(second)
        best: Bridge | None = None
        for candidate, out_weight in self._graph.targets(first).items():
            in_weight = self._graph.targets(candidate).get(second, 0)
            if in_weight <= 0:
                continue
            score = out_weight + in_weight
            if (
                best is None
                or score > best.score
                or (score == best.score and candidate < best.word)
            ):
                best = Bridge(word=candidate, score=score)
        return best

    def compose(self, text: str) -> PoemLine:
        """Generate a poem from *text* and report which bridges were used."""
        words = tokenize(text)
        out: list[str] = []
        used: list[Insertion] = []
        for i, word in enumerate(words):
            out.append(word)
            if i + 1 == len(words):
                break
            found = self.bridge(word, words[i + 1])
            if found is not None:
                used.append(Insertion(index=len(out), after=word, bridge=found))
                out.append(found.word)
        return PoemLine(text=" ".join(out), bridges=tuple(used))

    def poem(self, text: str) -> str:
        """Generate a poem from *text*.

        Input words keep their original case, inserted bridge words are
        lower case, and words are separated by exactly one space.
        """
        return self.compose(text).text

    def __repr__(self) -> str:
        return f"AffinityPoet({self._graph!r})"
