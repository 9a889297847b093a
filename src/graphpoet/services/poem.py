"""PoemService — corpus-backed poem generation and affinity queries.

Three read-only operations over the affinity graph of a corpus file:
``poem`` (bridge-word rewriting), ``bridge`` (single pair lookup), and
``affinities`` (heaviest edges).  Corpus I/O failures come back as
``CORPUS_UNREADABLE`` results, never as exceptions.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import structlog

from graphpoet.domain.poet import AffinityPoet
from graphpoet.infrastructure.corpus import CorpusError
from graphpoet.services.base import BaseService
from graphpoet.services.result import ServiceResult

logger = structlog.get_logger(__name__)

NO_PAIRS_WARNING = "Corpus has no word pairs; no bridges are possible"


class PoemService(BaseService):
    """Handles poem generation and affinity graph queries."""

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------

    def _load(self, op: str, corpus_path: Path) -> AffinityPoet | ServiceResult:
        try:
            return self._poet(corpus_path)
        except CorpusError as exc:
            logger.warning("corpus_unreadable", path=str(exc.path), reason=exc.reason)
            return ServiceResult.failure(
                op,
                "CORPUS_UNREADABLE",
                str(exc),
                path=str(exc.path),
                reason=exc.reason,
            )

    @staticmethod
    def _warnings(poet: AffinityPoet) -> list[str]:
        return [] if poet.affinities() else [NO_PAIRS_WARNING]

    def _meta(self, poet: AffinityPoet) -> dict[str, Any]:
        return {
            "backend": self._settings.graph.backend,
            "words": len(poet.vertices()),
            "affinities": len(poet.affinities()),
        }

    # ------------------------------------------------------------------
    # poem
    # ------------------------------------------------------------------

    def poem(self, corpus_path: Path, text: str) -> ServiceResult:
        """Rewrite *text* by inserting bridge words from the corpus graph."""
        loaded = self._load("poem", corpus_path)
        if isinstance(loaded, ServiceResult):
            return loaded

        line = loaded.compose(text)
        for placed in line.bridges:
            logger.debug(
                "bridge_inserted",
                index=placed.index,
                after=placed.after,
                word=placed.bridge.word,
                score=placed.bridge.score,
            )

        return ServiceResult(
            ok=True,
            op="poem",
            data={
                "poem": line.text,
                "input": text,
                "corpus": str(corpus_path),
                "bridges": [
                    {
                        "index": placed.index,
                        "after": placed.after,
                        "word": placed.bridge.word,
                        "score": placed.bridge.score,
                    }
                    for placed in line.bridges
                ],
            },
            warnings=self._warnings(loaded),
            meta=self._meta(loaded),
        )

    # ------------------------------------------------------------------
    # bridge
    # ------------------------------------------------------------------

    def bridge(self, corpus_path: Path, first: str, second: str) -> ServiceResult:
        """Find the best bridge word between *first* and *second*."""
        loaded = self._load("bridge", corpus_path)
        if isinstance(loaded, ServiceResult):
            return loaded

        found = loaded.bridge(first, second)
        return ServiceResult(
            ok=True,
            op="bridge",
            data={
                "first": first,
                "second": second,
                "bridge": found.word if found else None,
                "score": found.score if found else 0,
            },
            warnings=self._warnings(loaded),
            meta=self._meta(loaded),
        )

    # ------------------------------------------------------------------
    # affinities
    # ------------------------------------------------------------------

    def affinities(self, corpus_path: Path, *, top: int | None = None) -> ServiceResult:
        """List the heaviest affinity edges, ties broken by (source, target).

        *top* defaults to ``[output] max_affinities``.
        """
        if top is None:
            top = self._settings.output.max_affinities
        if top < 1:
            return ServiceResult.failure(
                "affinities",
                "INVALID_ARGUMENT",
                f"top must be at least 1, got {top}",
                top=top,
            )

        loaded = self._load("affinities", corpus_path)
        if isinstance(loaded, ServiceResult):
            return loaded

        edges = sorted(loaded.affinities(), key=lambda e: (-e.weight, e.source, e.target))
        items = [{"source": e.source, "target": e.target, "weight": e.weight} for e in edges[:top]]
        return ServiceResult(
            ok=True,
            op="affinities",
            data={"count": len(items), "vertices": len(loaded.vertices()), "items": items},
            warnings=self._warnings(loaded),
            meta=self._meta(loaded),
        )
