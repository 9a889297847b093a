"""BaseService — shared foundation for graphpoet services.

Every service receives the resolved :class:`PoetSettings` at construction
time and builds affinity graphs on demand from corpus files.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import structlog

from graphpoet.domain.poet import AffinityPoet
from graphpoet.infrastructure.corpus import load_corpus

if TYPE_CHECKING:
    from graphpoet.config.settings import PoetSettings

logger = structlog.get_logger(__name__)


class BaseService:
    """Base for service-layer classes.

    Poets are memoized per resolved corpus path for the lifetime of the
    service instance, so one CLI invocation never parses a corpus twice.

    Usage::

        class PoemService(BaseService):
            def poem(self, corpus_path: Path, text: str) -> ServiceResult:
                poet = self._poet(corpus_path)
                ...
    """

    def __init__(self, settings: PoetSettings) -> None:
        self._settings = settings
        self._poets: dict[Path, AffinityPoet] = {}

    def _poet(self, corpus_path: Path) -> AffinityPoet:
        """Return the poet for *corpus_path*, loading it on first use.

        Raises:
            CorpusError: If the corpus cannot be read.
        """
        key = corpus_path.resolve()
        poet = self._poets.get(key)
        if poet is None:
            text = load_corpus(corpus_path, encoding=self._settings.corpus.encoding)
            poet = AffinityPoet(text, graph_kind=self._settings.graph.backend)
            logger.debug(
                "corpus_loaded",
                path=str(corpus_path),
                backend=self._settings.graph.backend,
                words=len(poet.vertices()),
            )
            self._poets[key] = poet
        return poet
