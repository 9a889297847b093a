"""Corpus file loading.

Reads a text file and joins its lines with a single space so the domain
layer receives one in-memory string.  All I/O failures are translated to
:class:`CorpusError` here; the domain layer never sees ``OSError``.
"""

from __future__ import annotations

from pathlib import Path


class CorpusError(Exception):
    """A corpus file could not be found, read, or decoded."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read corpus {path}: {reason}")
        self.path = path
        self.reason = reason


def load_corpus(path: Path, *, encoding: str = "utf-8") -> str:
    """Return the contents of *path* with every line joined by one space.

    Raises:
        CorpusError: If the file is missing, unreadable, or not valid
            text in *encoding*.
    """
    try:
        raw = path.read_text(encoding=encoding)
    except FileNotFoundError as exc:
        raise CorpusError(path, "file not found") from exc
    except IsADirectoryError as exc:
        raise CorpusError(path, "is a directory") from exc
    except UnicodeDecodeError as exc:
        raise CorpusError(path, f"not valid {encoding} text") from exc
    except LookupError as exc:
        raise CorpusError(path, f"unknown encoding '{encoding}'") from exc
    except OSError as exc:
        raise CorpusError(path, exc.strerror or str(exc)) from exc
    return " ".join(raw.splitlines())
