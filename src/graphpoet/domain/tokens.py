"""Word tokenization shared by corpus construction and poem input."""

from __future__ import annotations


def tokenize(text: str) -> list[str]:
    """Split *text* into maximal runs of non-whitespace characters.

    Any run of whitespace (spaces, tabs, newlines) separates tokens.
    Punctuation stays attached to its word.

    Examples:
        >>> tokenize("  Hello,  world.\\n")
        ['Hello,', 'world.']
        >>> tokenize("")
        []
    """
    return text.split()


def normalize(token: str) -> str:
    """Return the graph vertex label for *token* (case-folded to lower).

    Examples:
        >>> normalize("HELLO,")
        'hello,'
    """
    return token.lower()
