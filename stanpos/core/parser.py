"""Parse the plain text output of the Stanford POS tagger."""

from __future__ import annotations

from stanpos.core.misc import MalformedToken

# Delimiters between word and tag, in the order they are checked
TAG_DELIMITERS = (" ", "#")


def parse_output(stdout: str, separator: str = " ") -> list[tuple[str, str]]:
    """Parse tagger output into a list of (word, tag) pairs, in output order.

    The output is split into tokens on `separator`. Unless the separator is a line break, line breaks (which end
    sentences in the tagger output) also separate tokens. Each token is then split into word and tag on the first
    delimiter in TAG_DELIMITERS that occurs in it.

    Args:
        stdout: The output from the tagger.
        separator: The string separating tokens.

    Returns:
        List of (word, tag) tuples. Empty if the output is blank.

    Raises:
        MalformedToken: If a token doesn't split into exactly one non-empty word and one non-empty tag.
    """
    chunks = [stdout] if separator == "\n" else stdout.splitlines()
    tokens = [token for chunk in chunks for token in chunk.split(separator) if token.strip()]
    return [split_token(token, position) for position, token in enumerate(tokens)]


def split_token(token: str, position: int = 0) -> tuple[str, str]:
    """Split a single 'word<delimiter>tag' token.

    Args:
        token: The token to split.
        position: Index of the token in the output, used in error messages.

    Returns:
        A (word, tag) tuple, with surrounding whitespace removed.

    Raises:
        MalformedToken: If the token contains no delimiter, more than one, or an empty word or tag.
    """
    stripped = token.strip()
    for delimiter in TAG_DELIMITERS:
        if stripped.count(delimiter):
            parts = stripped.split(delimiter)
            break
    else:
        raise MalformedToken(token, position)

    if len(parts) != 2:  # noqa: PLR2004
        raise MalformedToken(token, position)
    word, tag = (p.strip() for p in parts)
    if not word or not tag:
        raise MalformedToken(token, position)
    return word, tag
