"""Single-edit spelling candidates for mistyped command names."""

from __future__ import annotations

# Characters that may appear in a command name.
ALPHABET = "abcdefghijklmnopqrstuvwxyz-_0123456789"


def similar_words(word: str) -> set[str]:
    """Return every string exactly one edit away from ``word``.

    The edits are deletes, adjacent transposes, replaces and inserts, each
    applied to the original word. Replaces and inserts draw from
    ``ALPHABET``. The input is used as-is, without lowercasing or trimming.

    Args:
        word: The mistyped command name

    Returns:
        Set of candidate spellings
    """
    splits = [(word[:i], word[i:]) for i in range(len(word) + 1)]

    similar: set[str] = set()
    # deletes
    similar.update(head + tail[1:] for head, tail in splits if tail)
    # transposes
    similar.update(
        head + tail[1] + tail[0] + tail[2:]
        for head, tail in splits
        if len(tail) > 1
    )
    # replaces
    similar.update(
        head + char + tail[1:]
        for head, tail in splits
        if tail
        for char in ALPHABET
    )
    # inserts
    similar.update(head + char + tail for head, tail in splits for char in ALPHABET)

    return similar
