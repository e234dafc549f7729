"""Lazy whitespace tokenizer for llvm-config output."""

from __future__ import annotations

import re
from collections.abc import Iterator

_WORD = re.compile(r"\S+")


class SpaceSeparatedStrings(Iterator[str]):
    """Iterate over whitespace-separated words of ``text`` one at a time.

    Words are produced on demand; the text is never split up front. Runs of
    whitespace (newlines included) count as a single separator, so no empty
    word is ever yielded. The iterator is exhausted after the last word and
    is not restartable.
    """

    __slots__ = ("_src", "_next_index")

    def __init__(self, src: str) -> None:
        self._src = src
        self._next_index = 0

    def __next__(self) -> str:
        if self._next_index >= len(self._src):
            raise StopIteration

        match = _WORD.search(self._src, self._next_index)
        if match is None:
            self._next_index = len(self._src)
            raise StopIteration

        self._next_index = match.end()
        return match.group()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(src={self._src!r}, next_index={self._next_index})"
        )
