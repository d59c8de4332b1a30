"""Masking pass — replace matched spans with same-length mask runs."""

from __future__ import annotations
import re

from .patterns import match_spans

MASK_CHAR = "*"


class MaskBuffer:
    """Mutable per-request text buffer.

    Positions are ``str`` indices, i.e. Unicode code points, which keeps
    the buffer aligned 1:1 with the classifier output during the overlay
    merge.
    """

    __slots__ = ("_chars", "mask_char")

    def __init__(self, text: str, mask_char: str = MASK_CHAR) -> None:
        if len(mask_char) != 1:
            raise ValueError("mask_char must be a single character")
        self._chars = list(text)
        self.mask_char = mask_char

    def __len__(self) -> int:
        return len(self._chars)

    def __str__(self) -> str:
        return "".join(self._chars)

    @property
    def text(self) -> str:
        return "".join(self._chars)

    def mask(self, start: int, end: int) -> None:
        """Overwrite ``[start, end)`` with the mask character."""
        self._chars[start:end] = self.mask_char * (end - start)

    def apply(self, matcher: re.Pattern[str]) -> int:
        """Run one pass of ``matcher``; returns the number of spans masked.

        All spans are found against the buffer as it was before the pass,
        then masked together.
        """
        spans = match_spans(matcher, self.text)
        for start, end in spans:
            self.mask(start, end)
        return len(spans)
