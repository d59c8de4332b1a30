"""Vocabulary classifier — masks dictionary words in a string.

The orchestrator only depends on the ``Classifier`` protocol; anything with
a ``classify_and_mask(text) -> str`` method that keeps the text length can
be injected in place of ``LexiconClassifier``.
"""

from __future__ import annotations
from typing import Protocol

from .dictionary import (
    TOKEN_PATTERN,
    LexiconSnapshot,
    VulgarDictionary,
    fold,
    get_default_dictionary,
)
from .masking import MASK_CHAR
from .types import Severity


class Classifier(Protocol):
    """Anything that masks vocabulary in place.

    An optional ``mask_char`` attribute names the character it masks with;
    ``*`` is assumed otherwise.
    """

    def classify_and_mask(self, text: str) -> str: ...


class LexiconClassifier:
    """Dictionary-backed classifier.

    A match keeps its first character and everything after it, up to the
    end of the match, becomes mask characters (``fuck`` -> ``f***``,
    ``f-u-c-k`` -> ``f******``); whitespace inside a phrase is kept.
    Phrases match consecutive tokens; the longest one starting at a token
    wins.  SAFE entries are never masked and shield the tokens they cover.
    """

    def __init__(
        self,
        dictionary: VulgarDictionary | None = None,
        threshold: Severity = Severity.ANY,
        mask_char: str = MASK_CHAR,
    ) -> None:
        self._dictionary = dictionary
        self.threshold = threshold
        self.mask_char = mask_char

    @property
    def dictionary(self) -> VulgarDictionary:
        if self._dictionary is None:
            self._dictionary = get_default_dictionary()
        return self._dictionary

    def should_mask(self, severity: Severity) -> bool:
        if severity & Severity.SAFE:
            return False
        return bool(severity & self.threshold)

    def classify_and_mask(self, text: str) -> str:
        snapshot = self.dictionary.snapshot()
        tokens = [(m.start(), m.end(), fold(m.group())) for m in TOKEN_PATTERN.finditer(text)]
        if not tokens or not snapshot.entries:
            return text

        chars = list(text)
        i = 0
        while i < len(tokens):
            width, severity = self._match_at(snapshot, tokens, i)
            if not width:
                i += 1
                continue
            if self.should_mask(severity):
                self._mask_span(chars, tokens[i][0] + 1, tokens[i + width - 1][1])
            i += width
        return "".join(chars)

    def _mask_span(self, chars: list[str], start: int, end: int) -> None:
        # Separators inside a phrase (f-u-c-k) are masked too; whitespace is kept
        for pos in range(start, end):
            if not chars[pos].isspace():
                chars[pos] = self.mask_char

    def _match_at(
        self,
        snapshot: LexiconSnapshot,
        tokens: list[tuple[int, int, str]],
        i: int,
    ) -> tuple[int, Severity]:
        """Longest entry starting at token ``i`` as (token count, severity)."""
        longest = min(snapshot.max_words, len(tokens) - i)
        for width in range(longest, 0, -1):
            key = tuple(t[2] for t in tokens[i:i + width])
            severity = snapshot.get(key)
            if severity is None and width == 1:
                severity = snapshot.get_stretched(key[0])
            if severity is not None:
                return width, severity
        return 0, Severity(0)
