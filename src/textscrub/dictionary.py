"""Vulgar dictionary — the process-wide lexicon read by the classifier.

Concurrency: readers grab the current ``LexiconSnapshot`` reference (a
single attribute read) and use it for the whole call.  Writers build a new
snapshot under a lock and swap the reference in one assignment, so a
classifier never sees a half-applied batch.
"""

from __future__ import annotations
import logging
import re
import threading
import unicodedata
from dataclasses import dataclass, field
from importlib import resources
from types import MappingProxyType
from typing import Iterable, Mapping

from .errors import EmptyWordError
from .types import Severity, VulgarEntry

logger = logging.getLogger(__name__)

# Word characters plus the usual leetspeak stand-ins.  A token never ends
# in "!" so trailing exclamation marks stay punctuation.
TOKEN_PATTERN = re.compile(r"[\w@$!+]*[\w@$+]")

_LEET = str.maketrans({
    "4": "a", "@": "a",
    "3": "e",
    "1": "i", "!": "i",
    "0": "o",
    "5": "s", "$": "s",
    "7": "t", "+": "t",
})
_LEET_CHARS = frozenset("4@31!05$7+")
_REPEATS = re.compile(r"(.)\1+")
_STRETCHED = re.compile(r"(.)\1\1")

# Word list shipped inside the better-profanity distribution
_WORDLIST_PACKAGE = "better_profanity"
_WORDLIST_FILE = "profanity_wordlist.txt"


def fold(token: str) -> str:
    """Normalize a token for lookup: strip accents, casefold, undo leetspeak.

    Leetspeak is only undone when stand-ins do not outnumber letters, so
    numbers (``455``) and codes (``5h17``) keep their digits.
    """
    decomposed = unicodedata.normalize("NFKD", token)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()
    letters = sum(ch.isalpha() for ch in base)
    subs = sum(ch in _LEET_CHARS for ch in base)
    if letters and subs <= letters:
        return base.translate(_LEET)
    return base


def collapse_repeats(word: str) -> str:
    """``fuuuck`` -> ``fuck``."""
    return _REPEATS.sub(r"\1", word)


def is_stretched(word: str) -> bool:
    """True when some character repeats three or more times in a row."""
    return _STRETCHED.search(word) is not None


def word_key(word: str) -> tuple[str, ...]:
    """Lookup key for a word or phrase (``bad dog``, ``f-u-c-k``)."""
    return tuple(fold(t) for t in TOKEN_PATTERN.findall(word))


@dataclass(frozen=True)
class LexiconSnapshot:
    """Immutable view of the dictionary at one point in time."""
    entries: Mapping[tuple[str, ...], Severity] = field(default_factory=lambda: MappingProxyType({}))
    max_words: int = 0
    # collapse_repeats(word) -> severity, for single-word entries
    collapsed: Mapping[str, Severity] = field(default_factory=lambda: MappingProxyType({}))

    def get(self, key: tuple[str, ...]) -> Severity | None:
        return self.entries.get(key)

    def get_stretched(self, token: str) -> Severity | None:
        """Match a drawn-out spelling such as ``fuuuck`` or ``asssshole``.

        Entries with their own double letters are only reached through the
        collapsed index when the token repeats a character at least three
        times, so ``as`` never hits ``ass``.
        """
        squeezed = collapse_repeats(token)
        severity = self.entries.get((squeezed,))
        if severity is None and is_stretched(token):
            severity = self.collapsed.get(squeezed)
        return severity


class VulgarDictionary:
    """Word/phrase → Severity lexicon with snapshot-and-swap updates."""

    __slots__ = ("_snapshot", "_lock")

    def __init__(self, entries: Iterable[VulgarEntry] = ()) -> None:
        self._snapshot = LexiconSnapshot()
        self._lock = threading.Lock()
        entries = list(entries)
        if entries:
            self.add_words(entries)

    # ------------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------------

    def add_words(self, entries: Iterable[VulgarEntry]) -> None:
        """Register every entry, or none of them.

        The whole batch is validated before anything is committed; an empty
        word raises EmptyWordError and leaves the dictionary unchanged.
        Re-registering a word replaces its severity.
        """
        entries = list(entries)
        for i, entry in enumerate(entries):
            if not entry.word:
                raise EmptyWordError(i)

        keyed: list[tuple[tuple[str, ...], Severity]] = []
        for entry in entries:
            key = word_key(entry.word)
            if not key:
                logger.warning(f"Vulgar word {entry.word!r} has no matchable characters; ignored")
                continue
            keyed.append((key, entry.severity))

        with self._lock:
            merged = dict(self._snapshot.entries)
            merged.update(keyed)
            collapsed = dict(self._snapshot.collapsed)
            collapsed.update((collapse_repeats(k[0]), s) for k, s in keyed if len(k) == 1)
            max_words = max((len(k) for k, _ in keyed), default=0)
            self._snapshot = LexiconSnapshot(
                entries=MappingProxyType(merged),
                max_words=max(self._snapshot.max_words, max_words),
                collapsed=MappingProxyType(collapsed),
            )
        logger.info(f"Registered {len(keyed)} vulgar words ({len(merged)} total)")

    def snapshot(self) -> LexiconSnapshot:
        return self._snapshot

    def lookup(self, word: str) -> Severity | None:
        """Severity registered for ``word`` (after normalization), if any."""
        return self._snapshot.get(word_key(word))

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.lookup(word) is not None

    def __len__(self) -> int:
        return len(self._snapshot.entries)


def load_default_words(severity: Severity = Severity.INAPPROPRIATE) -> list[VulgarEntry]:
    """The better-profanity word list as VulgarEntry objects."""
    text = resources.files(_WORDLIST_PACKAGE).joinpath(_WORDLIST_FILE).read_text(encoding="utf-8")
    return [VulgarEntry(w, severity) for w in (line.strip() for line in text.splitlines()) if w]


# Lazy singleton — don't read the word list until first use
_default: VulgarDictionary | None = None
_default_lock = threading.Lock()


def get_default_dictionary() -> VulgarDictionary:
    """The process-wide dictionary, seeded with the default vocabulary."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = VulgarDictionary(load_default_words())
    return _default
