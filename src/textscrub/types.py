"""Core types."""

from __future__ import annotations
import enum
from dataclasses import dataclass, field
from typing import Iterable

from .errors import MissingArgumentError


class MatchKind(enum.Enum):
    """Pattern families that can be masked before the vocabulary pass.

    Definition order is the canonical pass order.
    """
    LINK = "link"      # e.g. https://example.net
    IP = "ip"          # e.g. 127.0.0.1
    EMAIL = "email"    # e.g. example@example.net
    CUSTOM = "custom"  # caller-supplied expression

    @classmethod
    def parse(cls, name: str | MatchKind) -> MatchKind:
        if isinstance(name, cls):
            return name
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown match kind: {name!r}") from None

    @classmethod
    def canonical(cls, kinds: Iterable[MatchKind | str]) -> tuple[MatchKind, ...]:
        """Deduplicate and sort into definition order."""
        order = list(cls)
        return tuple(sorted({cls.parse(k) for k in kinds}, key=order.index))


class Severity(enum.Flag):
    """Vocabulary taxonomy: categories, levels and the SAFE marker."""
    PROFANE = 1
    OFFENSIVE = 2
    SEXUAL = 4
    MEAN = 8
    EVASIVE = 16
    SPAM = 32
    MILD = 64
    MODERATE = 128
    SEVERE = 256
    SAFE = 512

    INAPPROPRIATE = PROFANE | OFFENSIVE | SEXUAL | MEAN
    MILD_OR_HIGHER = MILD | MODERATE | SEVERE
    MODERATE_OR_HIGHER = MODERATE | SEVERE
    ANY = PROFANE | OFFENSIVE | SEXUAL | MEAN | EVASIVE | SPAM | MILD | MODERATE | SEVERE

    @classmethod
    def parse(cls, names: str | Iterable[str] | Severity) -> Severity:
        """Build a flag from one name or several, e.g. ``["profane", "severe"]``."""
        if isinstance(names, cls):
            return names
        if isinstance(names, str):
            names = names.replace("|", ",").split(",")
        result = cls(0)
        for name in names:
            key = name.strip().upper().replace("-", "_")
            if not key:
                continue
            try:
                result |= cls[key]
            except KeyError:
                raise ValueError(f"Unknown severity: {name!r}") from None
        return result

    def names(self) -> list[str]:
        """Names of the single-bit members set in this flag."""
        return [m.name.lower() for m in type(self) if m.value & self.value and _is_single_bit(m.value)]


def _is_single_bit(value: int) -> bool:
    return value != 0 and value & (value - 1) == 0


@dataclass(frozen=True, slots=True)
class VulgarEntry:
    """A word (or space-separated phrase) and the severity it carries."""
    word: str
    severity: Severity = Severity.INAPPROPRIATE


@dataclass(frozen=True, slots=True)
class CensorRequest:
    """One censor call, normalized.

    ``requested_types`` is deduplicated and put in canonical order on
    construction, so two requests built from the same set compare equal.
    """
    text: str
    requested_types: tuple[MatchKind, ...] = field(default=())
    custom_pattern: str | None = None

    def __post_init__(self) -> None:
        kinds = MatchKind.canonical(self.requested_types)
        object.__setattr__(self, "requested_types", kinds)
        if MatchKind.CUSTOM in kinds and self.custom_pattern is None:
            raise MissingArgumentError()


@dataclass(frozen=True, slots=True)
class RedactionResult:
    """Result of censoring one text."""
    original: str
    censored: str

    @property
    def changed(self) -> bool:
        return self.original != self.censored

    def to_dict(self) -> dict[str, object]:
        return {
            "original": self.original,
            "censored": self.censored,
            "changed": self.changed,
        }
