"""Redactor — the main API.  Layered: pattern passes first, then vocabulary.

Usage:
    from textscrub import Redactor, MatchKind

    redactor = Redactor()        # reusable, thread-safe

    result = redactor.censor("mail me: bob@example.net", [MatchKind.EMAIL])
    print(result.censored)       # "mail me: ***************"
    print(result.changed)        # True
"""

from __future__ import annotations
import logging
import re
from dataclasses import dataclass, field
from typing import Iterable

from .classifier import Classifier, LexiconClassifier
from .dictionary import VulgarDictionary, get_default_dictionary
from .masking import MASK_CHAR, MaskBuffer
from .patterns import compile_custom, get_matcher
from .reconcile import overlay_merge
from .types import CensorRequest, MatchKind, RedactionResult, Severity, VulgarEntry

logger = logging.getLogger(__name__)


@dataclass
class RedactorConfig:
    """Configuration for the Redactor."""
    # Kinds used when a call passes none
    default_types: tuple[MatchKind, ...] = field(default_factory=tuple)
    default_custom_pattern: str | None = None
    # Severities the bundled classifier masks
    threshold: Severity = Severity.ANY
    # Raise on classifier length drift instead of truncating
    strict_alignment: bool = False


class Redactor:
    """Multi-pass redactor.

    Pass 1..n: pattern matchers (link, IP, email, custom), canonical order
    Pass n+1:  vocabulary classifier
    Finally:   overlay merge of the classifier output onto the masked text
    """

    def __init__(
        self,
        config: RedactorConfig | None = None,
        *,
        classifier: Classifier | None = None,
        dictionary: VulgarDictionary | None = None,
    ) -> None:
        self.config = config or RedactorConfig()
        self._dictionary = dictionary
        self.classifier = classifier or LexiconClassifier(dictionary, threshold=self.config.threshold)

    @property
    def dictionary(self) -> VulgarDictionary:
        if self._dictionary is None:
            self._dictionary = get_default_dictionary()
        return self._dictionary

    def add_words(self, entries: Iterable[VulgarEntry]) -> None:
        """Register vulgar words in this redactor's dictionary."""
        self.dictionary.add_words(entries)

    def censor(
        self,
        text: str,
        types: Iterable[MatchKind | str] = (),
        custom_pattern: str | None = None,
    ) -> RedactionResult:
        """Censor ``text``.

        Raises MissingArgumentError when CUSTOM is requested without a
        pattern and InvalidPatternError when the pattern does not compile.
        Both are raised before any masking happens.
        """
        types = tuple(types)
        if not types and self.config.default_types:
            types = self.config.default_types
        if custom_pattern is None:
            custom_pattern = self.config.default_custom_pattern
        return self.censor_request(CensorRequest(text, types, custom_pattern))

    def censor_request(self, request: CensorRequest) -> RedactionResult:
        custom: re.Pattern[str] | None = None
        if MatchKind.CUSTOM in request.requested_types:
            custom = compile_custom(request.custom_pattern)

        buffer = MaskBuffer(request.text, MASK_CHAR)
        for kind in request.requested_types:
            count = buffer.apply(get_matcher(kind, custom))
            logger.debug(f"{kind.name} pass masked {count} span(s)")

        pre_classify = buffer.text
        post_classify = self.classifier.classify_and_mask(pre_classify)
        censored = overlay_merge(
            pre_classify,
            post_classify,
            getattr(self.classifier, "mask_char", MASK_CHAR),
            strict=self.config.strict_alignment,
        )
        return RedactionResult(original=request.text, censored=censored)

    def censor_batch(
        self,
        texts: Iterable[str],
        types: Iterable[MatchKind | str] = (),
        custom_pattern: str | None = None,
    ) -> list[RedactionResult]:
        """Censor several texts with the same settings."""
        types = tuple(types)
        return [self.censor(text, types, custom_pattern) for text in texts]


# Lazy singleton for the module-level functions
_default_redactor: Redactor | None = None


def get_default_redactor() -> Redactor:
    global _default_redactor
    if _default_redactor is None:
        _default_redactor = Redactor()
    return _default_redactor


def censor(
    text: str,
    types: Iterable[MatchKind | str] = (),
    custom_pattern: str | None = None,
) -> RedactionResult:
    """Censor ``text`` with the default redactor and dictionary."""
    return get_default_redactor().censor(text, types, custom_pattern)


def add_words(entries: Iterable[VulgarEntry]) -> None:
    """Register words in the process-wide dictionary.

    All-or-nothing: an empty word raises EmptyWordError and nothing from
    the batch is committed.
    """
    get_default_dictionary().add_words(entries)
