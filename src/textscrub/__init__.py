"""textscrub — mask links, IPs, emails and vulgar words in user text."""

from .redactor import Redactor, RedactorConfig, add_words, censor
from .classifier import Classifier, LexiconClassifier
from .dictionary import VulgarDictionary, get_default_dictionary
from .config import create_redactor, load_config, load_from_yaml
from .errors import (
    AlignmentMismatchError,
    CensorError,
    EmptyWordError,
    InvalidPatternError,
    MissingArgumentError,
)
from .types import CensorRequest, MatchKind, RedactionResult, Severity, VulgarEntry

__all__ = [
    "censor", "add_words",
    "Redactor", "RedactorConfig",
    "Classifier", "LexiconClassifier",
    "VulgarDictionary", "get_default_dictionary",
    "create_redactor", "load_config", "load_from_yaml",
    "CensorError", "EmptyWordError", "MissingArgumentError",
    "InvalidPatternError", "AlignmentMismatchError",
    "CensorRequest", "MatchKind", "RedactionResult", "Severity", "VulgarEntry",
]
__version__ = "0.1.0"
