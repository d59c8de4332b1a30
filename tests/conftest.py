import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from textscrub import Redactor, VulgarDictionary, VulgarEntry  # noqa: E402


class FakeClassifier:
    """Masks listed words (whole-word, all chars) and upper-cases the rest."""

    def __init__(self, words=(), *, trim=0):
        self.words = set(words)
        self.trim = trim
        self.calls: list[str] = []

    def classify_and_mask(self, text: str) -> str:
        self.calls.append(text)
        out = "".join(ch.upper() if len(ch.upper()) == 1 else ch for ch in text)
        for word in self.words:
            start = text.find(word)
            while start != -1:
                out = out[:start] + "*" * len(word) + out[start + len(word):]
                start = text.find(word, start + len(word))
        return out[:len(out) - self.trim] if self.trim else out


@pytest.fixture
def fake():
    return FakeClassifier({"darn"})


@pytest.fixture
def make_fake():
    return FakeClassifier


@pytest.fixture
def dictionary():
    """A private dictionary, independent of the process-wide default."""
    return VulgarDictionary([VulgarEntry("fuck"), VulgarEntry("shit")])


@pytest.fixture
def redactor(dictionary):
    return Redactor(dictionary=dictionary)
